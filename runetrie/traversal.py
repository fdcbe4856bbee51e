"""Named traversals over a NodeArena.

Each traversal is a generator: lazy, finite, and restartable by calling
it again. None of them tolerate the trie being mutated while they run;
callers that need a snapshot should materialize the results first.
"""

from collections import deque
from typing import Iterator, Tuple, TypeVar

from .arena import NodeArena
from .node import Node

T = TypeVar('T')


def iter_terminal_items(
    arena: NodeArena[T], start_id: int, prefix: str = ''
) -> Iterator[Tuple[str, T]]:
    """Yield (key, value) for every terminal node at or below start_id.

    Pre-order depth first, children visited in insertion order. A terminal
    node is emitted before its descendants.

    Args:
        arena: Arena holding the nodes.
        start_id: Node to start from.
        prefix: Key spelled by the path to start_id.
    """
    stack = [(start_id, prefix)]
    while stack:
        node_id, key = stack.pop()
        node = arena.get(node_id)
        if node.terminal:
            yield key, node.value
        # reversed so the first-inserted child is popped first
        for symbol, child_id in reversed(node.children.items()):
            stack.append((child_id, key + symbol))


def iter_post_order(
    arena: NodeArena[T], start_id: int
) -> Iterator[Tuple[int, Node[T]]]:
    """Yield (node_id, node) for start_id and every descendant.

    Children come before their parent, siblings in insertion order.
    """
    stack = [(start_id, False)]
    while stack:
        node_id, expanded = stack.pop()
        node = arena.get(node_id)
        if expanded:
            yield node_id, node
            continue
        stack.append((node_id, True))
        for child_id in reversed(node.children.values()):
            stack.append((child_id, False))


def iter_breadth_first(
    arena: NodeArena[T], start_id: int
) -> Iterator[Tuple[int, str, Node[T]]]:
    """Yield (depth, key, node) for every node below start_id, level by level.

    The start node itself is not yielded; its children are depth 1.
    """
    queue = deque((1, symbol, child_id)
                  for symbol, child_id in arena.get(start_id).children.items())
    while queue:
        depth, key, node_id = queue.popleft()
        node = arena.get(node_id)
        yield depth, key, node
        for symbol, child_id in node.children.items():
            queue.append((depth + 1, key + symbol, child_id))
