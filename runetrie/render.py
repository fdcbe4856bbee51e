"""Text rendering of a trie as a box-drawing tree diagram.

Example:
    .
    ├── h
    │   └── e
    │       └── l
    │           ├── l
    │           │   └── o*
    │           └── p*
    └── w
        └── o*

Terminal nodes are suffixed with '*'. The root is drawn as '.'.
"""

from typing import List, Sequence, Tuple

from .node import NodeView

TERMINAL_MARK = '*'


def render_tree(root: NodeView) -> str:
    """Render a NodeView snapshot as a multi-line diagram.

    Uses an explicit stack, so depth is limited only by memory.
    """
    lines = ['.' + _mark(root)]
    # (node, indent, is_last), pushed in reverse so siblings pop in order
    stack: List[Tuple[NodeView, str, bool]] = _pending(root.children, '')
    while stack:
        node, indent, is_last = stack.pop()
        connector = '└── ' if is_last else '├── '
        lines.append(f"{indent}{connector}{node.symbol}{_mark(node)}")
        stack.extend(
            _pending(node.children, indent + ('    ' if is_last else '│   ')))
    return '\n'.join(lines)


def _pending(children: Sequence[NodeView],
             indent: str) -> List[Tuple[NodeView, str, bool]]:
    last = len(children) - 1
    return [(child, indent, index == last)
            for index, child in reversed(list(enumerate(children)))]


def _mark(node: NodeView) -> str:
    return TERMINAL_MARK if node.terminal else ''
