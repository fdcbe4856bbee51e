"""Prefix trie keyed by Unicode code points.

Each edge of the tree is labelled by exactly one character of the key, so
keys sharing a prefix share the nodes that spell it. Nodes live in a
NodeArena and refer to their children by id.
"""

import logging
from collections.abc import Mapping
from typing import (
    Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar,
    Union,
)

from .arena import NodeArena
from .exceptions import AlreadyExistsError, NotFoundError, TrieError
from .node import ABSENT, Node, NodeView
from .render import render_tree
from .traversal import iter_breadth_first, iter_post_order, iter_terminal_items

T = TypeVar('T')

logger = logging.getLogger(__name__)


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Trie keys must be str, not {type(key).__name__}")


class Trie(Generic[T]):
    """Prefix tree mapping string keys to values.

    Supports:
    - insert / search / delete of exact keys
    - enumeration of all keys in insertion (pre-order) order
    - prefix queries (starts_with, keys_with_prefix, longest prefix match)
    - O(1) clear

    The empty string is a valid key; it is stored on the root node.
    Not safe for concurrent use.

    Example:
        trie = Trie()
        trie.insert("hello", 1)
        trie.insert("help", 2)

        trie.search("help")        # Returns 2
        trie.get_all()             # Returns ["hello", "help"]
        trie.delete("hello")       # Returns 1, prunes the "lo" branch
        trie.search("hel")         # Raises NotFoundError
    """

    def __init__(self, entries: Optional[Union[Mapping, Iterable]] = None):
        """Initialize trie, optionally populating it.

        Args:
            entries: Mapping or iterable of (key, value) pairs to insert.
        """
        self._arena: NodeArena[T] = NodeArena()
        self._root = self._arena.allocate()
        self._size = 0
        if entries is not None:
            self.update(entries)

    # Core operations

    def insert(self, key: str, value: T) -> None:
        """Insert key with an associated value.

        Missing nodes along the path are created; existing ones are shared.

        Args:
            key: The key to insert.
            value: Value to associate with key.

        Raises:
            AlreadyExistsError: If key is already stored. The stored value
                is left unchanged.
            TypeError: If key is not a str.
        """
        _check_key(key)
        node = self._arena.get(self._root)
        for symbol in key:
            child_id = node.children.get(symbol)
            if child_id is None:
                child_id = self._arena.allocate(symbol)
                node.children[symbol] = child_id
                logger.debug("created node %d for %r", child_id, symbol)
            node = self._arena.get(child_id)

        if node.terminal:
            raise AlreadyExistsError(key)
        node.terminal = True
        node.value = value
        self._size += 1

    def search(self, key: str) -> T:
        """Return the value stored for key.

        A key that only exists as a prefix of longer keys is not found.

        Raises:
            NotFoundError: If key is not stored.
            TypeError: If key is not a str.
        """
        _check_key(key)
        node = self._find_node(key)
        if node is None or not node.terminal:
            raise NotFoundError(key)
        return node.value

    def delete(self, key: str) -> T:
        """Remove key and return its value.

        Nodes left both non-terminal and childless are pruned, walking back
        up towards the root until a node that is still needed by another
        key is reached. The root itself is never removed.

        Raises:
            NotFoundError: If key is not stored. The trie is unchanged.
            TypeError: If key is not a str.
        """
        _check_key(key)

        # Walk down first so a missing key fails before anything changes.
        path: List[Tuple[Node[T], str, int]] = []  # (parent, symbol, child_id)
        node = self._arena.get(self._root)
        for symbol in key:
            child_id = node.children.get(symbol)
            if child_id is None:
                raise NotFoundError(key)
            path.append((node, symbol, child_id))
            node = self._arena.get(child_id)
        if not node.terminal:
            raise NotFoundError(key)

        value = node.value
        node.terminal = False
        node.value = ABSENT
        self._size -= 1

        # Unwind: a child is detachable iff it is now childless and not
        # terminal; detaching it may in turn make its parent detachable.
        detachable = not node.children
        for parent, symbol, child_id in reversed(path):
            if not detachable:
                break
            del parent.children[symbol]
            self._arena.retire(child_id)
            logger.debug("pruned node %d for %r", child_id, symbol)
            detachable = not parent.children and not parent.terminal
        return value

    def get_all(self) -> List[str]:
        """Return all stored keys.

        Order is pre-order depth first with children in insertion order:
        a key is listed before any longer key it is a prefix of.
        """
        return [key for key, _ in iter_terminal_items(self._arena, self._root)]

    def clear(self) -> None:
        """Remove every key in constant time."""
        logger.debug("clearing trie with %d keys", self._size)
        self._arena = NodeArena()
        self._root = self._arena.allocate()
        self._size = 0

    # Mapping-style helpers

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default if key is not stored."""
        try:
            return self.search(key)
        except NotFoundError:
            return default

    def items(self) -> List[Tuple[str, T]]:
        """Return all (key, value) pairs in get_all() order."""
        return list(iter_terminal_items(self._arena, self._root))

    def update(self, entries: Union[Mapping, Iterable[Tuple[str, T]]]) -> None:
        """Insert every (key, value) pair from a mapping or iterable.

        Pairs before a duplicate stay inserted.

        Raises:
            AlreadyExistsError: On the first key that is already stored.
        """
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._find_node(key)
        return node is not None and node.terminal

    def __getitem__(self, key: str) -> T:
        return self.search(key)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all())

    def __len__(self) -> int:
        """Return number of stored keys."""
        return self._size

    # Prefix queries

    def starts_with(self, prefix: str) -> bool:
        """Check whether any stored key begins with prefix."""
        _check_key(prefix)
        node = self._find_node(prefix)
        return node is not None and (node.terminal or bool(node.children))

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """Return stored keys beginning with prefix, in get_all() order."""
        _check_key(prefix)
        node_id = self._find_node_id(prefix)
        if node_id is None:
            return []
        return [key for key, _ in
                iter_terminal_items(self._arena, node_id, prefix)]

    def find_longest_prefix(self, key: str, default: Any = None) -> Any:
        """Find the value of the longest stored key that prefixes key.

        Args:
            key: The key to find a matching prefix for.
            default: Returned when no stored key is a prefix of key. Pass a
                marker such as ABSENT to tell "no match" apart from a
                stored None.

        Returns:
            Value of the longest matching stored key, or default.

        Example:
            If "he" and "hell" are stored, find_longest_prefix("hello")
            returns the value for "hell".
        """
        _check_key(key)
        node = self._arena.get(self._root)
        result = node.value if node.terminal else default
        for symbol in key:
            child_id = node.children.get(symbol)
            if child_id is None:
                break
            node = self._arena.get(child_id)
            if node.terminal:
                result = node.value
        return result

    def find_all_prefixes(self, key: str) -> List[T]:
        """Find the values of all stored keys that prefix key.

        Returns:
            Values ordered from shortest to longest matching key.
        """
        _check_key(key)
        node = self._arena.get(self._root)
        results: List[T] = [node.value] if node.terminal else []
        for symbol in key:
            child_id = node.children.get(symbol)
            if child_id is None:
                break
            node = self._arena.get(child_id)
            if node.terminal:
                results.append(node.value)
        return results

    # Structure inspection

    @property
    def node_count(self) -> int:
        """Number of live nodes, root included."""
        return len(self._arena)

    def child_symbols(self, prefix: str = '') -> Tuple[str, ...]:
        """Return the child symbols of the node reached by prefix.

        Returns an empty tuple if no node spells prefix.
        """
        _check_key(prefix)
        node = self._find_node(prefix)
        if node is None:
            return ()
        return tuple(node.children)

    def view(self) -> NodeView:
        """Return a read-only snapshot of the whole tree."""
        built: Dict[int, NodeView] = {}
        for node_id, node in iter_post_order(self._arena, self._root):
            built[node_id] = NodeView(
                symbol=node.symbol,
                terminal=node.terminal,
                children=tuple(built.pop(child_id)
                               for child_id in node.children.values()),
            )
        return built[self._root]

    def walk_breadth_first(self) -> Iterator[Tuple[int, str, bool]]:
        """Yield (depth, path, terminal) for every non-root node, level order."""
        for depth, path, node in iter_breadth_first(self._arena, self._root):
            yield depth, path, node.terminal

    def verify(self) -> None:
        """Check structural invariants.

        Raises:
            TrieError: If a non-root node is both non-terminal and childless,
                or if the key count or node count is out of sync.
        """
        terminals = 0
        visited = 0
        for node_id, node in iter_post_order(self._arena, self._root):
            visited += 1
            if node.terminal:
                terminals += 1
            elif node_id != self._root and not node.children:
                raise TrieError(f"Dead node {node_id} ({node.symbol!r})")
            elif node.value is not ABSENT:
                raise TrieError(f"Non-terminal node {node_id} holds a value")
        if terminals != self._size:
            raise TrieError(
                f"Key count {self._size} does not match {terminals} terminals")
        if visited != len(self._arena):
            raise TrieError(
                f"{len(self._arena) - visited} unreachable node(s) in arena")

    def __str__(self) -> str:
        return render_tree(self.view())

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._size} keys, "
                f"{self.node_count} nodes)")

    # Internal helpers

    def _find_node_id(self, prefix: str) -> Optional[int]:
        node_id = self._root
        for symbol in prefix:
            node_id = self._arena.get(node_id).children.get(symbol)
            if node_id is None:
                return None
        return node_id

    def _find_node(self, prefix: str) -> Optional[Node[T]]:
        node_id = self._find_node_id(prefix)
        return None if node_id is None else self._arena.get(node_id)
