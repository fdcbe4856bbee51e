"""Flat, id-indexed storage for trie nodes."""

from typing import Generic, List, Optional, TypeVar

from .node import Node

T = TypeVar('T')


class NodeArena(Generic[T]):
    """Owns every node of one trie under a stable integer id.

    Retired slots are recycled by later allocations, so an id is only
    stable for as long as its node is live.
    """

    def __init__(self):
        self._slots: List[Optional[Node[T]]] = []
        self._free: List[int] = []

    def allocate(self, symbol: Optional[str] = None) -> int:
        """Create an empty non-terminal node and return its id.

        Args:
            symbol: Edge symbol for the node (None for a root).

        Returns:
            Id of the new node.
        """
        node: Node[T] = Node(symbol=symbol)
        if self._free:
            node_id = self._free.pop()
            self._slots[node_id] = node
        else:
            node_id = len(self._slots)
            self._slots.append(node)
        return node_id

    def get(self, node_id: int) -> Node[T]:
        """Return the live node stored under node_id.

        Raises:
            LookupError: If the id was never allocated or has been retired.
        """
        if 0 <= node_id < len(self._slots):
            node = self._slots[node_id]
            if node is not None:
                return node
        raise LookupError(f"No live node with id {node_id}")

    def retire(self, node_id: int) -> None:
        """Release the slot of a childless node.

        Raises:
            LookupError: If the id is not live.
            ValueError: If the node still has children.
        """
        node = self.get(node_id)
        if node.children:
            raise ValueError(f"Cannot retire node {node_id}: it has children")
        self._slots[node_id] = None
        self._free.append(node_id)

    def __contains__(self, node_id: object) -> bool:
        return (
            isinstance(node_id, int)
            and 0 <= node_id < len(self._slots)
            and self._slots[node_id] is not None
        )

    def __len__(self) -> int:
        """Return number of live nodes."""
        return len(self._slots) - len(self._free)
