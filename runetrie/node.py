"""Node types for the trie arena.

Nodes never reference each other directly. A node's children are stored
as an ordered mapping from edge symbol to child id in the owning
NodeArena, which keeps the graph free of aliasing and lets deletion be
expressed as "drop the id from the parent, retire the slot".
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar('T')


class _Absent(Enum):
    """Marker for a node that holds no value."""
    ABSENT = auto()

    def __repr__(self) -> str:
        return 'ABSENT'


ABSENT = _Absent.ABSENT


@dataclass
class Node(Generic[T]):
    """Single node stored in a NodeArena.

    Attributes:
        symbol: Code point labelling the edge from the parent (None for root).
        value: Stored value, or ABSENT unless the node is terminal.
        terminal: Whether the root-to-node path spells a stored key.
        children: Child node ids keyed by symbol, in insertion order.
    """
    symbol: Optional[str] = None
    value: Union[T, _Absent] = ABSENT
    terminal: bool = False
    children: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, repr=False, eq=False)
class NodeView:
    """Read-only snapshot of a node and its subtree.

    Handed to formatters and other readers in place of live nodes.
    Views compare by identity and repr only their direct children, so deep
    snapshots never recurse through the generated dataclass methods.
    """
    symbol: Optional[str]
    terminal: bool
    children: Tuple['NodeView', ...] = ()

    def child_symbols(self) -> Tuple[str, ...]:
        """Return the symbols of the direct children, in order."""
        return tuple(child.symbol for child in self.children)

    def __repr__(self) -> str:
        return (f"NodeView(symbol={self.symbol!r}, terminal={self.terminal}, "
                f"children={self.child_symbols()!r})")
