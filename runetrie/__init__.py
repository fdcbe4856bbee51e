"""Prefix trie keyed by Unicode code points.

This package provides a trie whose edges are labelled by single
characters, with exact-match insert/search/delete, pruning of dead
branches on delete, ordered key enumeration and prefix queries.

Example:
    from runetrie import Trie

    trie = Trie()
    trie.insert("hello", "ok")
    trie.insert("help", "ok")
    trie.get_all()        # ["hello", "help"]
    print(trie)           # box-drawing diagram of the tree
"""

from .exceptions import (
    TrieError,
    AlreadyExistsError,
    NotFoundError,
    TrieConfigError,
)
from .node import ABSENT, Node, NodeView
from .arena import NodeArena
from .render import render_tree
from .trie import Trie

__all__ = [
    # Errors
    'TrieError',
    'AlreadyExistsError',
    'NotFoundError',
    'TrieConfigError',
    # Data structures
    'ABSENT',
    'Node',
    'NodeView',
    'NodeArena',
    'Trie',
    # Formatting
    'render_tree',
]
