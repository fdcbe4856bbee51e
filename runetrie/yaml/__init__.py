"""YAML-based trie definitions.

This module provides a declarative YAML format for populating a Trie,
plus a small command line front end for querying it.

Example trie.yaml:
    config:
      on_duplicate: skip

    entries:
      hello: ok
      help: ok
      world: ok

Long form entries allow repeated keys:
    entries:
      - key: hello
        value: 1
      - key: hello
        value: 2

Usage:
    from runetrie.yaml import load_trie
    trie = load_trie('trie.yaml')

CLI:
    python -m runetrie.yaml --tree trie.yaml
"""

from .parser import parse_trie_file, parse_trie_string, TrieDocument
from .converter import document_to_trie
from .runner import load_trie, main

__all__ = [
    'parse_trie_file',
    'parse_trie_string',
    'TrieDocument',
    'document_to_trie',
    'load_trie',
    'main',
]
