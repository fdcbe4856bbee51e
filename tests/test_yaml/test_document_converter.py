"""Tests for building tries from parsed documents."""

import logging

import pytest

pytest.importorskip("yaml")

from runetrie import Trie
from runetrie.exceptions import TrieConfigError
from runetrie.yaml.converter import document_to_trie
from runetrie.yaml.parser import TrieDocument, parse_trie_string


class TestDocumentToTrie:
    """Tests for document_to_trie function."""

    def test_builds_trie(self):
        """Test entries are inserted in order."""
        document = TrieDocument(entries=[("hello", "ok"), ("help", "ok"),
                                         ("world", "ok")])
        trie = document_to_trie(document)

        assert isinstance(trie, Trie)
        assert trie.get_all() == ["hello", "help", "world"]
        assert trie.child_symbols() == ("h", "w")

    def test_duplicate_is_error_by_default(self):
        """Test repeated keys raise TrieConfigError."""
        document = parse_trie_string(
            "entries:\n  - key: a\n    value: 1\n  - key: a\n    value: 2\n")

        with pytest.raises(TrieConfigError, match="Duplicate entry: 'a'"):
            document_to_trie(document)

    def test_duplicate_skip_keeps_first(self, caplog):
        """Test on_duplicate: skip keeps the first value and logs."""
        document = TrieDocument(
            config={'on_duplicate': 'skip'},
            entries=[("a", 1), ("a", 2), ("b", 3)],
        )

        with caplog.at_level(logging.INFO, logger="runetrie.yaml.converter"):
            trie = document_to_trie(document)

        assert trie.items() == [("a", 1), ("b", 3)]
        assert "skipping duplicate entry 'a'" in caplog.text

    def test_empty_document(self):
        """Test empty document gives an empty trie."""
        trie = document_to_trie(TrieDocument())
        assert trie.get_all() == []
        assert trie.node_count == 1
