"""Convert parsed trie documents to Trie objects."""

import logging

from runetrie.exceptions import AlreadyExistsError, TrieConfigError
from runetrie.trie import Trie

from .parser import TrieDocument

logger = logging.getLogger(__name__)


def document_to_trie(document: TrieDocument) -> Trie:
    """Build a Trie from a parsed document.

    Entries are inserted in document order. With ``on_duplicate: skip``
    a repeated key keeps its first value; otherwise it is an error.

    Args:
        document: Parsed trie document

    Returns:
        Populated Trie

    Raises:
        TrieConfigError: On a repeated key when on_duplicate is 'error'
    """
    on_duplicate = document.config.get('on_duplicate', 'error')

    trie: Trie = Trie()
    for key, value in document.entries:
        try:
            trie.insert(key, value)
        except AlreadyExistsError as e:
            if on_duplicate == 'error':
                raise TrieConfigError(f"Duplicate entry: {key!r}") from e
            logger.info("skipping duplicate entry %r", key)

    logger.debug("loaded %d key(s) into %d node(s)", len(trie), trie.node_count)
    return trie
