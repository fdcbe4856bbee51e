"""Exceptions raised by runetrie."""


class TrieError(Exception):
    """Base class for all trie errors."""
    pass


class AlreadyExistsError(TrieError):
    """Key is already stored in the trie.

    Attributes:
        key: The key passed to insert.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"key already exists in trie: {key!r}")


class NotFoundError(TrieError, KeyError):
    """Key is not stored in the trie.

    Subclasses KeyError so ``trie[key]`` behaves like a mapping lookup.

    Attributes:
        key: The key that was looked up.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"key not found in trie: {key!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class TrieConfigError(TrieError):
    """Error parsing or validating a trie YAML document."""
    pass
