"""YAML parsing and validation for trie documents.

This module handles parsing trie YAML files and validating their structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Tuple, Union

import yaml

from runetrie.exceptions import TrieConfigError

VALID_CONFIG_KEYS = {'on_duplicate'}
VALID_ON_DUPLICATE = {'error', 'skip'}


@dataclass
class TrieDocument:
    """Parsed trie YAML document."""
    config: Dict[str, Any] = field(default_factory=dict)
    entries: List[Tuple[str, Any]] = field(default_factory=list)


def parse_trie_file(path: Union[str, Path]) -> TrieDocument:
    """Parse and validate a trie YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        TrieDocument with parsed configuration and entries

    Raises:
        TrieConfigError: If the file is invalid or malformed
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TrieConfigError(f"Invalid YAML syntax: {e}")
    except UnicodeDecodeError as e:
        raise TrieConfigError(f"YAML file is not valid UTF-8: {path}: {e}")
    except OSError as e:
        raise TrieConfigError(f"Cannot read YAML file {path}: {e}")

    return _validate_document(data)


def parse_trie_string(content: str) -> TrieDocument:
    """Parse a trie YAML document from a string.

    Args:
        content: YAML content as string

    Returns:
        TrieDocument with parsed configuration and entries
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TrieConfigError(f"Invalid YAML syntax: {e}")

    return _validate_document(data)


def _validate_document(data: Any) -> TrieDocument:
    """Validate parsed YAML data structure.

    Args:
        data: Result of yaml.safe_load

    Returns:
        Validated TrieDocument

    Raises:
        TrieConfigError: If validation fails
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise TrieConfigError("YAML root must be a mapping")

    config = data.get('config') or {}
    if not isinstance(config, dict):
        raise TrieConfigError("'config' must be a mapping")
    _validate_config(config)

    entries = data.get('entries') or []
    if isinstance(entries, dict):
        # Short form: key -> value
        pairs = [(_validate_entry_key(key, key), value)
                 for key, value in entries.items()]
    elif isinstance(entries, list):
        pairs = [_validate_entry(entry, i) for i, entry in enumerate(entries)]
    else:
        raise TrieConfigError("'entries' must be a mapping or a list")

    return TrieDocument(config=config, entries=pairs)


def _validate_config(config: Dict[str, Any]) -> None:
    unknown = set(config) - VALID_CONFIG_KEYS
    if unknown:
        raise TrieConfigError(
            f"Unknown config key(s): {sorted(map(str, unknown))}. "
            f"Valid keys: {sorted(VALID_CONFIG_KEYS)}"
        )

    on_duplicate = config.get('on_duplicate', 'error')
    if (not isinstance(on_duplicate, str)
            or on_duplicate not in VALID_ON_DUPLICATE):
        raise TrieConfigError(
            f"'on_duplicate' has invalid value '{on_duplicate}'. "
            f"Valid values: {sorted(VALID_ON_DUPLICATE)}"
        )


def _validate_entry(entry: Any, index: int) -> Tuple[str, Any]:
    """Validate a long form entry: a mapping with 'key' and optional 'value'.

    Args:
        entry: Entry from the 'entries' list
        index: Index in the entries list (for error messages)

    Returns:
        (key, value) pair

    Raises:
        TrieConfigError: If validation fails
    """
    if not isinstance(entry, dict):
        raise TrieConfigError(f"Entry {index} must be a mapping")

    if 'key' not in entry:
        raise TrieConfigError(f"Entry {index} missing required field 'key'")

    unknown = set(entry) - {'key', 'value'}
    if unknown:
        raise TrieConfigError(
            f"Entry {index} has unknown field(s): {sorted(map(str, unknown))}"
        )

    key = _validate_entry_key(entry['key'], index)
    return key, entry.get('value')


def _validate_entry_key(key: Any, where: Any) -> str:
    if not isinstance(key, str):
        raise TrieConfigError(
            f"Entry {where!r}: key must be a string, "
            f"got {type(key).__name__} (quote it in YAML)"
        )
    return key
