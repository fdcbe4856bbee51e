"""Load tries from YAML files and query them from the command line."""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from runetrie.exceptions import TrieError
from runetrie.render import render_tree
from runetrie.trie import Trie

from .converter import document_to_trie
from .parser import parse_trie_file

logger = logging.getLogger(__name__)


def load_trie(yaml_path: Union[str, Path]) -> Trie:
    """Parse a trie YAML file and build the Trie it describes.

    Example:
        trie = load_trie('words.yaml')
        print(trie.get_all())
    """
    yaml_path = Path(yaml_path)
    document = parse_trie_file(yaml_path)
    logger.debug("parsed %d entries from %s", len(document.entries), yaml_path)
    return document_to_trie(document)


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point for querying a trie YAML file.

    Usage:
        python -m runetrie.yaml [options] [yaml_file]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Load a trie from a YAML file and query it',
        prog='python -m runetrie.yaml',
    )
    parser.add_argument(
        'yaml_file',
        nargs='?',
        default='trie.yaml',
        help='Path to the YAML file (default: trie.yaml)',
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '--tree',
        action='store_true',
        help='Print the trie as a tree diagram',
    )
    group.add_argument(
        '--search',
        metavar='KEY',
        default=None,
        help='Print the value stored for KEY',
    )
    group.add_argument(
        '--prefix',
        metavar='PREFIX',
        default=None,
        help='Print only keys starting with PREFIX',
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)',
    )

    parsed = parser.parse_args(args)
    logging.basicConfig(level=getattr(logging, parsed.log_level))

    try:
        trie = load_trie(parsed.yaml_file)

        if parsed.tree:
            print(render_tree(trie.view()))
        elif parsed.search is not None:
            print(trie.search(parsed.search))
        elif parsed.prefix is not None:
            for key in trie.keys_with_prefix(parsed.prefix):
                print(key)
        else:
            for key in trie.get_all():
                print(key)
        return 0

    except (FileNotFoundError, TrieError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
