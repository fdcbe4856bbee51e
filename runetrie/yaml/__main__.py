"""CLI entry point for runetrie.yaml module.

Usage:
    python -m runetrie.yaml [options] [yaml_file]

Example:
    python -m runetrie.yaml words.yaml
    python -m runetrie.yaml --tree words.yaml
    python -m runetrie.yaml --search hello words.yaml
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
