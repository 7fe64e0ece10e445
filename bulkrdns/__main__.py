"""
bulkrdns - Bulk reverse DNS resolver

Entry point for running as a module:
    python -m bulkrdns -r <resolver> < ips.txt
"""

from .cli import main

if __name__ == '__main__':
    main()
