"""
bulkrdns - Bulk reverse DNS resolver

Resolves lists of IP addresses to hostnames concurrently over a fixed
pool of worker threads.
"""

__version__ = "1.0.0"
__author__ = "bulkrdns"
