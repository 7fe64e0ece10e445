"""
Concurrent lookup engine for bulkrdns
"""

from .partition import partition
from .worker import LookupWorker
from .runner import Engine

__all__ = ['partition', 'LookupWorker', 'Engine']
