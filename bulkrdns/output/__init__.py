"""
Output modules for bulkrdns
"""

from .console import ConsoleOutput
from .sink import OutputSink

__all__ = ['ConsoleOutput', 'OutputSink']
