"""
Reverse lookup strategies for bulkrdns
"""

from .base import BaseLookup, LookupFailed
from .system import SystemLookup
from .direct import DirectLookup

__all__ = ['BaseLookup', 'LookupFailed', 'SystemLookup', 'DirectLookup']
