"""
Abstract base class for reverse lookup strategies
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models import ResolverContext


class LookupFailed(Exception):
    """A single item or record could not be resolved"""


class BaseLookup(ABC):
    """
    Abstract base class for reverse lookups.

    A lookup is done in two steps so that a failure for one address
    record does not hide its siblings:

    1. records(ip) enumerates address records for the input item
    2. hostname(record) derives a hostname from a single record
    """

    def __init__(self, context: ResolverContext):
        self.context = context

    @abstractmethod
    def records(self, ip: str) -> list[Any]:
        """
        Enumerate address records for an IP address.

        Args:
            ip: IP address as read from input

        Returns:
            Records in the order returned by the underlying call

        Raises:
            LookupFailed: if the address cannot be resolved
        """
        pass

    @abstractmethod
    def hostname(self, record: Any) -> str:
        """
        Derive a hostname from one address record.

        Raises:
            LookupFailed: if no name can be derived
        """
        pass

    def close(self):
        """Clean up resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
