"""
PTR lookup sent straight to the configured resolver
"""

import dns.exception
import dns.resolver

from ..models import ResolverContext
from .base import BaseLookup, LookupFailed


class DirectLookup(BaseLookup):
    """
    PTR lookup via dnspython.

    Queries go to the resolved resolver endpoint, over TCP or UDP
    depending on the configured protocol. Each PTR target is one record.
    """

    def __init__(self, context: ResolverContext):
        super().__init__(context)
        self._resolver = dns.resolver.Resolver(configure=False)
        # port must be set before nameservers
        self._resolver.port = context.port
        self._resolver.nameservers = [context.address]

    def records(self, ip: str) -> list:
        try:
            answer = self._resolver.resolve_address(ip, tcp=self.context.tcp)
        except (dns.exception.DNSException, ValueError) as e:
            raise LookupFailed(str(e)) from e
        return list(answer)

    def hostname(self, record) -> str:
        target = getattr(record, 'target', None)
        if target is None:
            raise LookupFailed(f"not a PTR record: {record}")
        return target.to_text(omit_final_dot=True)
