"""
Lookup worker
"""

import logging
from typing import Sequence

from ..lookup import BaseLookup, LookupFailed
from ..models import WorkerStats
from ..output import OutputSink


logger = logging.getLogger(__name__)


class LookupWorker:
    """
    Resolves one partition of input addresses, in order.

    In default mode every hostname is written as soon as it is known,
    paired with its source address. In domain-only mode the hostnames of
    one address are collected and written as a single batch so they stay
    together in the output.

    Failures never leave the worker: an address that does not resolve is
    dropped, and a record that yields no name is skipped while its
    siblings are still tried.
    """

    def __init__(
        self,
        items: Sequence[str],
        sink: OutputSink,
        lookup: BaseLookup,
        domain_only: bool = False,
        name: str = 'worker'
    ):
        self.items = items
        self.sink = sink
        self.lookup = lookup
        self.domain_only = domain_only
        self.name = name

    def run(self) -> WorkerStats:
        stats = WorkerStats()

        with self.lookup:
            for ip in self.items:
                stats.items += 1
                names = self._process(ip)
                if names:
                    stats.resolved += 1
                    stats.names += names

        logger.debug("%s finished: %d/%d resolved", self.name,
                     stats.resolved, stats.items)
        return stats

    def _process(self, ip: str) -> int:
        """Resolve and write a single address, return the number of names"""
        try:
            records = self.lookup.records(ip)
        except LookupFailed as e:
            logger.debug("%s: skipping %r: %s", self.name, ip, e)
            return 0

        domains: list[str] = []

        for record in records:
            try:
                host = self.lookup.hostname(record)
            except LookupFailed as e:
                logger.debug("%s: no name for a record of %r: %s",
                             self.name, ip, e)
                continue

            domains.append(host)
            if not self.domain_only:
                self.sink.write_line(f"{ip}\t{host}")

        if self.domain_only:
            self.sink.write_batch(domains)

        return len(domains)
