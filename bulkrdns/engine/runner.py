"""
Bulk lookup orchestrator
"""

import logging
import threading
from typing import Callable, Optional, Sequence

from ..context import build_context
from ..lookup import BaseLookup, DirectLookup, SystemLookup
from ..models import Config, ResolverContext, RunSummary
from ..output import OutputSink
from .partition import partition
from .worker import LookupWorker


logger = logging.getLogger(__name__)

LookupFactory = Callable[[ResolverContext], BaseLookup]


class Engine:
    """
    Bulk reverse lookup orchestrator.

    Resolves the configured resolver once, splits the input into one
    static partition per thread and runs a LookupWorker on each, each on
    its own thread. All workers share the same read-only ResolverContext
    and OutputSink.
    """

    def __init__(
        self,
        config: Config,
        sink: Optional[OutputSink] = None,
        lookup_factory: Optional[LookupFactory] = None
    ):
        if config.threads < 1:
            raise ValueError(f"thread count must be >= 1, got {config.threads}")

        self.config = config
        self.sink = sink or OutputSink(lock=threading.Lock())
        self.lookup_factory = lookup_factory or self._default_factory()
        self.context: Optional[ResolverContext] = None

    def _default_factory(self) -> LookupFactory:
        """Pick the lookup strategy from the configuration"""
        if self.config.direct:
            return DirectLookup
        return SystemLookup

    def prepare(self) -> ResolverContext:
        """
        Build the shared resolver context.

        Raises:
            ResolverError: if the resolver address cannot be resolved
        """
        self.context = build_context(self.config)
        return self.context

    def run(self, items: Sequence[str]) -> RunSummary:
        """
        Resolve every item and write the results to the sink.

        Args:
            items: Input addresses in order

        Returns:
            RunSummary aggregated over all workers
        """
        if self.context is None:
            self.prepare()

        partitions = partition(items, self.config.threads)
        workers = [
            LookupWorker(
                items=part,
                sink=self.sink,
                lookup=self.lookup_factory(self.context),
                domain_only=self.config.domain_only,
                name=f"worker-{i}"
            )
            for i, part in enumerate(partitions)
        ]

        logger.debug("Starting %d workers for %d items", len(workers), len(items))

        # One OS thread per partition, empty ones included
        results: list = [None] * len(workers)
        threads = [
            threading.Thread(target=self._run_worker, args=(worker, results, i),
                             name=f"bulkrdns-{i}")
            for i, worker in enumerate(workers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for result in results:
            if isinstance(result, Exception):
                raise result

        summary = RunSummary.from_workers(results)
        logger.debug("Resolved %d/%d items, %d names", summary.resolved,
                     summary.items, summary.names)
        return summary

    @staticmethod
    def _run_worker(worker: LookupWorker, results: list, index: int):
        """Thread target; errors are handed back to run() and raised there"""
        try:
            results[index] = worker.run()
        except Exception as e:
            results[index] = e
