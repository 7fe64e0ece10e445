"""
Synchronized result output
"""

import sys
import threading
from typing import Iterable, Optional, TextIO

import click


class OutputSink:
    """
    Serializes result lines from many workers onto one stream.

    Every write holds the sink lock for one whole line or one whole
    batch, so lines from different workers never interleave. No order
    is imposed across workers.

    Lines are written verbatim (no rich rendering: it would expand the
    tab separator).
    """

    def __init__(self, stream: Optional[TextIO] = None,
                 lock: Optional[threading.Lock] = None):
        self.stream = stream
        self._lock = lock or threading.Lock()

    def write_line(self, line: str):
        """Write a single line"""
        with self._lock:
            self._write(line)

    def write_batch(self, lines: Iterable[str]):
        """Write several lines as one contiguous block"""
        lines = list(lines)
        if not lines:
            return

        with self._lock:
            for line in lines:
                self._write(line)

    def _write(self, line: str):
        click.echo(line, file=self.stream or sys.stdout)
