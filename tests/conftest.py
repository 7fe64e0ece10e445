import io
import socket
import threading
import time

import pytest

from bulkrdns.lookup import BaseLookup, LookupFailed
from bulkrdns.models import Config, ResolverContext
from bulkrdns.output import OutputSink


class FakeLookup(BaseLookup):
    """
    Table driven lookup.

    table maps ip -> list of hostnames. A missing ip fails the whole
    item, a None entry in the list fails that single record.
    """

    def __init__(self, context, table, delay=0.0):
        super().__init__(context)
        self.table = table
        self.delay = delay
        self.seen = []
        self.closed = False
        self.thread = None

    def __enter__(self):
        self.thread = threading.current_thread()
        return self

    def records(self, ip):
        self.seen.append(ip)
        if ip not in self.table:
            raise LookupFailed(f"unknown address {ip}")
        return list(self.table[ip])

    def hostname(self, record):
        if self.delay:
            time.sleep(self.delay)
        if record is None:
            raise LookupFailed("no name")
        return record

    def close(self):
        self.closed = True


class SlowStream(io.StringIO):
    """StringIO that yields the GIL on every write"""

    def write(self, s):
        time.sleep(0.0001)
        return super().write(s)


@pytest.fixture
def context():
    return ResolverContext(
        family=socket.AF_INET,
        socket_type=socket.SOCK_DGRAM,
        address='127.0.0.1',
        port=53,
        sockaddr=('127.0.0.1', 53),
        server_name='localhost'
    )


@pytest.fixture
def config():
    return Config(resolver='127.0.0.1', threads=4)


@pytest.fixture
def stream():
    return SlowStream()


@pytest.fixture
def sink(stream):
    return OutputSink(stream=stream, lock=threading.Lock())


@pytest.fixture
def make_lookup():
    """Factory building FakeLookups that remembers every instance"""
    created = []

    def factory(table, delay=0.0):
        def build(context):
            lookup = FakeLookup(context, table, delay=delay)
            created.append(lookup)
            return lookup
        build.created = created
        return build

    factory.created = created
    return factory
