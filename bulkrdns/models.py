"""
Data models for bulkrdns
"""

import socket
from dataclasses import dataclass, field
from typing import Optional


PROTOCOLS = ('tcp', 'udp')


@dataclass(frozen=True)
class Config:
    """Run configuration, set once before the engine starts"""
    resolver: str = ''
    threads: int = 8
    protocol: str = 'udp'
    port: int = 53
    domain_only: bool = False
    direct: bool = False

    @property
    def socket_type(self) -> int:
        return socket.SOCK_STREAM if self.protocol == 'tcp' else socket.SOCK_DGRAM


@dataclass(frozen=True)
class ResolverContext:
    """
    Resolved resolver endpoint.

    Built once before any worker starts and shared read-only afterwards.
    """
    family: int
    socket_type: int
    address: str
    port: int
    sockaddr: tuple
    server_name: Optional[str] = None

    @property
    def tcp(self) -> bool:
        return self.socket_type == socket.SOCK_STREAM


@dataclass
class WorkerStats:
    """Counters for a single worker"""
    items: int = 0
    resolved: int = 0
    names: int = 0


@dataclass
class RunSummary:
    """Aggregated counters for a whole run"""
    items: int = 0
    resolved: int = 0
    names: int = 0
    workers: list[WorkerStats] = field(default_factory=list)

    @classmethod
    def from_workers(cls, stats: list[WorkerStats]) -> 'RunSummary':
        return cls(
            items=sum(s.items for s in stats),
            resolved=sum(s.resolved for s in stats),
            names=sum(s.names for s in stats),
            workers=list(stats)
        )
