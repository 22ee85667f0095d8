"""Snapshot data structures for the proxy configuration watcher.

A :class:`Snapshot` is the fully validated state derived from one successful
read of a configuration source.  It carries two independently diffed fact
families: service identities (name and port) and endpoint address lists.
Both families are keyed by service name, which is also how an
:class:`EndpointFact` is correlated with its :class:`ServiceFact`.

All classes are frozen and hold tuples so that snapshots can be compared with
plain ``==`` (whole-sequence, order-sensitive, deep equality) and shared
between threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ServiceFact:
    """A backend service exposed by the proxy on ``port``."""

    name: str
    port: int


@dataclass(frozen=True)
class EndpointFact:
    """The ordered ``host:port`` addresses serving service ``name``."""

    name: str
    addresses: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Snapshot:
    """Immutable result of parsing one configuration document."""

    services: Tuple[ServiceFact, ...] = field(default_factory=tuple)
    endpoints: Tuple[EndpointFact, ...] = field(default_factory=tuple)

    def service_names(self) -> Tuple[str, ...]:
        return tuple(service.name for service in self.services)
