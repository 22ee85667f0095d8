"""Structural change detection between snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .model import Snapshot


@dataclass(frozen=True)
class ChangeSet:
    """Which fact families differ from the last accepted snapshot."""

    services_changed: bool
    endpoints_changed: bool

    @property
    def empty(self) -> bool:
        return not (self.services_changed or self.endpoints_changed)


def detect(previous: Optional[Snapshot], current: Snapshot) -> ChangeSet:
    """Compare ``current`` against ``previous`` family by family.

    Each family is compared as a whole sequence, so reordering or changing a
    single element marks the entire family as changed.  Without a previous
    snapshot both families are reported as changed.
    """

    if previous is None:
        return ChangeSet(services_changed=True, endpoints_changed=True)
    return ChangeSet(
        services_changed=previous.services != current.services,
        endpoints_changed=previous.endpoints != current.endpoints,
    )
