"""Update events published to downstream consumers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .model import EndpointFact, ServiceFact


class Operation(Enum):
    """How a consumer applies the payload of an update.

    Only ``SET`` is produced today.  Consumers should not assume the
    enumeration is closed: incremental operations may be added later.
    """

    SET = "set"


@dataclass(frozen=True)
class ServiceUpdate:
    """Replace the consumer's entire view of services with ``services``."""

    op: Operation
    services: Tuple[ServiceFact, ...]


@dataclass(frozen=True)
class EndpointsUpdate:
    """Replace the consumer's entire view of endpoints with ``endpoints``."""

    op: Operation
    endpoints: Tuple[EndpointFact, ...]
