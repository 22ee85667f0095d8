"""Abstract interfaces for consumers of configuration updates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .model import EndpointFact, ServiceFact


class ServiceHandler(ABC):
    """Receives the complete list of services whenever it changes."""

    @abstractmethod
    def on_service_update(self, services: Sequence[ServiceFact]) -> None:
        """Replace any previously known services with ``services``."""


class EndpointsHandler(ABC):
    """Receives the complete list of endpoints whenever it changes."""

    @abstractmethod
    def on_endpoints_update(self, endpoints: Sequence[EndpointFact]) -> None:
        """Replace any previously known endpoints with ``endpoints``."""
