"""Handlers wired into the standalone agent."""

from __future__ import annotations

import logging
from typing import Sequence

from proxy_config.handlers import EndpointsHandler, ServiceHandler
from proxy_config.model import EndpointFact, ServiceFact

LOG = logging.getLogger(__name__)


class LoggingHandler(ServiceHandler, EndpointsHandler):
    """Log every configuration update the agent receives."""

    def on_service_update(self, services: Sequence[ServiceFact]) -> None:
        LOG.info(
            "services set to [%s]",
            ", ".join(f"{s.name}:{s.port}" for s in services),
        )

    def on_endpoints_update(self, endpoints: Sequence[EndpointFact]) -> None:
        for entry in endpoints:
            LOG.info("endpoints for %s: %s", entry.name, list(entry.addresses))
        if not endpoints:
            LOG.info("endpoints set to empty list")
