"""Publish full-replacement updates for changed fact families."""

from __future__ import annotations

import logging
from threading import Event
from typing import Optional, Sequence

from .channel import UpdateChannel
from .events import EndpointsUpdate, Operation, ServiceUpdate
from .model import EndpointFact, ServiceFact

LOG = logging.getLogger(__name__)


class UpdateDispatcher:
    """Send ``SET`` events on the per-family outbound channels.

    Every send blocks until the consumer has accepted the event.  The
    optional ``stop_event`` lets a blocked send give up during shutdown, in
    which case the dispatch methods return ``False``.
    """

    def __init__(
        self,
        service_channel: UpdateChannel[ServiceUpdate],
        endpoints_channel: UpdateChannel[EndpointsUpdate],
        stop_event: Optional[Event] = None,
    ) -> None:
        self._service_channel = service_channel
        self._endpoints_channel = endpoints_channel
        self._stop_event = stop_event

    def dispatch_services(self, services: Sequence[ServiceFact]) -> bool:
        update = ServiceUpdate(op=Operation.SET, services=tuple(services))
        LOG.info("publishing service update with %d services", len(update.services))
        return self._service_channel.send(update, self._stop_event)

    def dispatch_endpoints(self, endpoints: Sequence[EndpointFact]) -> bool:
        update = EndpointsUpdate(op=Operation.SET, endpoints=tuple(endpoints))
        LOG.info(
            "publishing endpoints update with %d entries", len(update.endpoints)
        )
        return self._endpoints_channel.send(update, self._stop_event)
