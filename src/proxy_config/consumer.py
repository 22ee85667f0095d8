"""Background consumer draining an update channel into a registry."""

from __future__ import annotations

import logging
import queue
from threading import Event, Thread

from .channel import UpdateChannel
from .registry import HandlerRegistry

LOG = logging.getLogger(__name__)


class UpdateConsumer(Thread):
    """Receive events from ``channel`` and hand them to ``registry``."""

    def __init__(
        self,
        channel: UpdateChannel,
        registry: HandlerRegistry,
        stop_event: Event,
        poll_timeout: float = 0.5,
    ) -> None:
        super().__init__(daemon=True, name=f"update-consumer:{channel.name}")
        self._channel = channel
        self._registry = registry
        self._stop_event = stop_event
        self._poll_timeout = poll_timeout

    def run(self) -> None:
        while not self._stop_event.is_set():
            try:
                event = self._channel.receive(timeout=self._poll_timeout)
            except queue.Empty:
                continue
            try:
                self._registry.handle(event)
            except Exception:
                LOG.exception("handler failed for %s event", self._channel.name)
