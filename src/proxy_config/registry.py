"""Fan out update events to registered handlers."""

from __future__ import annotations

from typing import Dict, Union

from .events import EndpointsUpdate, Operation, ServiceUpdate
from .handlers import EndpointsHandler, ServiceHandler

Handler = Union[ServiceHandler, EndpointsHandler]


class HandlerRegistry:
    """Dispatch service and endpoints updates to registered handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        if name in self._handlers:
            raise ValueError(f"handler '{name}' already registered")
        if not isinstance(handler, (ServiceHandler, EndpointsHandler)):
            raise TypeError(f"Unsupported handler type: {type(handler)!r}")
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def handle(self, event: Union[ServiceUpdate, EndpointsUpdate]) -> None:
        if isinstance(event, ServiceUpdate):
            self._on_service_update(event)
        elif isinstance(event, EndpointsUpdate):
            self._on_endpoints_update(event)
        else:
            raise TypeError(f"Unsupported event type: {type(event)!r}")

    def _on_service_update(self, event: ServiceUpdate) -> None:
        if event.op is not Operation.SET:
            raise ValueError(f"Unsupported operation: {event.op!r}")
        for handler in list(self._handlers.values()):
            if isinstance(handler, ServiceHandler):
                handler.on_service_update(event.services)

    def _on_endpoints_update(self, event: EndpointsUpdate) -> None:
        if event.op is not Operation.SET:
            raise ValueError(f"Unsupported operation: {event.op!r}")
        for handler in list(self._handlers.values()):
            if isinstance(handler, EndpointsHandler):
                handler.on_endpoints_update(event.endpoints)
