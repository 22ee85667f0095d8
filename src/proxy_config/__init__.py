"""Declarative service/endpoint configuration watcher.

The package polls a configuration source (a JSON file by default), validates
each new document into an immutable :class:`Snapshot` and publishes
full-replacement updates for services and endpoints whenever either family
changes.  Consumers receive updates on dedicated channels and typically
forward them to a :class:`HandlerRegistry`.
"""

from .channel import UpdateChannel  # noqa: F401
from .consumer import UpdateConsumer  # noqa: F401
from .dispatcher import UpdateDispatcher  # noqa: F401
from .events import EndpointsUpdate, Operation, ServiceUpdate  # noqa: F401
from .exceptions import ParseError, ProxyConfigError, SourceReadError  # noqa: F401
from .handlers import EndpointsHandler, ServiceHandler  # noqa: F401
from .model import EndpointFact, ServiceFact, Snapshot  # noqa: F401
from .registry import HandlerRegistry  # noqa: F401
from .sources import FileSource, PollableSource, SourceReader, create_source  # noqa: F401
from .watcher import ConfigSourceWatcher  # noqa: F401

__all__ = [
    "ConfigSourceWatcher",
    "EndpointFact",
    "EndpointsHandler",
    "EndpointsUpdate",
    "FileSource",
    "HandlerRegistry",
    "Operation",
    "ParseError",
    "PollableSource",
    "ProxyConfigError",
    "ServiceFact",
    "ServiceHandler",
    "ServiceUpdate",
    "Snapshot",
    "SourceReadError",
    "SourceReader",
    "UpdateChannel",
    "UpdateConsumer",
    "UpdateDispatcher",
    "create_source",
]
