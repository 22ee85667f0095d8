"""Decode and validate configuration documents.

Example document describing two services::

    {"Services": [
       {
          "Name": "nodejs",
          "Port": 10000,
          "Endpoints": ["10.240.180.168:8000", "10.240.254.199:8000"]
       },
       {
          "Name": "mysql",
          "Port": 10001,
          "Endpoints": ["10.240.180.168:9000", "10.240.254.199:9000"]
       }
    ]}

Field names are matched case-insensitively and unknown fields are ignored.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Tuple

from .exceptions import ParseError
from .model import EndpointFact, ServiceFact, Snapshot

_MISSING = object()


def _field(entry: Mapping[str, Any], key: str) -> Any:
    if key in entry:
        return entry[key]
    folded = key.casefold()
    for name, value in entry.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return _MISSING


def _parse_port(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"{where}: 'Port' must be an integer, got {value!r}")
    if not 0 <= value <= 65535:
        raise ParseError(f"{where}: 'Port' {value} is out of range")
    return value


def _parse_address(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ParseError(f"{where}: endpoint {value!r} is not a string")
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ParseError(f"{where}: endpoint {value!r} is not in host:port form")
    return value


def _parse_service(entry: Any, index: int) -> Tuple[ServiceFact, EndpointFact]:
    where = f"Services[{index}]"
    if not isinstance(entry, dict):
        raise ParseError(f"{where}: entry must be an object")

    name = _field(entry, "Name")
    if name is _MISSING:
        raise ParseError(f"{where}: missing 'Name'")
    if not isinstance(name, str) or not name:
        raise ParseError(f"{where}: 'Name' must be a non-empty string")
    where = f"{where} ({name})"

    port = _field(entry, "Port")
    if port is _MISSING:
        raise ParseError(f"{where}: missing 'Port'")

    addresses = _field(entry, "Endpoints")
    if addresses is _MISSING:
        raise ParseError(f"{where}: missing 'Endpoints'")
    if addresses is None:
        addresses = []
    if not isinstance(addresses, list):
        raise ParseError(f"{where}: 'Endpoints' must be a list")

    return (
        ServiceFact(name=name, port=_parse_port(port, where)),
        EndpointFact(
            name=name,
            addresses=tuple(_parse_address(a, where) for a in addresses),
        ),
    )


def parse_snapshot(data: bytes) -> Snapshot:
    """Turn raw ``data`` into a :class:`Snapshot`.

    Raises :class:`ParseError` if the document is malformed or any entry is
    invalid.  Nothing is returned for a partially valid document.
    """

    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(f"malformed document: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError("document must be a JSON object")

    entries = _field(payload, "Services")
    if entries is _MISSING:
        raise ParseError("document missing 'Services' key")
    if not isinstance(entries, list):
        raise ParseError("'Services' must be a list")

    services: List[ServiceFact] = []
    endpoints: List[EndpointFact] = []
    seen = set()
    for index, entry in enumerate(entries):
        service, endpoint = _parse_service(entry, index)
        if service.name in seen:
            raise ParseError(f"duplicate service name {service.name!r}")
        seen.add(service.name)
        services.append(service)
        endpoints.append(endpoint)

    return Snapshot(services=tuple(services), endpoints=tuple(endpoints))
