"""YAML configuration loader for the proxy agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

import yaml

from proxy_config.sources import SOURCE_TYPES
from proxy_config.watcher import DEFAULT_INTERVAL


@dataclass
class SourceConfig:
    type: str
    path: Path
    interval: float = DEFAULT_INTERVAL


@dataclass
class AgentConfig:
    sources: Sequence[SourceConfig] = field(default_factory=list)


def _parse_sources(entries: Iterable[dict]) -> List[SourceConfig]:
    sources: List[SourceConfig] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError("each 'sources' entry must be a mapping")
        if "path" not in entry:
            raise ValueError("source entry missing 'path'")
        interval = float(
            entry.get("interval", entry.get("poll_interval", DEFAULT_INTERVAL))
        )
        if interval <= 0:
            raise ValueError(f"source interval must be positive, got {interval}")
        type_ = str(entry.get("type", "file"))
        if type_ not in SOURCE_TYPES:
            raise ValueError(f"unsupported source type '{type_}'")
        sources.append(
            SourceConfig(
                type=type_,
                path=Path(entry["path"]),
                interval=interval,
            )
        )
    return sources


def load_config(path: Path) -> AgentConfig:
    data = yaml.safe_load(path.read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Agent configuration must be a mapping")

    sources_section = data.get("sources", [])
    if not isinstance(sources_section, list):
        raise ValueError("'sources' section must be a list")

    return AgentConfig(sources=_parse_sources(sources_section))
