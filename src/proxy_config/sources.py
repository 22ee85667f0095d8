"""Pollable configuration sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .exceptions import SourceReadError

LOG = logging.getLogger(__name__)


class PollableSource(ABC):
    """Something that can be asked for its current raw content."""

    @abstractmethod
    def fetch(self) -> bytes:
        """Return the full current content, raising :class:`SourceReadError`."""


class FileSource(PollableSource):
    """Read the whole content of a local file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def __str__(self) -> str:
        return str(self._path)

    def fetch(self) -> bytes:
        try:
            return self._path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"couldn't read file {self._path}: {exc}") from exc


class SourceReader:
    """Fetch from ``source`` and filter out byte-identical repeats."""

    def __init__(self, source: PollableSource) -> None:
        self._source = source
        self._last_data: Optional[bytes] = None

    @property
    def source(self) -> PollableSource:
        return self._source

    def read(self) -> Optional[bytes]:
        """Return new content, or ``None`` if it matches the previous read.

        :class:`SourceReadError` propagates to the caller and leaves the
        remembered content untouched.
        """

        data = self._source.fetch()
        if data == self._last_data:
            LOG.debug("source %s unchanged since last read", self._source)
            return None
        self._last_data = data
        return data

    def forget(self) -> None:
        """Drop the remembered content so the next read is treated as new."""

        self._last_data = None


SOURCE_TYPES = ("file",)


def create_source(type_: str, path: Path) -> PollableSource:
    if type_ == "file":
        return FileSource(path)
    raise ValueError(f"unsupported source type '{type_}'")
