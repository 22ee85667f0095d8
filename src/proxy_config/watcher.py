"""Poll loop keeping downstream consumers in sync with a config source."""

from __future__ import annotations

import logging
from threading import Event, Thread
from typing import Optional

from .detector import ChangeSet, detect
from .dispatcher import UpdateDispatcher
from .exceptions import ParseError, SourceReadError
from .model import Snapshot
from .parser import parse_snapshot
from .sources import PollableSource, SourceReader

LOG = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5.0


class ConfigSourceWatcher(Thread):
    """Poll a configuration source and publish service/endpoint updates.

    Each cycle reads the source, parses it into a :class:`Snapshot`, compares
    it with the last accepted snapshot and dispatches one ``SET`` update per
    changed family.  Read and parse failures are logged and leave the
    accepted snapshot untouched.  Cycles are separated by a fixed
    ``interval`` regardless of their outcome.
    """

    def __init__(
        self,
        source: PollableSource,
        dispatcher: UpdateDispatcher,
        stop_event: Event,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        super().__init__(daemon=True, name=f"config-watcher:{source}")
        self._reader = SourceReader(source)
        self._dispatcher = dispatcher
        self._stop_event = stop_event
        self._interval = interval
        self._snapshot: Optional[Snapshot] = None

    @property
    def snapshot(self) -> Optional[Snapshot]:
        """The last accepted snapshot, if any."""

        return self._snapshot

    def run(self) -> None:
        LOG.info(
            "watching %s (interval=%ss)", self._reader.source, self._interval
        )
        while not self._stop_event.is_set():
            try:
                self.poll()
            except Exception:
                LOG.exception("config watcher encountered an error")
            self._stop_event.wait(self._interval)
        LOG.info("stopped watching %s", self._reader.source)

    def poll(self) -> Optional[ChangeSet]:
        """Run a single cycle, returning the detected changes if any."""

        try:
            data = self._reader.read()
        except SourceReadError as exc:
            LOG.error("%s", exc)
            return None
        if data is None:
            return None

        try:
            snapshot = parse_snapshot(data)
        except ParseError as exc:
            LOG.error(
                "couldn't parse configuration from %s: %s: %s",
                self._reader.source,
                exc,
                data.decode("utf-8", errors="replace"),
            )
            return None

        changes = detect(self._snapshot, snapshot)
        if changes.empty:
            LOG.debug("configuration from %s is structurally unchanged", self._reader.source)
            return changes

        LOG.debug(
            "configuration from %s changed (services=%s, endpoints=%s): %s",
            self._reader.source,
            changes.services_changed,
            changes.endpoints_changed,
            ", ".join(snapshot.service_names()),
        )
        try:
            delivered = self._dispatch(snapshot, changes)
        except Exception:
            self._reader.forget()
            raise
        if not delivered:
            self._reader.forget()
            return None

        self._snapshot = snapshot
        return changes

    def _dispatch(self, snapshot: Snapshot, changes: ChangeSet) -> bool:
        if changes.services_changed and not self._dispatcher.dispatch_services(
            snapshot.services
        ):
            return False
        if changes.endpoints_changed and not self._dispatcher.dispatch_endpoints(
            snapshot.endpoints
        ):
            return False
        return True
