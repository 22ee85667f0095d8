"""Rendezvous channel carrying update events between threads."""

from __future__ import annotations

import queue
from threading import Event, Semaphore
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# How often a blocked sender re-checks its stop signal.
_STOP_CHECK_INTERVAL = 0.1


class UpdateChannel(Generic[T]):
    """Unbuffered, single-producer hand-off of events to a consumer.

    :meth:`send` does not return until a consumer has taken the event via
    :meth:`receive`, so the producer can never run ahead of a slow consumer.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._queue: "queue.Queue[T]" = queue.Queue(maxsize=1)
        self._accepted = Semaphore(0)

    def __repr__(self) -> str:
        return f"UpdateChannel({self.name!r})"

    def send(self, event: T, stop_event: Optional[Event] = None) -> bool:
        """Deliver ``event``, blocking until it is received.

        Returns ``False`` if ``stop_event`` was set before a consumer took
        the event; the event is withdrawn in that case.
        """

        while True:
            if stop_event is not None and stop_event.is_set():
                return False
            try:
                self._queue.put(event, timeout=_STOP_CHECK_INTERVAL)
                break
            except queue.Full:
                continue

        while not self._accepted.acquire(timeout=_STOP_CHECK_INTERVAL):
            if stop_event is None or not stop_event.is_set():
                continue
            try:
                self._queue.get_nowait()
            except queue.Empty:
                # A consumer took it concurrently; wait for its release.
                self._accepted.acquire()
                return True
            return False
        return True

    def receive(self, timeout: Optional[float] = None) -> T:
        """Return the next event, raising :class:`queue.Empty` on timeout."""

        event = self._queue.get(timeout=timeout)
        self._accepted.release()
        return event
