"""Entry point for the standalone proxy configuration agent."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from threading import Event, Thread
from typing import List, Sequence

import yaml

from proxy_config import (
    ConfigSourceWatcher,
    HandlerRegistry,
    ParseError,
    SourceReadError,
    UpdateChannel,
    UpdateConsumer,
    UpdateDispatcher,
    create_source,
)
from proxy_config.parser import parse_snapshot

from .config import SourceConfig, load_config
from .handlers import LoggingHandler

LOG = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def check_sources(sources: Sequence[SourceConfig]) -> int:
    """Read and validate every source once; return a process exit code."""

    failures = 0
    for source_cfg in sources:
        try:
            source = create_source(source_cfg.type, source_cfg.path)
            snapshot = parse_snapshot(source.fetch())
        except (SourceReadError, ParseError, ValueError) as exc:
            LOG.error("%s: %s", source_cfg.path, exc)
            failures += 1
            continue
        LOG.info(
            "%s: ok (%d services)", source_cfg.path, len(snapshot.services)
        )
    return 1 if failures else 0


def start_source(
    source_cfg: SourceConfig, registry: HandlerRegistry, stop_event: Event
) -> List[Thread]:
    """Start the watcher and its two consumers for one source."""

    service_channel = UpdateChannel(f"services:{source_cfg.path}")
    endpoints_channel = UpdateChannel(f"endpoints:{source_cfg.path}")
    threads: List[Thread] = [
        UpdateConsumer(service_channel, registry, stop_event),
        UpdateConsumer(endpoints_channel, registry, stop_event),
        ConfigSourceWatcher(
            create_source(source_cfg.type, source_cfg.path),
            UpdateDispatcher(service_channel, endpoints_channel, stop_event),
            stop_event,
            interval=source_cfg.interval,
        ),
    ]
    for thread in threads:
        thread.start()
    return threads


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the proxy configuration agent")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("/etc/proxy-agent/agent.yaml"),
        help="Path to the agent configuration file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate every configured source once and exit",
    )

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        LOG.error("invalid configuration %s: %s", args.config, exc)
        return 1

    if args.check:
        return check_sources(config.sources)

    registry = HandlerRegistry()
    registry.register("log", LoggingHandler())

    stop_event = Event()

    threads: List[Thread] = []
    for source_cfg in config.sources:
        threads.extend(start_source(source_cfg, registry, stop_event))

    if not threads:
        LOG.warning("no sources configured; agent will idle")

    def _shutdown(signum, frame):  # pragma: no cover - signal handler
        LOG.info("received signal %s, shutting down", signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    try:
        while not stop_event.is_set():
            stop_event.wait(1.0)
    except KeyboardInterrupt:  # pragma: no cover - fallback if signal not set
        stop_event.set()

    for thread in threads:
        thread.join()

    LOG.info("proxy agent stopped")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
