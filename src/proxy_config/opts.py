"""oslo.config options for hosting the watcher inside another service.

Control plane processes that already manage their settings with oslo.config
can register these options and build a watcher straight from their ``CONF``
object instead of going through the YAML agent configuration.
"""

from __future__ import annotations

from threading import Event
from typing import Optional

from oslo_config import cfg

from .channel import UpdateChannel
from .dispatcher import UpdateDispatcher
from .sources import FileSource
from .watcher import DEFAULT_INTERVAL, ConfigSourceWatcher

GROUP = 'proxy_config'

proxy_config_opts = [
    cfg.StrOpt('config_file',
               default=None,
               help='JSON file describing services and their endpoints. '
                    'The watcher is disabled when unset.'),
    cfg.FloatOpt('poll_interval',
                 default=DEFAULT_INTERVAL,
                 min=0.01,
                 help='Seconds to wait between two reads of config_file.'),
]


def register_opts(conf: cfg.ConfigOpts, group: str = GROUP) -> None:
    """Register the watcher options in ``group`` of ``conf``."""
    conf.register_opts(proxy_config_opts, group=group)


def list_opts():
    """Entry point for oslo-config-generator."""
    return [(GROUP, proxy_config_opts)]


def watcher_from_conf(
    conf: cfg.ConfigOpts,
    service_channel: UpdateChannel,
    endpoints_channel: UpdateChannel,
    stop_event: Event,
    group: str = GROUP,
) -> Optional[ConfigSourceWatcher]:
    """Build a file watcher from registered options.

    Returns ``None`` if no ``config_file`` is configured.
    """
    section = getattr(conf, group)
    if not section.config_file:
        return None
    dispatcher = UpdateDispatcher(service_channel, endpoints_channel, stop_event)
    return ConfigSourceWatcher(
        FileSource(section.config_file),
        dispatcher,
        stop_event,
        interval=section.poll_interval,
    )
