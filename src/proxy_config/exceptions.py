"""Error types raised by the configuration watcher."""


class ProxyConfigError(Exception):
    """Base class for watcher errors."""


class SourceReadError(ProxyConfigError, OSError):
    """The configuration source could not be read."""


class ParseError(ProxyConfigError, ValueError):
    """The configuration document is structurally invalid."""
