"""Host capability backends."""

from netbind.backends.network import (
    EnumerationError,
    HostnameResolutionError,
    Network,
    NetworkError,
)

__all__ = [
    "EnumerationError",
    "HostnameResolutionError",
    "Network",
    "NetworkError",
]
