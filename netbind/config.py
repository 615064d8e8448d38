"""Operator configuration for interface discovery.

Settings come from the environment and are re-read on every discovery pass,
so changing ``NETBIND_SKIP_INTERFACES`` and calling ``reinitialize()`` is
enough to apply a new skip list.

Environment variables:
    NETBIND_SKIP_INTERFACES: Comma-separated interface name prefixes to skip.
    NETBIND_SERVER_HOSTNAME: Hostname or IP the server should bind to.
    NETBIND_LOG_LEVEL: Log level used by the command line.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from netbind.utils.env import env_is_set, get_env

SKIP_INTERFACES_ENV = "NETBIND_SKIP_INTERFACES"
SERVER_HOSTNAME_ENV = "NETBIND_SERVER_HOSTNAME"
LOG_LEVEL_ENV = "NETBIND_LOG_LEVEL"

DEFAULT_SKIP_INTERFACES: tuple[str, ...] = ("tap", "vmnet", "vnic", "virtualbox")


class NetworkSettings(BaseModel):
    """Skip prefixes and server hostname for one discovery pass."""

    model_config = ConfigDict(frozen=True)

    skip_interfaces: tuple[str, ...] = Field(
        default=DEFAULT_SKIP_INTERFACES,
        description="Interface name prefixes excluded from discovery",
    )
    server_hostname: str | None = Field(
        None, description="Configured server hostname (if any)"
    )

    @classmethod
    def from_env(cls) -> NetworkSettings:
        """Build settings from NETBIND_* environment variables."""
        skip_interfaces = get_env(
            SKIP_INTERFACES_ENV,
            default=DEFAULT_SKIP_INTERFACES,
            as_type=tuple,
            log=True,
        )
        server_hostname = None
        if env_is_set(SERVER_HOSTNAME_ENV):
            server_hostname = get_env(SERVER_HOSTNAME_ENV, log=True)

        return cls(
            skip_interfaces=skip_interfaces,
            server_hostname=server_hostname.strip() if server_hostname else None,
        )


SettingsProvider = Callable[[], NetworkSettings]
