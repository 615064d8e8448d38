"""Process-wide discovery state and its (re)initialization.

Usage:
    from netbind.discovery import lifecycle

    registry = lifecycle.get()          # discovers on first call
    if registry is None:
        ...                             # no network services can be offered

    lifecycle.reinitialize()            # after the host topology changed
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

from netbind.backends.network import EnumerationError, Network
from netbind.config import NetworkSettings, SettingsProvider
from netbind.discovery.registry import AssociationRegistry
from netbind.discovery.resolver import default_association
from netbind.discovery.walker import InterfaceDiscoveryWalker
from netbind.models.network_models import InterfaceAssociation, InterfaceHandle
from netbind.utils.logger import Logger


class DiscoveryState(Enum):
    """Discovery lifecycle states."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DiscoveryResult:
    """Published outcome of the latest discovery pass."""

    state: DiscoveryState
    registry: AssociationRegistry | None = None
    error: EnumerationError | None = None


_UNINITIALIZED = DiscoveryResult(DiscoveryState.UNINITIALIZED)


class NetworkConfiguration:
    """Guards discovery passes and publishes the resulting registry.

    ``get`` and ``reinitialize`` serialize on one lock so only one pass runs
    at a time. The outcome is published as a single DiscoveryResult
    reference; readers never take the lock and only ever see a complete
    registry.

    Example:
        >>> config = NetworkConfiguration()
        >>> registry = config.get()
        >>> config.default_association()
    """

    def __init__(
        self,
        network: Network | None = None,
        settings_provider: SettingsProvider | None = None,
    ) -> None:
        """Initialize without discovering anything.

        Args:
            network: Host enumeration backend (default: psutil Network).
            settings_provider: Callable returning the settings for a pass,
                called on every pass (default: NetworkSettings.from_env).
        """
        self._network = network if network is not None else Network()
        self._settings_provider = settings_provider or NetworkSettings.from_env
        self._lock = threading.Lock()
        self._result = _UNINITIALIZED
        self._logger = Logger.child("discovery.lifecycle")

    @property
    def network(self) -> Network:
        return self._network

    @property
    def result(self) -> DiscoveryResult:
        return self._result

    @property
    def state(self) -> DiscoveryState:
        return self._result.state

    @property
    def registry(self) -> AssociationRegistry | None:
        """Currently published registry, without triggering discovery."""
        return self._result.registry

    @property
    def last_error(self) -> EnumerationError | None:
        return self._result.error

    def get(self) -> AssociationRegistry | None:
        """Return the published registry, discovering first if needed.

        A pass runs when nothing was discovered yet or the previous pass
        failed. Returns None when that pass fails.
        """
        with self._lock:
            result = self._result
            if result.state is DiscoveryState.READY:
                return result.registry
            return self._discover()

    def reinitialize(self) -> AssociationRegistry | None:
        """Run a fresh discovery pass and publish its outcome.

        On failure any previously published registry is dropped; references
        already handed out stay valid.
        """
        with self._lock:
            return self._discover()

    def default_association(self) -> InterfaceAssociation | None:
        """Default association of the current registry (discovering if needed)."""
        registry = self.get()
        if registry is None:
            return None
        return default_association(registry)

    def network_interface_by_server_name(self) -> InterfaceHandle | None:
        """Interface bound to the configured server hostname.

        Returns:
            The interface, or None when no server hostname is configured.

        Raises:
            HostnameResolutionError: If the hostname does not resolve to an
                address of a local interface.
            EnumerationError: If the host cannot list its interfaces.
        """
        hostname = self._settings_provider().server_hostname
        if not hostname:
            return None
        return self._network.interface_for_hostname(hostname)

    def _discover(self) -> AssociationRegistry | None:
        """Run one pass; caller must hold the lock."""
        settings = self._settings_provider()
        walker = InterfaceDiscoveryWalker(settings.skip_interfaces)

        try:
            registry = walker.walk(self._network.list_interfaces())
        except EnumerationError as e:
            self._logger.error(
                f"Fatal error when trying to detect network configuration: {e}"
            )
            self._logger.error("No network services will be available")
            self._logger.debug("Enumeration failure", exc_info=True)
            self._result = DiscoveryResult(DiscoveryState.FAILED, error=e)
            return None

        self._logger.info(
            f"Discovered {len(registry.relevant_network_interfaces())} network "
            f"interfaces with a usable address"
        )
        self._result = DiscoveryResult(DiscoveryState.READY, registry=registry)
        return registry


# -----------------------------------------------------------------------------
# Process-wide instance
# -----------------------------------------------------------------------------

_instance_lock = threading.Lock()
_instance: NetworkConfiguration | None = None


def get_configuration() -> NetworkConfiguration:
    """Return the process-wide NetworkConfiguration, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = NetworkConfiguration()
        return _instance


def reset_configuration(
    network: Network | None = None,
    settings_provider: SettingsProvider | None = None,
) -> NetworkConfiguration:
    """Replace the process-wide instance with a fresh, undiscovered one."""
    global _instance
    with _instance_lock:
        _instance = NetworkConfiguration(network, settings_provider)
        return _instance


def get() -> AssociationRegistry | None:
    """Process-wide registry; see NetworkConfiguration.get()."""
    return get_configuration().get()


def reinitialize() -> AssociationRegistry | None:
    """Re-discover the process-wide registry; see NetworkConfiguration.reinitialize()."""
    return get_configuration().reinitialize()
