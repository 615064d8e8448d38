"""Network backend - enumerates host interfaces using psutil and socket."""

from __future__ import annotations

import ipaddress
import socket

import psutil

from netbind.models.network_models import InterfaceHandle, NetworkAddress
from netbind.utils.logger import Logger

# Linux reports alias labels such as "eth0:1" as interfaces of their own
ALIAS_SEPARATOR = ":"


class NetworkError(Exception):
    """Base exception for host network errors."""

    pass


class EnumerationError(NetworkError):
    """Raised when the host fails to list its network interfaces."""

    pass


class HostnameResolutionError(NetworkError):
    """Raised when a hostname does not resolve to a local interface address."""

    def __init__(self, hostname: str, reason: str) -> None:
        self.hostname = hostname
        super().__init__(f"Cannot resolve '{hostname}' to a local interface: {reason}")


def _parse_address(raw: str) -> NetworkAddress | None:
    """Parse a psutil address string, dropping any IPv6 zone suffix."""
    try:
        return ipaddress.ip_address(raw.split("%", 1)[0])
    except ValueError:
        return None


class Network:
    """Network interface backend using psutil and socket.

    Builds the adapter tree consumed by discovery. Alias labels
    (``eth0:1``) are nested under their base adapter when the base exists;
    every other adapter is top-level. Nothing is cached: each call reflects
    the current host state.
    """

    def __init__(self) -> None:
        self._logger = Logger.child("backends.network")

    def list_interfaces(self) -> list[InterfaceHandle]:
        """Enumerate top-level interfaces with their nested aliases.

        Returns
        -------
            Top-level InterfaceHandle objects sorted by name.

        Raises
        ------
            EnumerationError: If the host cannot list its interfaces.
        """
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except (OSError, psutil.Error) as e:
            raise EnumerationError(f"Failed to list network interfaces: {e}") from e

        flat: dict[str, dict] = {}
        for interface_name, interface_addrs in addrs.items():
            addresses: list[NetworkAddress] = []
            mac_address = None
            for addr in interface_addrs:
                if addr.family in (socket.AF_INET, socket.AF_INET6):
                    address = _parse_address(addr.address)
                    if address is not None and address not in addresses:
                        addresses.append(address)
                elif addr.family == psutil.AF_LINK:
                    mac_address = addr.address

            if_stats = stats.get(interface_name)
            flat[interface_name] = {
                "name": interface_name,
                "display_name": interface_name,
                "addresses": tuple(addresses),
                "is_up": if_stats.isup if if_stats else None,
                "mtu": if_stats.mtu if if_stats else None,
                "mac_address": mac_address,
            }

        children: dict[str, list[str]] = {}
        top_level: list[str] = []
        for interface_name in sorted(flat):
            base, sep, _label = interface_name.partition(ALIAS_SEPARATOR)
            if sep and base in flat:
                children.setdefault(base, []).append(interface_name)
            else:
                top_level.append(interface_name)

        def build(interface_name: str) -> InterfaceHandle:
            sub_interfaces = tuple(build(c) for c in children.get(interface_name, []))
            return InterfaceHandle(**flat[interface_name], sub_interfaces=sub_interfaces)

        interfaces = [build(name) for name in top_level]
        self._logger.debug(
            f"Host reports {len(flat)} interfaces, {len(interfaces)} top-level"
        )
        return interfaces

    def interface_for_hostname(self, hostname: str) -> InterfaceHandle:
        """Find the local interface bound to an address of ``hostname``.

        Args:
            hostname: Hostname or IP address literal.

        Returns
        -------
            The first interface (depth-first) bound to a resolved address.

        Raises
        ------
            HostnameResolutionError: If the name does not resolve or no local
                interface carries any of its addresses.
            EnumerationError: If the host cannot list its interfaces.
        """
        self._logger.debug(f"Searching network interface for {hostname}")
        try:
            infos = socket.getaddrinfo(hostname, None)
        except (socket.gaierror, UnicodeError, OSError) as e:
            raise HostnameResolutionError(hostname, str(e)) from e

        resolved = {_parse_address(info[4][0]) for info in infos}
        resolved.discard(None)
        if not resolved:
            raise HostnameResolutionError(hostname, "no IP addresses returned")

        for top_level in self.list_interfaces():
            for interface in top_level.walk():
                if resolved.intersection(interface.addresses):
                    return interface

        addresses = ", ".join(sorted(str(a) for a in resolved))
        raise HostnameResolutionError(
            hostname, f"{addresses} not bound to any local interface"
        )

    @staticmethod
    def default_host_name() -> str:
        """Return the local host name, or "localhost" if it cannot be read."""
        try:
            return socket.gethostname() or "localhost"
        except OSError:
            return "localhost"
