"""Depth-first discovery of interface/address associations.

The walker visits the interface tree depth-first and publishes each
interface's associations after those of its sub-interfaces. An address
bound to both an alias and its parent is attributed to the alias only.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from netbind.discovery.filters import is_relevant_address, should_skip_interface
from netbind.discovery.registry import AssociationRegistry
from netbind.models.network_models import (
    InterfaceAssociation,
    InterfaceHandle,
    NetworkAddress,
)
from netbind.utils.logger import Logger


class InterfaceDiscoveryWalker:
    """Build an AssociationRegistry from a tree of interface handles.

    Example:
        >>> walker = InterfaceDiscoveryWalker(skip_prefixes=("tap", "vmnet"))
        >>> registry = walker.walk(Network().list_interfaces())
    """

    def __init__(self, skip_prefixes: Sequence[str] = ()) -> None:
        self._skip_prefixes = tuple(skip_prefixes)
        self._logger = Logger.child("discovery.walker")

    @property
    def skip_prefixes(self) -> tuple[str, ...]:
        return self._skip_prefixes

    def walk(self, interfaces: Iterable[InterfaceHandle]) -> AssociationRegistry:
        """Discover associations for ``interfaces`` and their sub-interfaces.

        Errors raised while reading the host interfaces propagate to the
        caller; no registry is built in that case.

        Args:
            interfaces: Top-level interfaces in host order.

        Returns:
            A new, immutable AssociationRegistry.
        """
        addresses_by_name: dict[str, frozenset[NetworkAddress]] = {}
        primary_by_name: dict[str, InterfaceAssociation] = {}

        associations = self._check_interfaces(
            list(interfaces), None, addresses_by_name, primary_by_name
        )

        return AssociationRegistry(
            associations=tuple(associations),
            addresses_by_interface_name=addresses_by_name,
            primary_by_interface_name=primary_by_name,
        )

    def _check_interfaces(
        self,
        interfaces: Sequence[InterfaceHandle],
        parent_name: str | None,
        addresses_by_name: dict[str, frozenset[NetworkAddress]],
        primary_by_name: dict[str, InterfaceAssociation],
    ) -> list[InterfaceAssociation]:
        """Check a list of sibling interfaces, skipping configured prefixes."""
        if interfaces:
            names = ", ".join(i.display_name or i.name for i in interfaces)
            if parent_name:
                self._logger.debug(
                    f'Checking network sub interfaces for "{parent_name}": {names}'
                )
            else:
                self._logger.debug(f"Checking network interfaces: {names}")

        associations: list[InterfaceAssociation] = []
        for interface in interfaces:
            if should_skip_interface(
                interface.name, interface.display_name, self._skip_prefixes
            ):
                self._logger.debug(
                    f"Network interface ({interface.name},{interface.display_name}) "
                    f"skipped, because skip_interfaces={list(self._skip_prefixes)}"
                )
                continue

            associations.extend(
                self._check_interface(
                    interface, parent_name, addresses_by_name, primary_by_name
                )
            )

        return associations

    def _check_interface(
        self,
        interface: InterfaceHandle,
        parent_name: str | None,
        addresses_by_name: dict[str, frozenset[NetworkAddress]],
        primary_by_name: dict[str, InterfaceAssociation],
    ) -> list[InterfaceAssociation]:
        """Associations of one interface's subtree, sub-interfaces first."""
        self._logger.debug(
            f'Checking "{interface.name}", display name: "{interface.display_name}"'
        )

        relevant: list[NetworkAddress] = []
        for address in interface.addresses:
            if is_relevant_address(address):
                if address not in relevant:
                    relevant.append(address)
            elif address.is_loopback:
                self._logger.debug(f'Skipping "{address}" because it is loopback')
            else:
                self._logger.debug(f'Skipping "{address}" because it is IPv6')
        addresses_by_name[interface.name] = frozenset(relevant)

        associations = self._check_interfaces(
            interface.sub_interfaces, interface.name, addresses_by_name, primary_by_name
        )

        claimed = {ia.address for ia in associations if ia.address is not None}
        if claimed:
            self._logger.debug(f'Sub addresses for "{interface.name}" are {claimed}')

        found_address = False
        for address in relevant:
            if address in claimed:
                continue
            self._logger.debug(f'Found "{interface.name}" -> "{address}"')
            association = InterfaceAssociation(
                address=address, interface=interface, parent_name=parent_name
            )
            associations.append(association)
            primary_by_name[interface.name] = association
            found_address = True

        if not found_address:
            associations.append(
                InterfaceAssociation(interface=interface, parent_name=parent_name)
            )
            self._logger.debug(
                f'Network interface "{interface.name}" has no valid address'
            )

        return associations
