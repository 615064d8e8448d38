"""Immutable result of one interface discovery pass.

Usage:
    registry = InterfaceDiscoveryWalker(("tap",)).walk(Network().list_interfaces())

    registry.relevant_network_interfaces()
    registry.address_for_interface_name("eth0")
    registry.default_association()
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from netbind.discovery.resolver import default_association
from netbind.models.network_models import (
    InterfaceAssociation,
    InterfaceHandle,
    NetworkAddress,
)


@dataclass(frozen=True)
class AssociationRegistry:
    """Associations found by one discovery pass, frozen once built.

    Attributes:
        associations: Associations in post-order over the interface tree;
            sub-interfaces come before the interface they belong to.
        addresses_by_interface_name: Relevant addresses bound to each visited
            interface, recorded before deduplication against sub-interfaces.
        primary_by_interface_name: Last addressed association registered for
            each interface name.
    """

    associations: tuple[InterfaceAssociation, ...] = ()
    addresses_by_interface_name: Mapping[str, frozenset[NetworkAddress]] = field(
        default_factory=dict
    )
    primary_by_interface_name: Mapping[str, InterfaceAssociation] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        # Copy into read-only containers so callers cannot mutate a snapshot
        object.__setattr__(self, "associations", tuple(self.associations))
        object.__setattr__(
            self,
            "addresses_by_interface_name",
            MappingProxyType(
                {
                    name: frozenset(addresses)
                    for name, addresses in self.addresses_by_interface_name.items()
                }
            ),
        )
        object.__setattr__(
            self,
            "primary_by_interface_name",
            MappingProxyType(dict(self.primary_by_interface_name)),
        )

    def __len__(self) -> int:
        return len(self.associations)

    def __iter__(self) -> Iterator[InterfaceAssociation]:
        return iter(self.associations)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def network_interfaces(self) -> list[InterfaceHandle]:
        """All interfaces referenced by any association, first-seen order."""
        return _unique(ia.interface for ia in self.associations)

    def relevant_network_interfaces(self) -> list[InterfaceHandle]:
        """Interfaces with at least one association carrying an address."""
        return _unique(ia.interface for ia in self.associations if ia.has_address)

    def network_interfaces_for_address(
        self, address: NetworkAddress | None
    ) -> list[InterfaceHandle] | None:
        """Interfaces associated with ``address``.

        Returns:
            Matching interfaces (possibly empty), or None when no address
            was given.
        """
        if address is None:
            return None
        return [ia.interface for ia in self.associations if ia.address == address]

    def interface_addresses(
        self, interface: InterfaceHandle | None
    ) -> tuple[NetworkAddress, ...] | None:
        """Addresses associated with ``interface``, or None if there are none."""
        if interface is None:
            return None
        addresses = tuple(
            ia.address
            for ia in self.associations
            if ia.address is not None and ia.interface == interface
        )
        return addresses or None

    def relevant_interface_addresses(self) -> tuple[NetworkAddress, ...] | None:
        """Every associated address, or None if no association has one."""
        addresses = tuple(
            ia.address for ia in self.associations if ia.address is not None
        )
        return addresses or None

    def address_for_interface_name(self, name: str) -> InterfaceAssociation | None:
        """Primary association registered for an interface name."""
        return self.primary_by_interface_name.get(name)

    def first_association_with_address(self) -> InterfaceAssociation | None:
        for ia in self.associations:
            if ia.has_address:
                return ia
        return None

    def default_association(self) -> InterfaceAssociation | None:
        """Association to expose as the server address, see default_association()."""
        return default_association(self)


def _unique(interfaces) -> list[InterfaceHandle]:
    seen: set[InterfaceHandle] = set()
    result = []
    for interface in interfaces:
        if interface not in seen:
            seen.add(interface)
            result.append(interface)
    return result
