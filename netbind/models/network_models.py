"""Pydantic models for host network interfaces and their address associations."""

from __future__ import annotations

from collections.abc import Iterator
from ipaddress import IPv4Address, IPv6Address

from pydantic import BaseModel, ConfigDict, Field

NetworkAddress = IPv4Address | IPv6Address


class InterfaceHandle(BaseModel):
    """A host network adapter, possibly carrying nested sub-interfaces."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name (e.g., 'eth0', 'eth0:1')")
    display_name: str | None = Field(
        None, description="Human-readable name, may be blank or differ from name"
    )
    addresses: tuple[NetworkAddress, ...] = Field(
        default=(), description="IP addresses bound to this interface, host order"
    )
    sub_interfaces: tuple[InterfaceHandle, ...] = Field(
        default=(), description="Virtual or alias interfaces nested under this one"
    )
    is_up: bool | None = Field(None, description="Whether interface is currently up")
    mac_address: str | None = Field(None, description="MAC address (if available)")
    mtu: int | None = Field(None, description="Maximum transmission unit")

    def walk(self) -> Iterator[InterfaceHandle]:
        """Yield this interface and every nested sub-interface, depth-first."""
        yield self
        for sub_interface in self.sub_interfaces:
            yield from sub_interface.walk()

    def __str__(self) -> str:
        return f"{self.name} ({self.display_name or self.name})"


class InterfaceAssociation(BaseModel):
    """One (interface, address) pairing found during discovery.

    An association without an address is a placeholder recorded for an
    interface that had no usable address of its own.
    """

    model_config = ConfigDict(frozen=True)

    address: NetworkAddress | None = Field(
        None, description="Relevant address, or None for a placeholder"
    )
    interface: InterfaceHandle = Field(..., description="Owning interface")
    parent_name: str | None = Field(
        None, description="Name of the parent interface, None when top-level"
    )

    @property
    def short_name(self) -> str:
        return self.interface.name

    @property
    def display_name(self) -> str:
        """Trimmed display name (falling back to the short name) plus address."""
        display_name = (self.interface.display_name or "").strip()
        if not display_name:
            display_name = self.interface.name

        if self.address is not None:
            display_name += f" ({self.address})"

        return display_name

    @property
    def has_address(self) -> bool:
        return self.address is not None

    def __str__(self) -> str:
        return (
            f"InterfaceAssociation(addr={self.address}, "
            f"iface={self.interface.name}, parent={self.parent_name})"
        )
