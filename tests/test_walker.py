"""Tests for depth-first interface discovery."""

from ipaddress import ip_address

import pytest

from netbind.backends.network import EnumerationError
from netbind.discovery.walker import InterfaceDiscoveryWalker
from netbind.models.network_models import InterfaceHandle


def _iface(name, *addresses, subs=(), display_name=None):
    return InterfaceHandle(
        name=name,
        display_name=display_name if display_name is not None else name,
        addresses=addresses,
        sub_interfaces=tuple(subs),
    )


def _pairs(registry):
    return [
        (ia.short_name, str(ia.address) if ia.address else None, ia.parent_name)
        for ia in registry.associations
    ]


def test_single_interface_filters_ipv6_and_loopback():
    """Only the IPv4 non-loopback address is recorded and associated."""
    eth0 = _iface("eth0", "10.0.0.5", "fe80::1", "127.0.0.1")

    registry = InterfaceDiscoveryWalker().walk([eth0])

    assert registry.addresses_by_interface_name["eth0"] == {ip_address("10.0.0.5")}
    assert _pairs(registry) == [("eth0", "10.0.0.5", None)]
    assert registry.primary_by_interface_name["eth0"].address == ip_address(
        "10.0.0.5"
    )


def test_shared_address_is_attributed_to_sub_interface():
    """An address on both parent and alias belongs to the alias only."""
    eth0 = _iface("eth0", "10.0.0.5", subs=[_iface("eth0:1", "10.0.0.5")])

    registry = InterfaceDiscoveryWalker().walk([eth0])

    assert _pairs(registry) == [("eth0:1", "10.0.0.5", "eth0"), ("eth0", None, None)]
    assert registry.addresses_by_interface_name["eth0"] == {ip_address("10.0.0.5")}
    assert registry.addresses_by_interface_name["eth0:1"] == {ip_address("10.0.0.5")}
    assert "eth0" not in registry.primary_by_interface_name
    assert registry.primary_by_interface_name["eth0:1"].parent_name == "eth0"


def test_address_claimed_by_grandchild_is_not_reattributed():
    """Deduplication covers the whole subtree, not just direct children."""
    eth0 = _iface(
        "eth0",
        "10.0.0.5",
        "10.0.0.9",
        subs=[_iface("eth0:1", subs=[_iface("eth0:1:a", "10.0.0.5")])],
    )

    registry = InterfaceDiscoveryWalker().walk([eth0])

    assert _pairs(registry) == [
        ("eth0:1:a", "10.0.0.5", "eth0:1"),
        ("eth0:1", None, "eth0"),
        ("eth0", "10.0.0.9", None),
    ]


def test_post_order_publication():
    """Sub-interfaces are published before their parent, siblings in order."""
    eth0 = _iface(
        "eth0",
        "10.0.0.1",
        subs=[_iface("eth0:1", "10.0.0.2"), _iface("eth0:2", "10.0.0.3")],
    )
    eth1 = _iface("eth1", "10.0.1.1")

    registry = InterfaceDiscoveryWalker().walk([eth0, eth1])

    assert [ia.short_name for ia in registry.associations] == [
        "eth0:1",
        "eth0:2",
        "eth0",
        "eth1",
    ]


def test_interface_without_relevant_address_gets_placeholder():
    """Exactly one placeholder is produced for an address-less interface."""
    lo = _iface("lo", "127.0.0.1", "::1")

    registry = InterfaceDiscoveryWalker().walk([lo])

    assert _pairs(registry) == [("lo", None, None)]
    assert registry.addresses_by_interface_name["lo"] == frozenset()
    assert registry.primary_by_interface_name == {}


def test_primary_is_last_address_registered():
    """With several addresses the last association wins the primary slot."""
    eth0 = _iface("eth0", "10.0.0.5", "10.0.0.6", "10.0.0.7")

    registry = InterfaceDiscoveryWalker().walk([eth0])

    assert len(registry.associations) == 3
    assert registry.primary_by_interface_name["eth0"].address == ip_address(
        "10.0.0.7"
    )


def test_skipped_top_level_interfaces_contribute_nothing():
    """Skipped interfaces appear neither in associations nor in the address map."""
    interfaces = [
        _iface("eth0", "10.0.0.5"),
        _iface("tap0", "10.8.0.1"),
        _iface("tap1", "10.8.0.2"),
    ]

    registry = InterfaceDiscoveryWalker(skip_prefixes=["tap"]).walk(interfaces)

    assert _pairs(registry) == [("eth0", "10.0.0.5", None)]
    assert set(registry.addresses_by_interface_name) == {"eth0"}


def test_skipped_interface_subtree_is_not_visited():
    """Sub-interfaces of a skipped interface are excluded as well."""
    vmnet = _iface("vmnet1", "172.16.0.1", subs=[_iface("eth9", "172.16.0.2")])

    registry = InterfaceDiscoveryWalker(skip_prefixes=["vmnet"]).walk(
        [vmnet, _iface("eth0", "10.0.0.5")]
    )

    names = {ia.short_name for ia in registry.associations}
    assert names == {"eth0"}
    assert "eth9" not in registry.addresses_by_interface_name


def test_skipped_sub_interface_does_not_claim_addresses():
    """A parent keeps an address shared with a skipped alias."""
    eth0 = _iface("eth0", "10.0.0.5", subs=[_iface("tap0", "10.0.0.5")])

    registry = InterfaceDiscoveryWalker(skip_prefixes=["tap"]).walk([eth0])

    assert _pairs(registry) == [("eth0", "10.0.0.5", None)]


def test_skip_by_display_name():
    """Display name prefixes skip interfaces too."""
    vbox = _iface("en5", "192.168.56.1", display_name="VirtualBox Host-Only")

    registry = InterfaceDiscoveryWalker(skip_prefixes=["virtualbox"]).walk([vbox])

    assert registry.associations == ()


def test_every_visited_interface_contributes_an_entry():
    """Each visited, non-skipped interface has at least one association."""
    tree = [
        _iface("eth0", subs=[_iface("eth0:1"), _iface("eth0:2", "10.0.0.2")]),
        _iface("lo", "127.0.0.1"),
    ]

    registry = InterfaceDiscoveryWalker().walk(tree)

    assert {ia.short_name for ia in registry.associations} == {
        "eth0",
        "eth0:1",
        "eth0:2",
        "lo",
    }


def test_walk_without_interfaces():
    """An empty host yields an empty registry."""
    registry = InterfaceDiscoveryWalker().walk([])

    assert registry.associations == ()
    assert registry.addresses_by_interface_name == {}


def test_enumeration_error_propagates():
    """Host enumeration failures abort the walk."""

    def interfaces():
        yield _iface("eth0", "10.0.0.5")
        raise EnumerationError("adapter list changed")

    with pytest.raises(EnumerationError):
        InterfaceDiscoveryWalker().walk(interfaces())
