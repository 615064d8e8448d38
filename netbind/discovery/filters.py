"""Predicates deciding which addresses and interfaces discovery keeps."""

from __future__ import annotations

from collections.abc import Iterable

from netbind.models.network_models import NetworkAddress


def is_relevant_address(address: NetworkAddress) -> bool:
    """Return True when ``address`` is usable for server binding.

    Only non-loopback IPv4 addresses are relevant.
    """
    return not (address.version == 6 or address.is_loopback)


def should_skip_interface(
    name: str | None,
    display_name: str | None,
    prefixes: Iterable[str | None],
) -> bool:
    """Return True when either name starts with a configured prefix.

    Matching is a case-insensitive prefix match, so "tap" skips "tap0" and
    "TAP1" but not "etap0".

    Args:
        name: Short interface name.
        display_name: Display name of the interface.
        prefixes: Configured prefixes; None and empty entries are ignored.
    """
    lowered_names = [n.lower() for n in (name, display_name) if n]
    for prefix in prefixes:
        if not prefix:
            continue
        prefix = prefix.lower()
        if any(n.startswith(prefix) for n in lowered_names):
            return True

    return False
