"""Default server address resolution over a finished discovery registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from netbind.models.network_models import InterfaceAssociation
from netbind.utils.logger import Logger

if TYPE_CHECKING:
    from netbind.discovery.registry import AssociationRegistry


def default_association(
    registry: AssociationRegistry,
) -> InterfaceAssociation | None:
    """Return the association a server should bind to by default.

    Takes the first association that has an address. Because sub-interfaces
    are published before their parent, that association may belong to an
    alias; in that case the parent's primary association is returned
    instead, climbing exactly one level. When the parent registered no
    address of its own the result is None even though an addressed alias
    exists.

    Args:
        registry: A completed discovery registry.

    Returns:
        The default association, or None if none can be determined.
    """
    log = Logger.child("discovery.resolver")
    association = registry.first_association_with_address()

    if association is None:
        log.debug("No association with an address; no default interface")
        return None

    if association.parent_name is not None:
        parent = registry.address_for_interface_name(association.parent_name)
        log.debug(f"First association has parent: {association} -> {parent}")
        return parent

    log.debug(f"First network interface: {association}")
    return association
