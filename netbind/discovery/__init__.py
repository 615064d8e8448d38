"""Interface discovery and default server address resolution."""

from netbind.discovery.filters import is_relevant_address, should_skip_interface
from netbind.discovery.lifecycle import (
    DiscoveryResult,
    DiscoveryState,
    NetworkConfiguration,
    get,
    get_configuration,
    reinitialize,
    reset_configuration,
)
from netbind.discovery.registry import AssociationRegistry
from netbind.discovery.resolver import default_association
from netbind.discovery.walker import InterfaceDiscoveryWalker

__all__ = [
    "AssociationRegistry",
    "DiscoveryResult",
    "DiscoveryState",
    "InterfaceDiscoveryWalker",
    "NetworkConfiguration",
    "default_association",
    "get",
    "get_configuration",
    "is_relevant_address",
    "reinitialize",
    "reset_configuration",
    "should_skip_interface",
]
