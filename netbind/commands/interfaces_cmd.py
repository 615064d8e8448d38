"""Interfaces command - shows discovered interface associations."""

from __future__ import annotations

import json
import sys
from typing import Any

import click
import yaml

from netbind.config import NetworkSettings
from netbind.discovery.lifecycle import NetworkConfiguration, get_configuration
from netbind.discovery.registry import AssociationRegistry
from netbind.models.network_models import InterfaceAssociation


def association_to_dict(association: InterfaceAssociation | None) -> dict | None:
    """Serialize an association for JSON/YAML output."""
    if association is None:
        return None
    return {
        "name": association.short_name,
        "display_name": association.display_name,
        "parent": association.parent_name,
        "address": str(association.address) if association.has_address else None,
    }


def registry_to_dict(registry: AssociationRegistry) -> dict[str, Any]:
    """Serialize a registry for JSON/YAML output."""
    return {
        "associations": [association_to_dict(ia) for ia in registry],
        "addresses_by_interface": {
            name: sorted(str(a) for a in addresses)
            for name, addresses in sorted(registry.addresses_by_interface_name.items())
        },
        "default": association_to_dict(registry.default_association()),
    }


def _print_text(registry: AssociationRegistry) -> None:
    click.echo("Network Interfaces:")
    if not registry.associations:
        click.echo("  No network interfaces detected")
    for ia in registry:
        parent = f"  (parent: {ia.parent_name})" if ia.parent_name else ""
        address = str(ia.address) if ia.has_address else "-"
        click.echo(f"  {ia.short_name:<16} {address:<16}{parent}")

    default = registry.default_association()
    click.echo("\nDefault Interface:")
    if default is None:
        click.echo("  None")
    else:
        click.echo(f"  {default.display_name}")


def run_interfaces(
    skip: tuple[str, ...] = (),
    output_format: str = "text",
) -> None:
    """Discover interfaces and print the associations.

    Args:
        skip: Extra name prefixes to skip, added to the configured ones.
        output_format: "text", "json" or "yaml".
    """
    if skip:

        def settings_provider() -> NetworkSettings:
            settings = NetworkSettings.from_env()
            return settings.model_copy(
                update={"skip_interfaces": settings.skip_interfaces + tuple(skip)}
            )

        configuration = NetworkConfiguration(
            network=get_configuration().network, settings_provider=settings_provider
        )
    else:
        configuration = get_configuration()

    registry = configuration.get()
    if registry is None:
        click.echo(
            f"Error: Network discovery failed: {configuration.last_error}", err=True
        )
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(registry_to_dict(registry), indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(registry_to_dict(registry), default_flow_style=False))
    else:
        _print_text(registry)
