"""Lookup command - finds the local interface for a server hostname."""

from __future__ import annotations

import sys

import click

from netbind.backends.network import HostnameResolutionError, NetworkError
from netbind.discovery.lifecycle import get_configuration


def run_lookup(hostname: str | None = None) -> None:
    """Print the interface bound to ``hostname``.

    Args:
        hostname: Name to look up; the configured server hostname when None.
    """
    try:
        if hostname:
            interface = get_configuration().network.interface_for_hostname(hostname)
        else:
            interface = get_configuration().network_interface_by_server_name()
    except HostnameResolutionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except NetworkError as e:
        click.echo(f"Error: Network discovery failed: {e}", err=True)
        sys.exit(1)

    if interface is None:
        click.echo("Error: No server hostname configured", err=True)
        sys.exit(1)

    addresses = ", ".join(str(a) for a in interface.addresses) or "-"
    click.echo(f"{interface.name}: {addresses}")
