"""Default command - prints the address a server would bind to."""

import sys

import click

from netbind.discovery.lifecycle import get_configuration


def run_default() -> None:
    """Print the default association, exiting 1 when there is none."""
    configuration = get_configuration()
    association = configuration.default_association()

    if association is None:
        if configuration.last_error is not None:
            click.echo(
                f"Error: Network discovery failed: {configuration.last_error}",
                err=True,
            )
        else:
            click.echo("Error: No default network interface found", err=True)
        sys.exit(1)

    click.echo(f"{association.short_name} {association.address}")
