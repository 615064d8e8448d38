"""
Version command - displays netbind version information
"""

import click

from netbind.backends.network import Network
from netbind.version import NETBIND_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display netbind version information.

    Args:
        verbose: If True, show the full hash, build date and host name
    """
    if verbose:
        click.echo(f"netbind version {NETBIND_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {NETBIND_VERSION}")
        click.echo(f"  Build Date:       {NETBIND_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {NETBIND_VERSION.hash}")
        click.echo(f"  Host Name:        {Network.default_host_name()}")
    else:
        click.echo(f"netbind {NETBIND_VERSION}")
