#!/usr/bin/env python3
"""Netbind CLI - Command-line interface for netbind."""

import click

from netbind.config import LOG_LEVEL_ENV
from netbind.utils.env import get_env
from netbind.utils.logger import Logger


@click.group()
def netbind():
    """Discover network interfaces and the default server address."""
    if not Logger.is_configured():
        Logger.configure(level=get_env(LOG_LEVEL_ENV, default="INFO"), timestamps=True)


@netbind.command()
@click.option(
    "--skip",
    "skip",
    multiple=True,
    help="Interface name prefix to skip, in addition to NETBIND_SKIP_INTERFACES "
    "(repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--debug", is_flag=True, help="Trace every discovery step")
def interfaces(skip, output_format, debug):
    r"""List interfaces, their addresses and the default interface.

    \b
    Examples:
      netbind interfaces                       # Text table
      netbind interfaces --skip docker         # Also skip docker*
      netbind interfaces --format json         # Machine-readable output
    """
    from netbind.commands.interfaces_cmd import run_interfaces

    if debug:
        Logger.set_level("DEBUG")

    run_interfaces(skip=tuple(skip), output_format=output_format.lower())


@netbind.command()
def default():
    """Print the interface and address a server binds to by default."""
    from netbind.commands.default_cmd import run_default

    run_default()


@netbind.command()
@click.argument("hostname", required=False)
def lookup(hostname):
    """Find the local interface for HOSTNAME (default: NETBIND_SERVER_HOSTNAME)."""
    from netbind.commands.lookup_cmd import run_lookup

    run_lookup(hostname)


@netbind.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display netbind version information."""
    from netbind.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    netbind()
