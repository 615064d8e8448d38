"""Netbind - network interface discovery and server address resolution."""

import logging

from netbind.version.netbind_version import NETBIND_VERSION, Version

__version__ = str(NETBIND_VERSION)
__version_info__ = NETBIND_VERSION

# Library modules stay silent until an application configures Logger
logging.getLogger("netbind").addHandler(logging.NullHandler())

__all__ = [
    "NETBIND_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
