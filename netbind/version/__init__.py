"""Version information for netbind."""

from netbind.version.netbind_version import NETBIND_VERSION, Version

__all__ = ["NETBIND_VERSION", "Version"]
