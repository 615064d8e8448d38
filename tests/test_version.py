"""Tests for the netbind version information."""

from datetime import datetime

from netbind.version.netbind_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2026, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2026"
    assert "1.2.3" in v.full_version()
    assert "abcdef12" in v.full_version()


def test_netbind_version_instance():
    """Test the global NETBIND_VERSION instance."""
    import netbind
    from netbind.version.netbind_version import NETBIND_VERSION

    assert isinstance(NETBIND_VERSION, Version)
    assert len(NETBIND_VERSION.hash) == 64
    assert netbind.__version__ == str(NETBIND_VERSION)
