"""Tests for the psutil-backed host network enumeration."""

from __future__ import annotations

import socket
import types
from ipaddress import ip_address

import psutil
import pytest

from netbind.backends.network import (
    EnumerationError,
    HostnameResolutionError,
    Network,
)


def _addr(family, address):
    return types.SimpleNamespace(
        family=family, address=address, netmask=None, broadcast=None, ptp=None
    )


def _stats(isup=True, mtu=1500):
    return types.SimpleNamespace(isup=isup, duplex=0, speed=1000, mtu=mtu, flags="")


HOST_ADDRS = {
    "lo": [_addr(socket.AF_INET, "127.0.0.1"), _addr(socket.AF_INET6, "::1")],
    "eth0": [
        _addr(psutil.AF_LINK, "00:11:22:33:44:55"),
        _addr(socket.AF_INET, "10.0.0.5"),
        _addr(socket.AF_INET6, "fe80::1%eth0"),
    ],
    "eth0:1": [_addr(socket.AF_INET, "10.0.0.6")],
    "wlan0:9": [_addr(socket.AF_INET, "192.168.1.9")],
}


@pytest.fixture
def fake_host(monkeypatch: pytest.MonkeyPatch):
    """Patch psutil to report a fixed set of interfaces."""
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: HOST_ADDRS)
    monkeypatch.setattr(
        psutil,
        "net_if_stats",
        lambda: {"eth0": _stats(), "lo": _stats(mtu=65536), "eth0:1": _stats()},
    )


def test_list_interfaces_nests_aliases(fake_host):
    """Alias labels are nested under their base interface."""
    interfaces = Network().list_interfaces()

    assert [i.name for i in interfaces] == ["eth0", "lo", "wlan0:9"]
    eth0 = interfaces[0]
    assert [s.name for s in eth0.sub_interfaces] == ["eth0:1"]
    assert eth0.sub_interfaces[0].addresses == (ip_address("10.0.0.6"),)


def test_list_interfaces_parses_addresses_and_stats(fake_host):
    """Addresses are parsed, zone suffixes dropped and stats attached."""
    eth0, lo, wlan = Network().list_interfaces()

    assert eth0.addresses == (ip_address("10.0.0.5"), ip_address("fe80::1"))
    assert eth0.mac_address == "00:11:22:33:44:55"
    assert eth0.is_up is True
    assert eth0.display_name == "eth0"
    assert lo.mtu == 65536
    assert wlan.is_up is None


def test_list_interfaces_wraps_os_errors(monkeypatch: pytest.MonkeyPatch):
    """Host failures surface as EnumerationError."""

    def broken():
        raise OSError("getifaddrs failed")

    monkeypatch.setattr(psutil, "net_if_addrs", broken)

    with pytest.raises(EnumerationError):
        Network().list_interfaces()


def _fake_getaddrinfo(mapping):
    def getaddrinfo(host, *_args, **_kwargs):
        if host not in mapping:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        return [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", (addr, 0))
            for addr in mapping[host]
        ]

    return getaddrinfo


def test_interface_for_hostname(fake_host, monkeypatch: pytest.MonkeyPatch):
    """Hostnames resolve to the interface bound to their address."""
    monkeypatch.setattr(
        socket,
        "getaddrinfo",
        _fake_getaddrinfo({"media.local": ["10.0.0.5"], "alias.local": ["10.0.0.6"]}),
    )
    network = Network()

    assert network.interface_for_hostname("media.local").name == "eth0"
    assert network.interface_for_hostname("alias.local").name == "eth0:1"


def test_interface_for_hostname_unresolvable(
    fake_host, monkeypatch: pytest.MonkeyPatch
):
    """Unknown hostnames raise HostnameResolutionError."""
    monkeypatch.setattr(socket, "getaddrinfo", _fake_getaddrinfo({}))

    with pytest.raises(HostnameResolutionError) as excinfo:
        Network().interface_for_hostname("nowhere.invalid")
    assert excinfo.value.hostname == "nowhere.invalid"


def test_interface_for_hostname_not_local(fake_host, monkeypatch: pytest.MonkeyPatch):
    """Resolvable but non-local hostnames raise HostnameResolutionError."""
    monkeypatch.setattr(
        socket, "getaddrinfo", _fake_getaddrinfo({"remote.example": ["203.0.113.7"]})
    )

    with pytest.raises(HostnameResolutionError) as excinfo:
        Network().interface_for_hostname("remote.example")
    assert "203.0.113.7" in str(excinfo.value)


def test_default_host_name(monkeypatch: pytest.MonkeyPatch):
    """The host name falls back to localhost on errors."""
    monkeypatch.setattr(socket, "gethostname", lambda: "mediabox")
    assert Network.default_host_name() == "mediabox"

    def broken():
        raise OSError("no hostname")

    monkeypatch.setattr(socket, "gethostname", broken)
    assert Network.default_host_name() == "localhost"
