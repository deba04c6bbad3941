"""Shared pytest fixtures for BootNet tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from bootnet.config import BootNetConfig
from bootnet.models import Aggregation, Host, Nic, NicTag


class FakeDirectory:
    """In-memory directory that records every call made to it."""

    def __init__(
        self,
        *,
        hosts: list[Host] | None = None,
        nics: dict[str, list[Nic]] | None = None,
        aggregations: dict[str, list[Aggregation]] | None = None,
        nics_by_mac: dict[str, Nic] | None = None,
        nic_tags: list[NicTag] | None = None,
    ):
        self.hosts = hosts or []
        self.nics = nics or {}
        self.aggregations = aggregations or {}
        self.nics_by_mac = nics_by_mac or {}
        self.nic_tags = nic_tags or []
        self.calls: list[tuple[str, str | None]] = []

    def list_hosts(self) -> list[Host]:
        self.calls.append(("list_hosts", None))
        return list(self.hosts)

    def list_nics(self, host_uuid: str) -> list[Nic]:
        self.calls.append(("list_nics", host_uuid))
        return list(self.nics.get(host_uuid, []))

    def list_aggregations(self, *, belongs_to: str) -> list[Aggregation]:
        self.calls.append(("list_aggregations", belongs_to))
        return list(self.aggregations.get(belongs_to, []))

    def get_nic(self, mac: str) -> Nic:
        self.calls.append(("get_nic", mac))
        return self.nics_by_mac[mac]

    def list_nic_tags(self) -> list[NicTag]:
        self.calls.append(("list_nic_tags", None))
        return list(self.nic_tags)

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


def make_nic(mac: str, *tags: str, host: str = "h1", **kwargs) -> Nic:
    """Build a Nic belonging to host with the given tags."""
    return Nic(mac=mac, belongs_to_uuid=host, nic_tags_provided=frozenset(tags), **kwargs)


def make_aggr(name: str, macs: list[str], *tags: str, host: str = "h1") -> Aggregation:
    """Build an Aggregation belonging to host with the given tags."""
    return Aggregation(
        id=f"{host}-{name}",
        belongs_to_uuid=host,
        macs=tuple(macs),
        nic_tags_provided=frozenset(tags),
        name=name,
    )


@pytest.fixture
def config() -> BootNetConfig:
    """A config pointing at unroutable service URLs."""
    return BootNetConfig(
        cnapi_url="http://cnapi.example.com",
        napi_url="http://napi.example.com",
        resolvers=("10.0.0.10",),
        dns_domain="example.com",
    )


@pytest.fixture
def hosts() -> list[Host]:
    """A small fleet of registered hosts."""
    return [
        Host(uuid="h1", hostname="hn0"),
        Host(uuid="h2", hostname="cn1"),
    ]


@pytest.fixture
def directory(hosts: list[Host]) -> FakeDirectory:
    """Directory where h1 has an admin-tagged NIC and no aggregations."""
    return FakeDirectory(
        hosts=hosts,
        nics={
            "h1": [
                make_nic("aa"),
                make_nic("bb", "admin", ip="10.0.0.5"),
            ]
        },
        nic_tags=[NicTag(name="admin", mtu=1500), NicTag(name="external", mtu=9000)],
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid config file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "cnapi": {"url": "http://cnapi.example.com"},
                "napi": {"url": "http://napi.example.com"},
                "requestTimeout": 5,
                "resolvers": ["10.0.0.10", "10.0.0.11"],
                "dnsDomain": "example.com",
            }
        )
    )
    return path
