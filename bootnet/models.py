"""Inventory records returned by the directory services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_LACP_MODE, DEFAULT_MTU


@dataclass(frozen=True)
class Host:
    """A registered compute node."""

    uuid: str
    hostname: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Host:
        return cls(uuid=data["uuid"], hostname=data.get("hostname") or "")


@dataclass(frozen=True)
class Nic:
    """A network interface record.

    Only ``mac``, ``belongs_to_uuid`` and ``nic_tags_provided`` take part in
    admin resolution; the remaining fields feed the boot network document.
    """

    mac: str
    belongs_to_uuid: str = ""
    nic_tags_provided: frozenset[str] = field(default_factory=frozenset)
    belongs_to_type: str | None = None
    ip: str | None = None
    netmask: str | None = None
    gateway: str | None = None
    vlan_id: int | None = None
    nic_tag: str | None = None
    mtu: int | None = None
    primary: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Nic:
        return cls(
            mac=data["mac"],
            belongs_to_uuid=data.get("belongs_to_uuid") or "",
            nic_tags_provided=frozenset(data.get("nic_tags_provided") or ()),
            belongs_to_type=data.get("belongs_to_type"),
            ip=data.get("ip"),
            netmask=data.get("netmask"),
            gateway=data.get("gateway"),
            vlan_id=data.get("vlan_id"),
            nic_tag=data.get("nic_tag"),
            mtu=data.get("mtu"),
            primary=bool(data.get("primary", False)),
        )

    def provides(self, tag: str) -> bool:
        return tag in self.nic_tags_provided


@dataclass(frozen=True)
class Aggregation:
    """A link aggregation.

    The first entry of ``macs`` is the aggregation's own MAC address.
    """

    id: str
    belongs_to_uuid: str = ""
    macs: tuple[str, ...] = ()
    nic_tags_provided: frozenset[str] = field(default_factory=frozenset)
    name: str = ""
    lacp_mode: str = DEFAULT_LACP_MODE

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Aggregation:
        aggr_id = data["id"]
        return cls(
            id=aggr_id,
            belongs_to_uuid=data.get("belongs_to_uuid") or "",
            macs=tuple(data.get("macs") or ()),
            nic_tags_provided=frozenset(data.get("nic_tags_provided") or ()),
            name=data.get("name") or aggregation_name(aggr_id),
            lacp_mode=data.get("lacp_mode") or DEFAULT_LACP_MODE,
        )

    def provides(self, tag: str) -> bool:
        return tag in self.nic_tags_provided


@dataclass(frozen=True)
class NicTag:
    """A named network role and its MTU."""

    name: str
    mtu: int = DEFAULT_MTU
    uuid: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> NicTag:
        return cls(
            name=data["name"],
            mtu=data.get("mtu") or DEFAULT_MTU,
            uuid=data.get("uuid"),
        )


def aggregation_name(aggr_id: str) -> str:
    """Return the link name from an aggregation ID.

    Aggregation IDs have the form ``<belongs_to_uuid>-<name>``.

    Example: "564d...-aggr0" -> "aggr0"
    """
    return aggr_id.rsplit("-", 1)[-1]
