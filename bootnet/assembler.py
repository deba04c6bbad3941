"""Boot-time network document assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .constants import ADMIN_TAG, DEFAULT_MTU
from .exceptions import AdminNicUnresolvedError
from .models import Aggregation, Host, Nic, NicTag

if TYPE_CHECKING:
    from .config import BootNetConfig


def tag_mtus(nic_tags: list[NicTag]) -> dict[str, int]:
    """Map nic tag name to MTU."""
    return {tag.name: tag.mtu for tag in nic_tags}


def build_nictags(
    nics: list[Nic],
    aggregations: list[Aggregation],
    mtus: dict[str, int],
) -> list[dict[str, Any]]:
    """Build nictag entries for physical NICs and aggregations.

    NICs that belong to an aggregation contribute no entries of their own;
    their tags are provided through the aggregation.
    """
    aggregated_macs = {mac for aggr in aggregations for mac in aggr.macs}
    entries: list[dict[str, Any]] = []

    for nic in nics:
        if nic.mac in aggregated_macs:
            continue
        for tag in sorted(nic.nic_tags_provided):
            entries.append({"name": tag, "mac": nic.mac, "mtu": mtus.get(tag, DEFAULT_MTU)})

    for aggr in aggregations:
        for tag in sorted(aggr.nic_tags_provided):
            entries.append(
                {"name": tag, "interface": aggr.name, "mtu": mtus.get(tag, DEFAULT_MTU)}
            )

    return entries


def build_vnics(nics: list[Nic], admin_nic: Nic) -> list[dict[str, Any]]:
    """Build vnic entries for addressed, tagged NICs other than the admin NIC."""
    vnics = []
    for nic in nics:
        if nic.mac == admin_nic.mac or not nic.ip or not nic.nic_tag:
            continue
        vnics.append(
            {
                "mac": nic.mac,
                "ip": nic.ip,
                "netmask": nic.netmask,
                "gateway": nic.gateway,
                "nic_tag": nic.nic_tag,
                "vlan_id": nic.vlan_id or 0,
                "mtu": nic.mtu,
                "primary": nic.primary,
            }
        )
    return vnics


def assemble(
    host: Host,
    nics: list[Nic],
    admin_nic: Nic | None,
    *,
    aggregations: list[Aggregation],
    nic_tags: list[NicTag],
    config: BootNetConfig,
) -> dict[str, Any]:
    """Assemble the boot network document for a host.

    Raises:
        AdminNicUnresolvedError: If admin_nic is None
    """
    if admin_nic is None:
        raise AdminNicUnresolvedError(host.uuid)

    document: dict[str, Any] = {
        "host": {"uuid": host.uuid, "hostname": host.hostname},
        "admin_tag": ADMIN_TAG,
        "admin_mac": admin_nic.mac,
        "admin_ip": admin_nic.ip,
        "nictags": build_nictags(nics, aggregations, tag_mtus(nic_tags)),
        "aggregations": [
            {"name": aggr.name, "macs": list(aggr.macs), "lacp_mode": aggr.lacp_mode}
            for aggr in aggregations
        ],
        "vnics": build_vnics(nics, admin_nic),
        "resolvers": list(config.resolvers),
        "routes": dict(config.routes),
    }
    if config.dns_domain:
        document["dns_domain"] = config.dns_domain

    return document
