"""Tests for bootnet/assembler.py - boot network document."""

from __future__ import annotations

import pytest
from bootnet.assembler import assemble, build_nictags, build_vnics
from bootnet.config import BootNetConfig
from bootnet.exceptions import AdminNicUnresolvedError
from bootnet.models import Host, NicTag
from conftest import make_aggr, make_nic


class TestBuildNictags:
    """Tests for build_nictags."""

    def test_physical_nics(self):
        """Each tag of a physical NIC becomes an entry with its MTU."""
        nics = [make_nic("aa", "admin"), make_nic("bb", "external", "internal")]

        entries = build_nictags(nics, [], {"external": 9000})

        assert entries == [
            {"name": "admin", "mac": "aa", "mtu": 1500},
            {"name": "external", "mac": "bb", "mtu": 9000},
            {"name": "internal", "mac": "bb", "mtu": 1500},
        ]

    def test_aggregated_nics_use_aggregation(self):
        """Member NICs are skipped; the aggregation provides the tags."""
        nics = [make_nic("aa", "admin"), make_nic("cc"), make_nic("dd")]
        aggrs = [make_aggr("aggr0", ["cc", "dd"], "external")]

        entries = build_nictags(nics, aggrs, {})

        assert entries == [
            {"name": "admin", "mac": "aa", "mtu": 1500},
            {"name": "external", "interface": "aggr0", "mtu": 1500},
        ]


class TestBuildVnics:
    """Tests for build_vnics."""

    def test_excludes_admin_and_unaddressed(self):
        """Only addressed, tagged, non-admin NICs become vnics."""
        admin = make_nic("aa", "admin", ip="10.0.0.5", nic_tag="admin")
        nics = [
            admin,
            make_nic("bb"),
            make_nic(
                "cc",
                ip="192.168.1.5",
                netmask="255.255.255.0",
                gateway="192.168.1.1",
                nic_tag="external",
                vlan_id=10,
                primary=True,
            ),
            make_nic("dd", ip="192.168.2.5"),
        ]

        vnics = build_vnics(nics, admin)

        assert vnics == [
            {
                "mac": "cc",
                "ip": "192.168.1.5",
                "netmask": "255.255.255.0",
                "gateway": "192.168.1.1",
                "nic_tag": "external",
                "vlan_id": 10,
                "mtu": None,
                "primary": True,
            }
        ]


class TestAssemble:
    """Tests for assemble."""

    def test_requires_admin_nic(self, config: BootNetConfig):
        """No admin NIC raises AdminNicUnresolvedError."""
        with pytest.raises(AdminNicUnresolvedError, match="h1") as exc_info:
            assemble(
                Host(uuid="h1", hostname="hn0"),
                [make_nic("aa")],
                None,
                aggregations=[],
                nic_tags=[],
                config=config,
            )
        assert exc_info.value.host_uuid == "h1"

    def test_document(self, config: BootNetConfig):
        """Document carries host, admin NIC and passthrough settings."""
        admin = make_nic("bb", "admin", ip="10.0.0.5")

        doc = assemble(
            Host(uuid="h1", hostname="hn0"),
            [make_nic("aa"), admin],
            admin,
            aggregations=[],
            nic_tags=[NicTag(name="admin", mtu=1500)],
            config=config,
        )

        assert doc["host"] == {"uuid": "h1", "hostname": "hn0"}
        assert doc["admin_tag"] == "admin"
        assert doc["admin_mac"] == "bb"
        assert doc["admin_ip"] == "10.0.0.5"
        assert doc["nictags"] == [{"name": "admin", "mac": "bb", "mtu": 1500}]
        assert doc["aggregations"] == []
        assert doc["vnics"] == []
        assert doc["resolvers"] == ["10.0.0.10"]
        assert doc["routes"] == {}
        assert doc["dns_domain"] == "example.com"

    def test_no_dns_domain(self):
        """dns_domain is omitted when not configured."""
        cfg = BootNetConfig(cnapi_url="http://c", napi_url="http://n")
        admin = make_nic("bb", "admin")

        doc = assemble(
            Host(uuid="h1"), [admin], admin, aggregations=[], nic_tags=[], config=cfg
        )

        assert "dns_domain" not in doc

    def test_aggregation_listed(self, config: BootNetConfig):
        """Aggregations appear with their MACs and LACP mode."""
        admin = make_nic("cc")
        aggr = make_aggr("aggr0", ["cc", "dd"], "admin")

        doc = assemble(
            Host(uuid="h1"),
            [make_nic("cc"), make_nic("dd")],
            admin,
            aggregations=[aggr],
            nic_tags=[],
            config=config,
        )

        assert doc["aggregations"] == [{"name": "aggr0", "macs": ["cc", "dd"], "lacp_mode": "off"}]
        assert doc["nictags"] == [{"name": "admin", "interface": "aggr0", "mtu": 1500}]
        assert doc["admin_mac"] == "cc"
