"""
BootNet - boot-time network configuration for compute nodes.

Resolves a node's NICs from the fleet inventory services, picks the NIC
that carries the admin network (an admin-tagged aggregation first, then an
admin-tagged NIC) and prints the node's boot network document.
"""

from __future__ import annotations

from .admin import resolve_admin_nic
from .cli import main
from .constants import ADMIN_TAG
from .exceptions import BootNetError, UserError

__all__ = [
    "ADMIN_TAG",
    "BootNetError",
    "UserError",
    "main",
    "resolve_admin_nic",
]
