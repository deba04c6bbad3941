"""Admin interface resolution.

The admin NIC of a host is chosen by priority:

1. The first aggregation (in listing order) providing the admin tag. Its
   first MAC is the aggregation's own address, and the NIC with that MAC is
   the admin NIC.
2. Otherwise, the first NIC (in listing order) providing the admin tag.

Finding neither is not an error here; callers decide how to treat a host
without an admin NIC.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .constants import ADMIN_TAG
from .exceptions import AggregationInvariantError
from .models import Aggregation, Nic

if TYPE_CHECKING:
    from .directory import Directory

logger = logging.getLogger(__name__)


def admin_aggregation_mac(aggregations: Iterable[Aggregation], tag: str = ADMIN_TAG) -> str | None:
    """Return the MAC of the first aggregation providing tag, if any.

    Raises:
        AggregationInvariantError: If that aggregation has no MACs
    """
    for aggr in aggregations:
        if not aggr.provides(tag):
            continue
        if not aggr.macs:
            raise AggregationInvariantError(aggr.id)
        logger.debug("Aggregation %s provides %s tag", aggr.id, tag)
        return aggr.macs[0]
    return None


def first_tagged_nic(nics: Iterable[Nic], tag: str = ADMIN_TAG) -> Nic | None:
    """Return the first NIC providing tag, if any."""
    for nic in nics:
        if nic.provides(tag):
            return nic
    return None


def resolve_admin_nic(
    directory: Directory,
    host_uuid: str,
    *,
    aggregations: list[Aggregation] | None = None,
) -> tuple[list[Nic], Nic | None]:
    """Return all NICs of a host and its admin NIC.

    Args:
        directory: Inventory lookups
        host_uuid: Host to resolve
        aggregations: The host's aggregations if already fetched; listed
            from the directory otherwise

    Returns:
        Tuple of (all NICs in listing order, admin NIC or None)

    Raises:
        ServiceError: If any directory call fails
        AggregationInvariantError: If the admin aggregation has no MACs
    """
    nics = directory.list_nics(host_uuid)

    if aggregations is None:
        aggregations = directory.list_aggregations(belongs_to=host_uuid)

    admin_nic: Nic | None = None
    admin_mac = admin_aggregation_mac(aggregations)
    if admin_mac is not None:
        admin_nic = directory.get_nic(admin_mac)
        logger.info("Admin NIC %s (from aggregation) for host %s", admin_nic.mac, host_uuid)
    else:
        admin_nic = first_tagged_nic(nics)
        if admin_nic is not None:
            logger.info("Admin NIC %s (from NIC tag) for host %s", admin_nic.mac, host_uuid)
        else:
            logger.debug("No admin NIC found for host %s", host_uuid)

    return nics, admin_nic
