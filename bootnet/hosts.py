"""Resolve a hostname or UUID to a registered host."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .exceptions import HostNotFoundError, LocalIdentityUnavailableError
from .models import Host

if TYPE_CHECKING:
    from .directory import Directory

logger = logging.getLogger(__name__)


def find_host(hosts: list[Host], identifier: str) -> Host | None:
    """Find a host by exact UUID, then by exact hostname.

    A UUID match anywhere in the list beats a hostname match. Hosts with no
    hostname never match by hostname.
    """
    for host in hosts:
        if host.uuid == identifier:
            return host
    for host in hosts:
        if host.hostname and host.hostname == identifier:
            return host
    return None


class HostResolver:
    """Maps a user-supplied identifier (or the local host) to a Host.

    Args:
        directory: Source of the registered host list
        local_identity: Returns the running host's UUID; only called when no
            identifier is given
    """

    def __init__(self, directory: Directory, local_identity: Callable[[], str]):
        self.directory = directory
        self.local_identity = local_identity

    def resolve(self, identifier: str | None = None) -> Host:
        """Return the host matching identifier.

        Raises:
            HostNotFoundError: If no host has that UUID or hostname
            LocalIdentityUnavailableError: If identifier is absent and the
                local UUID cannot be determined
        """
        if identifier is None:
            identifier = self.local_identity()
            if not identifier:
                raise LocalIdentityUnavailableError("Local host UUID is empty")
            logger.debug("No host given, using local host %s", identifier)
            return self.resolve(identifier)

        host = find_host(self.directory.list_hosts(), identifier)
        if host is None:
            raise HostNotFoundError(identifier)

        logger.debug("Resolved %s to host %s (%s)", identifier, host.uuid, host.hostname)
        return host
