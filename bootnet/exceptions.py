"""BootNet exception classes."""

from __future__ import annotations


class BootNetError(RuntimeError):
    """Base exception for BootNet errors."""


class UserError(BootNetError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 1):
        super().__init__(message)
        self.rc = rc


class ConfigError(UserError):
    """Static configuration file is missing or invalid."""


class HostNotFoundError(BootNetError):
    """No registered host matches the identifier by UUID or hostname."""

    def __init__(self, identifier: str):
        super().__init__(f"Host not found: {identifier}")
        self.identifier = identifier


class LocalIdentityUnavailableError(BootNetError):
    """The UUID of the running host could not be determined."""


class ServiceError(BootNetError):
    """A directory service request failed.

    Covers transport errors, non-2xx responses and undecodable bodies.
    """

    def __init__(
        self,
        message: str,
        *,
        service: str,
        url: str,
        status: int | None = None,
    ):
        super().__init__(message)
        self.service = service
        self.url = url
        self.status = status


class AdminNicUnresolvedError(BootNetError):
    """No admin NIC could be determined for the host."""

    def __init__(self, host_uuid: str):
        super().__init__(
            f"No admin NIC found for host {host_uuid}: "
            f"no aggregation or NIC provides the admin tag"
        )
        self.host_uuid = host_uuid


class AggregationInvariantError(AssertionError):
    """An admin-tagged aggregation has no member MACs.

    This signals corrupt upstream data and is not recoverable.
    """

    def __init__(self, aggregation_id: str):
        super().__init__(f"Admin aggregation {aggregation_id} has no MAC addresses")
        self.aggregation_id = aggregation_id
