"""Directory service clients (CNAPI host inventory, NAPI network inventory)."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol, TypeVar
from urllib.parse import quote

import requests

from .constants import (
    CNAPI_SERVICE,
    DEFAULT_REQUEST_TIMEOUT_S,
    NAPI_SERVICE,
    USER_AGENT,
)
from .exceptions import ServiceError
from .models import Aggregation, Host, Nic, NicTag

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Directory(Protocol):
    """Inventory lookups the resolvers depend on."""

    def list_hosts(self) -> list[Host]: ...

    def list_nics(self, host_uuid: str) -> list[Nic]: ...

    def list_aggregations(self, *, belongs_to: str) -> list[Aggregation]: ...

    def get_nic(self, mac: str) -> Nic: ...

    def list_nic_tags(self) -> list[NicTag]: ...


def _get_json(
    service: str,
    url: str,
    *,
    params: dict[str, str] | None = None,
    timeout: int = DEFAULT_REQUEST_TIMEOUT_S,
) -> Any:
    """GET a URL and return the decoded JSON body.

    Raises:
        ServiceError: On transport failure, non-2xx status or invalid JSON
    """
    headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    logger.debug("%s request: GET %s params=%s", service, url, params)

    start_time = time.time()
    try:
        response = requests.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise ServiceError(
            f"{service} request to {url} failed: {e}", service=service, url=url
        ) from e
    logger.debug(
        "%s responded %s in %.2fs", service, response.status_code, time.time() - start_time
    )

    if not 200 <= response.status_code < 300:
        raise ServiceError(
            f"{service} returned {response.status_code} for {url}: {response.text}",
            service=service,
            url=url,
            status=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        raise ServiceError(
            f"{service} returned invalid JSON for {url}: {e}",
            service=service,
            url=url,
            status=response.status_code,
        ) from e


def _expect_list(service: str, url: str, body: Any) -> list[dict[str, Any]]:
    if not isinstance(body, list):
        raise ServiceError(
            f"{service} returned {type(body).__name__} for {url}, expected a list",
            service=service,
            url=url,
        )
    return body


def _decode(service: str, url: str, decode: Callable[[Any], T], record: Any) -> T:
    """Decode one API record, raising ServiceError if it is malformed."""
    try:
        return decode(record)
    except (KeyError, TypeError, AttributeError) as e:
        raise ServiceError(
            f"{service} returned a malformed record for {url}: {e!r}",
            service=service,
            url=url,
        ) from e


class CnapiClient:
    """Host inventory service client."""

    def __init__(self, url: str, *, timeout: int = DEFAULT_REQUEST_TIMEOUT_S):
        self.url = url.rstrip("/")
        self.timeout = timeout

    def list_servers(self) -> list[Host]:
        url = f"{self.url}/servers"
        body = _get_json(CNAPI_SERVICE, url, timeout=self.timeout)
        return [
            _decode(CNAPI_SERVICE, url, Host.from_api, item)
            for item in _expect_list(CNAPI_SERVICE, url, body)
        ]


class NapiClient:
    """Network inventory service client."""

    def __init__(self, url: str, *, timeout: int = DEFAULT_REQUEST_TIMEOUT_S):
        self.url = url.rstrip("/")
        self.timeout = timeout

    def list_nics(self, belongs_to_uuid: str) -> list[Nic]:
        url = f"{self.url}/nics"
        params = {"belongs_to_uuid": belongs_to_uuid, "belongs_to_type": "server"}
        body = _get_json(NAPI_SERVICE, url, params=params, timeout=self.timeout)
        return [
            _decode(NAPI_SERVICE, url, Nic.from_api, item)
            for item in _expect_list(NAPI_SERVICE, url, body)
        ]

    def list_aggregations(self, belongs_to_uuid: str) -> list[Aggregation]:
        url = f"{self.url}/aggregations"
        params = {"belongs_to_uuid": belongs_to_uuid}
        body = _get_json(NAPI_SERVICE, url, params=params, timeout=self.timeout)
        return [
            _decode(NAPI_SERVICE, url, Aggregation.from_api, item)
            for item in _expect_list(NAPI_SERVICE, url, body)
        ]

    def get_nic(self, mac: str) -> Nic:
        # NAPI addresses NICs by MAC with the colons stripped
        url = f"{self.url}/nics/{quote(mac.replace(':', ''))}"
        body = _get_json(NAPI_SERVICE, url, timeout=self.timeout)
        if not isinstance(body, dict):
            raise ServiceError(
                f"{NAPI_SERVICE} returned {type(body).__name__} for {url}, expected an object",
                service=NAPI_SERVICE,
                url=url,
            )
        return _decode(NAPI_SERVICE, url, Nic.from_api, body)

    def list_nic_tags(self) -> list[NicTag]:
        url = f"{self.url}/nic_tags"
        body = _get_json(NAPI_SERVICE, url, timeout=self.timeout)
        return [
            _decode(NAPI_SERVICE, url, NicTag.from_api, item)
            for item in _expect_list(NAPI_SERVICE, url, body)
        ]


class DirectoryClient:
    """Single view over the host and network inventory services."""

    def __init__(self, cnapi: CnapiClient, napi: NapiClient):
        self.cnapi = cnapi
        self.napi = napi

    def list_hosts(self) -> list[Host]:
        return self.cnapi.list_servers()

    def list_nics(self, host_uuid: str) -> list[Nic]:
        return self.napi.list_nics(host_uuid)

    def list_aggregations(self, *, belongs_to: str) -> list[Aggregation]:
        return self.napi.list_aggregations(belongs_to)

    def get_nic(self, mac: str) -> Nic:
        return self.napi.get_nic(mac)

    def list_nic_tags(self) -> list[NicTag]:
        return self.napi.list_nic_tags()
