"""Boot network document pipeline.

Stages run strictly in order over a shared PipelineContext. Each stage reads
earlier fields and writes only its own; the first exception aborts the run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from .admin import resolve_admin_nic
from .assembler import assemble
from .config import BootNetConfig
from .directory import CnapiClient, Directory, DirectoryClient, NapiClient
from .exceptions import BootNetError
from .hosts import HostResolver
from .models import Aggregation, Host, Nic, NicTag
from .sysinfo import local_host_uuid


@dataclass
class PipelineContext:
    """State accumulated across pipeline stages."""

    identifier: str | None
    host: Host | None = None
    aggregations: list[Aggregation] = field(default_factory=list)
    nic_tags: list[NicTag] = field(default_factory=list)
    nics: list[Nic] = field(default_factory=list)
    admin_nic: Nic | None = None
    document: dict[str, Any] | None = None


def require_host(ctx: PipelineContext) -> Host:
    """Return the resolved host, or raise if the host stage has not run."""
    if ctx.host is None:
        raise BootNetError("Host must be resolved before this stage")
    return ctx.host


class Pipeline:
    """Resolve a host and assemble its boot network document.

    Args:
        config: Loaded static configuration
        directory: Inventory lookups
        host_resolver: Resolver for the host identifier
        logger: Logger for stage progress (defaults to the module logger)
    """

    def __init__(
        self,
        config: BootNetConfig,
        directory: Directory,
        host_resolver: HostResolver,
        *,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.directory = directory
        self.host_resolver = host_resolver
        self.logger = logger or logging.getLogger(__name__)

    @property
    def stages(self) -> list[tuple[str, Callable[[PipelineContext], None]]]:
        return [
            ("resolve-host", self.resolve_host),
            ("enrich-host", self.enrich_host),
            ("resolve-admin", self.resolve_admin),
            ("assemble", self.assemble_document),
        ]

    def resolve_host(self, ctx: PipelineContext) -> None:
        ctx.host = self.host_resolver.resolve(ctx.identifier)

    def enrich_host(self, ctx: PipelineContext) -> None:
        host = require_host(ctx)
        ctx.aggregations = self.directory.list_aggregations(belongs_to=host.uuid)
        ctx.nic_tags = self.directory.list_nic_tags()

    def resolve_admin(self, ctx: PipelineContext) -> None:
        host = require_host(ctx)
        ctx.nics, ctx.admin_nic = resolve_admin_nic(
            self.directory, host.uuid, aggregations=ctx.aggregations
        )

    def assemble_document(self, ctx: PipelineContext) -> None:
        ctx.document = assemble(
            require_host(ctx),
            ctx.nics,
            ctx.admin_nic,
            aggregations=ctx.aggregations,
            nic_tags=ctx.nic_tags,
            config=self.config,
        )

    def run(self, identifier: str | None = None) -> dict[str, Any]:
        """Run every stage and return the assembled document."""
        ctx = PipelineContext(identifier=identifier)
        for name, stage in self.stages:
            self.logger.debug("Stage %s", name)
            stage(ctx)
        if ctx.document is None:
            raise BootNetError("Pipeline finished without assembling a document")
        return ctx.document


def build_pipeline(config: BootNetConfig, *, logger: logging.Logger | None = None) -> Pipeline:
    """Construct service clients and resolvers from configuration."""
    directory = DirectoryClient(
        CnapiClient(config.cnapi_url, timeout=config.request_timeout),
        NapiClient(config.napi_url, timeout=config.request_timeout),
    )
    resolver = HostResolver(directory, partial(local_host_uuid, config.sysinfo_path))
    return Pipeline(config, directory, resolver, logger=logger)
