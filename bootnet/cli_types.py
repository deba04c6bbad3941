"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BootConfigArgs:
    """Arguments for the bootnet command."""

    host: str | None
    config: str | None
    verbose: bool
