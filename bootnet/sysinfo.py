"""Local host identity via sysinfo."""

from __future__ import annotations

import json
import logging
import subprocess

from .constants import DEFAULT_SYSINFO_PATH, SYSINFO_TIMEOUT_S
from .exceptions import LocalIdentityUnavailableError

logger = logging.getLogger(__name__)


def local_host_uuid(
    sysinfo_path: str = DEFAULT_SYSINFO_PATH,
    *,
    timeout_s: int = SYSINFO_TIMEOUT_S,
) -> str:
    """Return the UUID of the host we are running on.

    Executes sysinfo and reads the "UUID" field of its JSON output.

    Raises:
        LocalIdentityUnavailableError: If sysinfo fails or yields no UUID
    """
    logger.debug("Running %s for local host UUID", sysinfo_path)
    try:
        p = subprocess.run(
            [sysinfo_path],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout_s,
            check=False,
        )
    except FileNotFoundError as e:
        raise LocalIdentityUnavailableError(f"{sysinfo_path} not found") from e
    except subprocess.TimeoutExpired as e:
        raise LocalIdentityUnavailableError(
            f"{sysinfo_path} timed out after {timeout_s}s"
        ) from e
    except OSError as e:
        raise LocalIdentityUnavailableError(f"Failed to run {sysinfo_path}: {e}") from e

    if p.returncode != 0:
        stderr = p.stderr.decode("utf-8", "replace").strip()
        raise LocalIdentityUnavailableError(
            f"{sysinfo_path} exited {p.returncode}: {stderr or 'no output'}"
        )

    try:
        info = json.loads(p.stdout.decode("utf-8", "replace"))
    except json.JSONDecodeError as e:
        raise LocalIdentityUnavailableError(f"{sysinfo_path} returned invalid JSON: {e}") from e

    uuid = info.get("UUID") if isinstance(info, dict) else None
    uuid = uuid.strip() if isinstance(uuid, str) else ""
    if not uuid:
        raise LocalIdentityUnavailableError(f"{sysinfo_path} returned an empty UUID")

    return uuid
