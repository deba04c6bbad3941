"""BootNet constants."""

from __future__ import annotations

ADMIN_TAG = "admin"

DEFAULT_CONFIG_PATH = "/opt/smartdc/booter/config.json"
CONFIG_ENV_VAR = "BOOTNET_CONFIG"
DEFAULT_SYSINFO_PATH = "/usr/bin/sysinfo"

DEFAULT_REQUEST_TIMEOUT_S = 30
SYSINFO_TIMEOUT_S = 60
DEFAULT_MTU = 1500
DEFAULT_LACP_MODE = "off"

CNAPI_SERVICE = "cnapi"
NAPI_SERVICE = "napi"
USER_AGENT = "bootnet"
