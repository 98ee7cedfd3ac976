"""Configuration file loading and CLI/environment overrides.

Precedence, highest first: CLI flags, config file, ``Constants`` defaults.
Task inputs (version, use-local-oc) additionally fall back to the pipeline's
``INPUT_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from common.errors import ConfigError
from resolution.oc_utils import reset_oc_utils

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration file.

    A missing file is ignored with a warning; an unreadable or malformed
    one raises ``ConfigError``.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def apply_overrides(args, config: Optional[Dict[str, Any]] = None) -> None:
    """Apply config file values, then CLI values, onto ``Constants``."""
    config = config or {}

    timeout = getattr(args, "REQUEST_TIMEOUT", None)
    if timeout is None:
        timeout = config.get("request_timeout")
    if timeout is not None:
        try:
            Constants.REQUEST_TIMEOUT = int(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid request_timeout: {timeout!r}") from e

    download_dir = getattr(args, "DOWNLOAD_DIR", None) or config.get("download_dir")
    if download_dir:
        Constants.DOWNLOAD_DIR = os.path.expanduser(str(download_dir))

    oc_utils = getattr(args, "OC_UTILS", None) or config.get("oc_utils")
    if oc_utils:
        Constants.OC_UTILS_FILE = os.path.expanduser(str(oc_utils))
        reset_oc_utils()


def requested_version(args) -> str:
    """Version input from the CLI, else from ``INPUT_VERSION``."""
    version = getattr(args, "VERSION", None)
    if version is None:
        version = os.environ.get(Constants.ENV_INPUT_VERSION, "")
    return version.strip()


def use_local_oc(args) -> bool:
    """``--use-local-oc`` flag, else the ``INPUT_USELOCALOC`` task input."""
    if getattr(args, "USE_LOCAL_OC", False):
        return True
    value = os.environ.get(Constants.ENV_INPUT_USE_LOCAL_OC, "")
    return value.strip().lower() in _TRUE_VALUES
