"""Loader for the static mirror / latest-patch lookup table.

The table is a flat mapping::

    {
      "openshiftV3BaseUrl": "<v3 mirror root>",
      "openshiftV4BaseUrl": "<v4 mirror root>",
      "oc3.11": "3.11.154",
      ...
    }

It is read once per process and handed out as a read-only mapping. Pointing
``Constants.OC_UTILS_FILE`` at another file (``--oc-utils``) and calling
``reset_oc_utils()`` swaps the table without touching the resolver.
"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

from constants import Constants
from common.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_OC_UTILS_FILE = os.path.join(os.path.dirname(__file__), "data", "oc-utils.json")

_cached: Optional[Mapping[str, str]] = None


def load_oc_utils(path: Optional[str] = None) -> Mapping[str, str]:
    """Parse a lookup table file (YAML or JSON) into a read-only mapping."""
    path = path or DEFAULT_OC_UTILS_FILE
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"unable to read oc utils table {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"unable to parse oc utils table {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"oc utils table {path} must be a mapping")

    # Unquoted YAML versions load as floats (3.10 -> 3.1); tables must quote them.
    table = {str(key): str(value) for key, value in data.items() if value is not None}
    logger.debug("Loaded %d oc utils entries from %s", len(table), path)
    return MappingProxyType(table)


def get_oc_utils() -> Mapping[str, str]:
    """Return the process-wide table, loading it on first use."""
    global _cached  # pylint: disable=global-statement
    if _cached is None:
        _cached = load_oc_utils(Constants.OC_UTILS_FILE)
    return _cached


def reset_oc_utils() -> None:
    """Forget the cached table so the next lookup reloads it."""
    global _cached  # pylint: disable=global-statement
    _cached = None


def mirror_base(major: int, oc_utils: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the mirror root for a major version line; None when unsupported."""
    table = oc_utils if oc_utils is not None else get_oc_utils()
    if major == 3:
        return table.get(Constants.OC_UTILS_V3_KEY, Constants.OPENSHIFT_V3_BASE_URL)
    if major == 4:
        return table.get(Constants.OC_UTILS_V4_KEY, Constants.OPENSHIFT_V4_BASE_URL)
    return None


def latest_patch(base_version: str, oc_utils: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the newest known release of a ``MAJOR.MINOR`` line."""
    table = oc_utils if oc_utils is not None else get_oc_utils()
    return table.get(f"{Constants.OC_UTILS_PATCH_PREFIX}{base_version}")
