"""Detection of an oc client already installed on the agent."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from typing import List, Optional

from constants import Constants

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"v[0-9]+\.[0-9]+\.[0-9]+")


def _run_oc(oc_path: str, args: List[str]) -> Optional[subprocess.CompletedProcess]:
    try:
        return subprocess.run(
            [oc_path] + args,
            capture_output=True,
            text=True,
            timeout=Constants.OC_VERSION_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("Failed to execute %s %s: %s", oc_path, " ".join(args), exc)
        return None


def get_oc_version(oc_path: str) -> Optional[str]:
    """Return the ``vX.Y.Z`` client version reported by ``oc_path``.

    ``oc version --short=true --client=true`` is tried first; clients older
    than 4.1 reject those flags, in which case plain ``oc version`` is used.
    """
    result = _run_oc(oc_path, ["version", "--short=true", "--client=true"])
    if result is None or result.returncode != 0 or result.stderr:
        if result is not None:
            logger.debug("error %s", result.stderr or f"exit {result.returncode}")
        result = _run_oc(oc_path, ["version"])

    if result is None or not result.stdout:
        logger.debug("stdout empty")
        return None

    logger.debug("stdout %s", result.stdout)
    match = _VERSION_RE.search(result.stdout)
    return match.group(0) if match else None


def get_local_oc_path(version: Optional[str] = None) -> Optional[str]:
    """Return the path of the oc on PATH, or None.

    When ``version`` is given, the local client must report exactly that
    version (case-insensitive) to be reused.
    """
    oc_path = shutil.which("oc")
    if not oc_path:
        logger.debug("oc has not been found on this machine")
        return None
    logger.debug("ocPath %s", oc_path)

    if version:
        local_version = get_oc_version(oc_path)
        logger.debug("localOcVersion %s vs %s", local_version, version)
        if not local_version or local_version.lower() != version.lower():
            return None

    return oc_path
