"""PATH registration of the installed oc."""

from __future__ import annotations

import logging
import os
from typing import MutableMapping, Optional

from constants import Messages
from resolution.models import OSType

logger = logging.getLogger(__name__)


def add_oc_to_path(
    oc_path: Optional[str],
    os_type,
    environ: Optional[MutableMapping[str, str]] = None,
) -> str:
    """Prepend the directory holding ``oc_path`` to PATH.

    Windows agents use ``\\`` and ``;``, everything else ``/`` and ``:``.
    The change lives only as long as the current process.

    Args:
        oc_path: Full path of the oc executable.
        os_type: OS identifier.
        environ: Mapping to update; defaults to ``os.environ``.

    Returns:
        The new PATH value.

    Raises:
        ValueError: ``oc_path`` is None or empty.
    """
    if not oc_path:
        raise ValueError(Messages.EMPTY_PATH)

    env = os.environ if environ is None else environ
    member = OSType.parse(os_type)
    path_separator = member.path_separator if member else "/"
    list_separator = member.list_separator if member else ":"

    directory = oc_path[: oc_path.rfind(path_separator)] if path_separator in oc_path else ""
    current = env.get("PATH")
    # an empty trailing entry would put the working directory on PATH
    new_path = f"{directory}{list_separator}{current}" if current else directory
    env["PATH"] = new_path
    logger.debug("Added %s to PATH", directory)
    return new_path
