"""Resolve oc download URLs from a version string and an OS identifier."""

import logging
import re
from typing import Mapping, Optional

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from .bundles import bundle_for_os
from .oc_utils import get_oc_utils, latest_patch, mirror_base

logger = logging.getLogger(__name__)

_MAJOR_RE = re.compile(r"\d+(?=\.)")
_MAJOR_MINOR_RE = re.compile(r"\d+\.\d+")


class OcVersionResolver:
    """Turns a loose oc version into a mirror URL.

    Only the major component (and, for latest-patch lookups, ``MAJOR.MINOR``)
    is parsed: the mirror is laid out per major line, and the newest patch of
    a minor line comes from the static lookup table.
    """

    def __init__(self, oc_utils: Optional[Mapping[str, str]] = None):
        """Initialize the resolver.

        Args:
            oc_utils: Lookup table to use; defaults to the process-wide one.
        """
        self._oc_utils = oc_utils

    @property
    def oc_utils(self) -> Mapping[str, str]:
        """Lookup table in effect for this resolver."""
        if self._oc_utils is not None:
            return self._oc_utils
        return get_oc_utils()

    def latest_stable(self, os_type) -> Optional[str]:
        """Return the URL of the latest stable bundle, or None for an unsupported OS."""
        logger.debug("determining latest oc version")
        bundle = bundle_for_os(os_type)
        if bundle is None:
            logger.debug("Unable to find bundle url for OS %s", os_type)
            return None
        base = mirror_base(4, self.oc_utils)
        url = f"{base}/{Constants.LATEST}/{bundle.path}"
        logger.debug("latest stable oc version: %s", url)
        return url

    def bundle_url(self, version: Optional[str], os_type, latest: bool = False) -> Optional[str]:
        """Return the archive URL for ``version`` on ``os_type``.

        Args:
            version: oc version such as ``4.1.0`` or ``v3.11.0``.
            os_type: OS identifier (``Linux``, ``Darwin`` or ``Windows_NT``).
            latest: Substitute the newest known patch of the version's minor line.

        Returns:
            The URL, or None when the version or OS cannot be mapped.
        """
        logger.debug("determining tarball URL for version %s", version)
        if not version:
            return None

        # legacy pipelines pass a v-prefixed tag
        if version.startswith("v"):
            version = version[1:]

        major_match = _MAJOR_RE.search(version)
        if not major_match:
            logger.debug("Error retrieving version major from %s", version)
            return None
        major = int(major_match.group(0))

        if latest:
            minor_match = _MAJOR_MINOR_RE.search(version)
            if not minor_match:
                logger.debug("Error retrieving version release - unable to find latest version")
                return None
            base_version = minor_match.group(0)
            patch = latest_patch(base_version, self.oc_utils)
            if not patch:
                logger.debug("Error retrieving latest patch for oc version %s", base_version)
                return None
            version = patch

        base = mirror_base(major, self.oc_utils)
        if base is None:
            logger.debug("Invalid version %s: unsupported major %d", version, major)
            return None

        bundle = bundle_for_os(os_type)
        if bundle is None:
            logger.debug("Unable to find bundle url for OS %s", os_type)
            return None

        url = f"{base}/{version}/{bundle.path}"
        if is_debug_enabled(logger):
            logger.debug(
                "archive URL resolved",
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="bundle_url",
                    outcome="latest_patch" if latest else "exact",
                    target=url,
                ),
            )
        return url
