"""Install policy: turn a version input into a usable oc executable.

Order of operations:

1. optionally reuse an oc already on PATH;
2. empty input -> latest stable bundle;
3. absolute URL -> used verbatim;
4. anything else is a version: resolve it, probe the URL with HEAD and, if
   unreachable, resolve once more with the latest patch of its minor line;
5. download and expand the archive, returning the executable path.
"""

from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import urlsplit

from constants import Constants, Messages
from common.errors import ExtractionError, ResolutionError
from common.http_client import probe_url
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from fetch.download import download_and_extract
from resolution.resolver import OcVersionResolver
from .local_oc import get_local_oc_path

logger = logging.getLogger(__name__)


def is_web_uri(value: Optional[str]) -> bool:
    """True for an absolute http(s) URL with a host."""
    if not value:
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def default_download_dir() -> str:
    """``<working dir>/.download`` unless overridden in ``Constants``."""
    if Constants.DOWNLOAD_DIR:
        return Constants.DOWNLOAD_DIR
    root = os.environ.get(Constants.ENV_WORKING_DIR)
    if not root:
        logger.warning(
            "%s is not set, using the current directory", Constants.ENV_WORKING_DIR
        )
        root = os.getcwd()
    return os.path.join(root, Constants.DOWNLOAD_DIR_NAME)


def resolve_download_url(
    download_version: Optional[str],
    os_type,
    resolver: Optional[OcVersionResolver] = None,
) -> str:
    """Return the archive URL for a version input.

    Raises:
        ResolutionError: no URL could be determined.
    """
    resolver = resolver or OcVersionResolver()

    if not download_version:
        url = resolver.latest_stable(os_type)
        if url is None:
            raise ResolutionError(Messages.LATEST_URL_NOT_FOUND)
        return url

    if is_web_uri(download_version):
        return download_version

    url = resolver.bundle_url(download_version, os_type, False)
    if url is None or not probe_url(url):
        # the exact release is not published; take the newest patch of its line
        logger.info(
            "oc %s is not available at %s, falling back to latest patch",
            download_version,
            safe_url(url) or "<unresolved>",
        )
        url = resolver.bundle_url(download_version, os_type, True)

    if url is None:
        raise ResolutionError(Messages.DOWNLOAD_URL_NOT_FOUND)
    return url


def install_oc(
    download_version: Optional[str],
    os_type,
    use_local_oc: bool = False,
    *,
    download_dir: Optional[str] = None,
    resolver: Optional[OcVersionResolver] = None,
) -> str:
    """Install the requested oc and return the full path to the executable.

    Args:
        download_version: Version, URL, or empty for the latest stable release.
        os_type: OS identifier (``Linux``, ``Darwin`` or ``Windows_NT``).
        use_local_oc: Reuse an oc already on PATH when its version matches.
        download_dir: Where archives are stored; defaults to
            ``<SYSTEM_DEFAULTWORKINGDIRECTORY>/.download``.
        resolver: Resolver to use; a default one is built otherwise.

    Raises:
        ResolutionError: no download URL could be determined.
        ExtractionError: the archive did not contain an executable.
        DownloadError: the transfer failed.
    """
    if use_local_oc:
        local_oc = get_local_oc_path(download_version)
        if local_oc:
            logger.info("Using oc found on PATH: %s", local_oc)
            return local_oc

    url = resolve_download_url(download_version, os_type, resolver)

    download_dir = download_dir or default_download_dir()
    logger.debug("creating download directory %s", download_dir)
    os.makedirs(download_dir, exist_ok=True)

    if is_debug_enabled(logger):
        logger.debug(
            "downloading",
            extra=extra_context(
                event="decision",
                component="install",
                action="install_oc",
                target=safe_url(url),
                path=download_dir,
            ),
        )
    oc_binary = download_and_extract(url, download_dir, os_type)
    if oc_binary is None:
        raise ExtractionError(Messages.EXTRACTION_FAILED)

    logger.info("oc installed at %s", oc_binary)
    return oc_binary
