"""Idempotent archive download and executable lookup."""

from __future__ import annotations

import logging
import os
import stat
from typing import Optional
from urllib.parse import urlsplit

from common.errors import DownloadDirectoryError
from common.http_client import stream_download
from common.logging_utils import safe_url
from resolution.models import OSType
from .archive import extract, extraction_target_name

logger = logging.getLogger(__name__)

_EXECUTABLE_MODE = (
    stat.S_IRWXU
    | stat.S_IRGRP | stat.S_IXGRP
    | stat.S_IROTH | stat.S_IXOTH
)  # 0755


def archive_name(url: str) -> str:
    """Last path segment of ``url``."""
    return urlsplit(url).path.rstrip("/").split("/")[-1]


def download(url: str, download_dir: str) -> str:
    """Fetch ``url`` into ``download_dir`` unless the archive is already there.

    The directory must exist; creating it is the caller's job.

    Returns:
        Path of the archive inside ``download_dir``.

    Raises:
        DownloadDirectoryError: ``download_dir`` does not exist.
        DownloadError: The transfer failed.
    """
    download_dir = os.path.normpath(download_dir)
    if not os.path.isdir(download_dir):
        raise DownloadDirectoryError(f"{download_dir} does not exist.")

    archive_path = os.path.join(download_dir, archive_name(url))
    if os.path.exists(archive_path):
        logger.debug("%s already downloaded, skipping", archive_path)
        return archive_path

    logger.info("Downloading %s", safe_url(url))
    return stream_download(url, archive_path)


def locate_executable(download_dir: str, os_type) -> Optional[str]:
    """Return the oc executable directly inside ``download_dir``, or None."""
    member = OSType.parse(os_type)
    name = member.executable_name if member else "oc"
    path = os.path.join(download_dir, name)
    if not os.path.isfile(path):
        logger.debug("%s not found after extraction", path)
        return None
    return path


def download_and_extract(url: Optional[str], download_dir: str, os_type) -> Optional[str]:
    """Download and expand an oc release archive.

    Archives are expanded flat into ``download_dir`` and the executable is
    expected at its top level.

    Returns:
        Full path of the executable (mode 0755), or None if the archive did
        not contain one.

    Raises:
        UnknownArchiveFormatError: the URL does not end in zip, tgz or tar.gz.
        CorruptArchiveError: the downloaded file is not a readable archive.
    """
    if not url:
        return None

    download_dir = os.path.normpath(download_dir)
    archive_path = download(url, download_dir)

    _, extension = extraction_target_name(os.path.basename(archive_path))
    extract(archive_path, extension, download_dir)

    oc_binary = locate_executable(download_dir, os_type)
    if oc_binary is None:
        return None
    os.chmod(oc_binary, _EXECUTABLE_MODE)
    return oc_binary
