"""Archive type detection and extraction."""

from __future__ import annotations

import logging
import os
import tarfile
import zipfile
from typing import Tuple

from common.errors import CorruptArchiveError, UnknownArchiveFormatError
from resolution.models import ArchiveType

logger = logging.getLogger(__name__)


def extraction_target_name(archive_filename: str) -> Tuple[str, str]:
    """Split an archive file name into (target name, archive extension).

    ``oc.zip`` gives ``("oc", ".zip")`` and ``oc.tar.gz`` gives
    ``("oc", ".tar.gz")``: a ``.tar`` left over after the outer extension is
    stripped too and folded into the extension.
    """
    stem, extension = os.path.splitext(archive_filename)
    inner_stem, inner_extension = os.path.splitext(stem)
    if inner_extension == ".tar":
        return inner_stem, ".tar" + extension
    return stem, extension


def extract(archive_path: str, extension: str, destination: str) -> None:
    """Expand ``archive_path`` into ``destination``.

    Raises:
        UnknownArchiveFormatError: ``extension`` is not zip, tgz or tar.gz.
        CorruptArchiveError: the file could not be read as that format; it is
            removed so the next run downloads it again.
    """
    archive_type = ArchiveType.from_extension(extension)
    if archive_type is None:
        raise UnknownArchiveFormatError(f"unknown archive format {archive_path}")

    logger.debug("expanding %s into %s", archive_path, destination)
    try:
        if archive_type is ArchiveType.ZIP:
            _extract_zip(archive_path, destination)
        elif archive_type is ArchiveType.TAR_GZ:
            _extract_tar_gz(archive_path, destination)
    except (zipfile.BadZipFile, tarfile.TarError, EOFError, OSError) as exc:
        logger.error("unable to expand %s: %s", archive_path, exc)
        _discard(archive_path)
        raise CorruptArchiveError(f"corrupt archive {archive_path}: {exc}") from exc


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def _extract_zip(archive_path: str, destination: str) -> None:
    with zipfile.ZipFile(archive_path) as archive:
        archive.extractall(destination)


def _extract_tar_gz(archive_path: str, destination: str) -> None:
    # Only non-empty regular files; parent directories are created on demand.
    with tarfile.open(archive_path, "r:gz") as archive:
        members = [m for m in archive.getmembers() if m.isfile() and m.size > 0]
        for member in members:
            archive.extract(member, destination, filter="data")
