"""Archive download and extraction."""

from .archive import extract, extraction_target_name
from .download import archive_name, download, download_and_extract, locate_executable

__all__ = [
    "archive_name",
    "download",
    "download_and_extract",
    "extract",
    "extraction_target_name",
    "locate_executable",
]
