"""Exception types raised by the install pipeline."""

from __future__ import annotations

from constants import ExitCodes


class InstallError(Exception):
    """Base class for fatal install failures."""

    exit_code = ExitCodes.FILE_ERROR


class ResolutionError(InstallError):
    """No download URL could be determined."""

    exit_code = ExitCodes.RESOLUTION_ERROR


class DownloadDirectoryError(InstallError):
    """The download directory does not exist."""


class UnknownArchiveFormatError(InstallError):
    """The archive extension is neither zip nor tar+gzip."""


class DownloadError(InstallError):
    """The archive transfer failed."""

    exit_code = ExitCodes.CONNECTION_ERROR


class ExtractionError(InstallError):
    """The archive was fetched but did not yield an executable."""


class ConfigError(InstallError):
    """A configuration file or lookup table could not be loaded."""


class CorruptArchiveError(InstallError):
    """The downloaded file is not a readable archive of its declared type."""
