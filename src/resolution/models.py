"""Data models for oc version resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OSType(Enum):
    """Supported agent operating systems, valued by their OS identifier."""
    LINUX = "Linux"
    DARWIN = "Darwin"
    WINDOWS = "Windows_NT"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["OSType"]:
        """Return the member for an OS identifier, or None when unsupported."""
        if isinstance(value, OSType):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def from_platform(cls, system: str) -> Optional["OSType"]:
        """Map ``platform.system()`` output onto an OS identifier."""
        if system == "Windows":
            return cls.WINDOWS
        return cls.parse(system)

    @property
    def executable_name(self) -> str:
        return "oc.exe" if self is OSType.WINDOWS else "oc"

    @property
    def path_separator(self) -> str:
        return "\\" if self is OSType.WINDOWS else "/"

    @property
    def list_separator(self) -> str:
        return ";" if self is OSType.WINDOWS else ":"


class ArchiveType(Enum):
    """Archive formats the fetcher can expand."""
    ZIP = ".zip"
    TAR_GZ = ".tar.gz"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["ArchiveType"]:
        """Return the archive type for a file extension, or None."""
        if extension == ".zip":
            return cls.ZIP
        if extension in (".tar.gz", ".tgz"):
            return cls.TAR_GZ
        return None


@dataclass(frozen=True)
class BundleDescriptor:
    """Platform directory and archive name of an oc bundle."""
    platform_dir: str
    archive_name: str

    @property
    def path(self) -> str:
        return f"{self.platform_dir}/{self.archive_name}"

    def __str__(self) -> str:
        return self.path
