"""Shared fixtures: isolated Constants, lookup table and archives."""

import io
import tarfile
import zipfile
from types import MappingProxyType

import pytest

from constants import Constants
from resolution import oc_utils as _oc_utils

V3_BASE = "https://mirror.example.com/pub/openshift-v3/clients"
V4_BASE = "https://mirror.example.com/pub/openshift-v4/clients/oc"


@pytest.fixture(autouse=True)
def isolated_constants(monkeypatch):
    """Undo any Constants override and drop the cached lookup table."""
    for name in ("REQUEST_TIMEOUT", "DOWNLOAD_DIR", "OC_UTILS_FILE"):
        monkeypatch.setattr(Constants, name, getattr(Constants, name))
    _oc_utils.reset_oc_utils()
    yield
    _oc_utils.reset_oc_utils()


@pytest.fixture
def oc_utils_table():
    """Small lookup table with test mirrors."""
    return MappingProxyType({
        "openshiftV3BaseUrl": V3_BASE,
        "openshiftV4BaseUrl": V4_BASE,
        "oc3.11": "3.11.154",
        "oc4.1": "4.1.18",
    })


def make_zip(path, members):
    """Write a zip archive with ``{name: bytes}`` members."""
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in members.items():
            archive.writestr(name, data)
    return str(path)


def make_tar_gz(path, members):
    """Write a tar.gz archive; a None payload adds a directory entry."""
    with tarfile.open(path, "w:gz") as archive:
        for name, data in members.items():
            info = tarfile.TarInfo(name)
            if data is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                archive.addfile(info)
                continue
            info.size = len(data)
            info.mode = 0o644
            archive.addfile(info, io.BytesIO(data))
    return str(path)
