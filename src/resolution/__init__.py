"""oc version and bundle resolution."""

from typing import Optional

from .bundles import OC_BUNDLES, bundle_for_os
from .models import ArchiveType, BundleDescriptor, OSType
from .oc_utils import get_oc_utils, load_oc_utils, reset_oc_utils
from .resolver import OcVersionResolver


def resolve_latest_stable(os_type) -> Optional[str]:
    """Module-level shortcut for ``OcVersionResolver().latest_stable``."""
    return OcVersionResolver().latest_stable(os_type)


def resolve_version_url(version, os_type, want_latest_patch: bool = False) -> Optional[str]:
    """Module-level shortcut for ``OcVersionResolver().bundle_url``."""
    return OcVersionResolver().bundle_url(version, os_type, want_latest_patch)


def resolve_bundle_descriptor(os_type) -> Optional[BundleDescriptor]:
    """Pure OS to bundle lookup."""
    return bundle_for_os(os_type)


__all__ = [
    "ArchiveType",
    "BundleDescriptor",
    "OC_BUNDLES",
    "OSType",
    "OcVersionResolver",
    "bundle_for_os",
    "get_oc_utils",
    "load_oc_utils",
    "reset_oc_utils",
    "resolve_bundle_descriptor",
    "resolve_latest_stable",
    "resolve_version_url",
]
