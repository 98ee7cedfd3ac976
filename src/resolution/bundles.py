"""OS to bundle lookup table."""

from types import MappingProxyType
from typing import Mapping, Optional

from constants import Constants
from .models import BundleDescriptor, OSType

OC_BUNDLES: Mapping[OSType, BundleDescriptor] = MappingProxyType({
    OSType.LINUX: BundleDescriptor(Constants.LINUX_DIR, Constants.OC_TAR_GZ),
    OSType.DARWIN: BundleDescriptor(Constants.MACOSX_DIR, Constants.OC_TAR_GZ),
    OSType.WINDOWS: BundleDescriptor(Constants.WINDOWS_DIR, Constants.OC_ZIP),
})


def bundle_for_os(os_type) -> Optional[BundleDescriptor]:
    """Return the bundle for an OS identifier; None when unsupported."""
    member = OSType.parse(os_type)
    if member is None:
        return None
    return OC_BUNDLES[member]
