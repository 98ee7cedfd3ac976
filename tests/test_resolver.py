"""Tests for oc bundle and version URL resolution."""

import pytest

from constants import Constants
from resolution import (
    OC_BUNDLES,
    BundleDescriptor,
    OSType,
    OcVersionResolver,
    resolve_bundle_descriptor,
    resolve_latest_stable,
    resolve_version_url,
)
from conftest import V3_BASE, V4_BASE

SUPPORTED_OS = ["Linux", "Darwin", "Windows_NT"]


@pytest.fixture
def resolver(oc_utils_table):
    """Resolver bound to the test lookup table."""
    return OcVersionResolver(oc_utils_table)


class TestBundleDescriptor:
    """OS to bundle lookup."""

    @pytest.mark.parametrize("os_type", SUPPORTED_OS)
    def test_supported_os_has_stable_bundle(self, os_type):
        """Test every supported OS maps to the same bundle on each call."""
        first = resolve_bundle_descriptor(os_type)
        assert isinstance(first, BundleDescriptor)
        assert first == resolve_bundle_descriptor(os_type)

    @pytest.mark.parametrize("os_type", ["", "linux", "Windows", "FreeBSD", None, "fakeOS"])
    def test_unsupported_os_returns_none(self, os_type):
        """Test unknown OS identifiers yield None instead of raising."""
        assert resolve_bundle_descriptor(os_type) is None

    def test_bundle_paths(self):
        """Test the platform directory and archive name per OS."""
        assert resolve_bundle_descriptor("Linux").path == "linux/oc.tar.gz"
        assert resolve_bundle_descriptor("Darwin").path == "macosx/oc.tar.gz"
        assert resolve_bundle_descriptor("Windows_NT").path == "windows/oc.zip"

    def test_one_bundle_per_os(self):
        """Test the table has exactly one entry per OS member."""
        assert set(OC_BUNDLES) == set(OSType)


class TestLatestStable:
    """Latest stable URL."""

    def test_linux(self, resolver):
        """Test latest stable URL is built from the v4 mirror."""
        assert resolver.latest_stable("Linux") == f"{V4_BASE}/latest/linux/oc.tar.gz"

    def test_unsupported_os(self, resolver):
        """Test latest stable is None for an unsupported OS."""
        assert resolver.latest_stable("fakeOS") is None

    def test_module_shortcut_uses_packaged_table(self):
        """Test the packaged table points at the public v4 mirror."""
        assert resolve_latest_stable("Linux") == (
            f"{Constants.OPENSHIFT_V4_BASE_URL}/latest/linux/oc.tar.gz"
        )


class TestBundleUrl:
    """Version URL resolution."""

    @pytest.mark.parametrize("os_type", SUPPORTED_OS)
    def test_empty_version_is_never_resolvable(self, resolver, os_type):
        """Test empty and None versions resolve to None."""
        assert resolver.bundle_url("", os_type) is None
        assert resolver.bundle_url(None, os_type) is None

    def test_leading_v_is_ignored(self, resolver):
        """Test a v-prefixed version resolves like the bare one."""
        assert resolver.bundle_url("v4.1.0", "Windows_NT") == resolver.bundle_url("4.1.0", "Windows_NT")

    def test_v4_windows(self, resolver):
        """Test a 4.x version on Windows uses the zip bundle."""
        assert resolver.bundle_url("4.1", "Windows_NT") == f"{V4_BASE}/4.1/windows/oc.zip"

    def test_v3_mac(self, resolver):
        """Test a 3.x version uses the v3 mirror."""
        assert resolver.bundle_url("v3.11.0", "Darwin") == f"{V3_BASE}/3.11.0/macosx/oc.tar.gz"

    @pytest.mark.parametrize("os_type", SUPPORTED_OS)
    def test_unsupported_major(self, resolver, os_type):
        """Test majors other than 3 and 4 have no mirror."""
        assert resolver.bundle_url("5.0.0", os_type) is None
        assert resolver.bundle_url("2.9.1", os_type) is None

    def test_no_major_component(self, resolver):
        """Test a bare number has no digit run followed by a dot."""
        assert resolver.bundle_url("4", "Linux") is None
        assert resolver.bundle_url("latest", "Linux") is None

    def test_unsupported_os(self, resolver):
        """Test a valid version on an unsupported OS resolves to None."""
        assert resolver.bundle_url("4.1.0", "Plan9") is None

    def test_latest_patch_substitution(self, resolver):
        """Test the newest patch of the minor line replaces the version."""
        assert resolver.bundle_url("3.11.0", "Linux", latest=True) == (
            f"{V3_BASE}/3.11.154/linux/oc.tar.gz"
        )

    def test_latest_patch_for_minor_only_input(self, resolver):
        """Test MAJOR.MINOR input without a patch can use the latest patch."""
        url = resolver.bundle_url("4.1", "Windows_NT", latest=True)
        assert url == f"{V4_BASE}/4.1.18/windows/oc.zip"

    def test_latest_patch_unknown_line(self, resolver):
        """Test a minor line missing from the table resolves to None."""
        assert resolver.bundle_url("4.9.0", "Linux", latest=True) is None

    def test_module_shortcut(self):
        """Test the module-level shortcut uses the packaged table."""
        url = resolve_version_url("v4.2.0", "Linux")
        assert url == f"{Constants.OPENSHIFT_V4_BASE_URL}/4.2.0/linux/oc.tar.gz"
