"""oc install orchestration."""

from .handler import default_download_dir, install_oc, is_web_uri, resolve_download_url
from .local_oc import get_local_oc_path, get_oc_version
from .path_env import add_oc_to_path

__all__ = [
    "add_oc_to_path",
    "default_download_dir",
    "get_local_oc_path",
    "get_oc_version",
    "install_oc",
    "is_web_uri",
    "resolve_download_url",
]
