"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    RESOLUTION_ERROR = 3


class Messages:  # pylint: disable=too-few-public-methods
    """Fixed failure messages surfaced as the step result."""

    LATEST_URL_NOT_FOUND = "unable to determine latest download URL"
    DOWNLOAD_URL_NOT_FOUND = "unable to determine download URL"
    EXTRACTION_FAILED = "unable to download or extract executable"
    EMPTY_PATH = "path cannot be null or empty"
    NO_BINARY = "no oc binary found"
    SUCCESS = "oc successfully installed and configured"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Mirror layout
    OPENSHIFT_V3_BASE_URL = "https://mirror.openshift.com/pub/openshift-v3/clients"
    OPENSHIFT_V4_BASE_URL = "https://mirror.openshift.com/pub/openshift-v4/clients/oc"
    LATEST = "latest"
    LINUX_DIR = "linux"
    MACOSX_DIR = "macosx"
    WINDOWS_DIR = "windows"
    OC_TAR_GZ = "oc.tar.gz"
    OC_ZIP = "oc.zip"

    # Keys of the static lookup table
    OC_UTILS_V3_KEY = "openshiftV3BaseUrl"
    OC_UTILS_V4_KEY = "openshiftV4BaseUrl"
    OC_UTILS_PATCH_PREFIX = "oc"
    OC_UTILS_FILE = None  # replacement table path, None means the packaged one

    # Pipeline environment
    ENV_WORKING_DIR = "SYSTEM_DEFAULTWORKINGDIRECTORY"
    ENV_INPUT_VERSION = "INPUT_VERSION"
    ENV_INPUT_USE_LOCAL_OC = "INPUT_USELOCALOC"
    ENV_LOG_LEVEL = "OC_SETUP_LOG_LEVEL"
    DOWNLOAD_DIR_NAME = ".download"
    DOWNLOAD_DIR = None  # explicit override of <working dir>/.download

    # HTTP
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    DOWNLOAD_CHUNK_SIZE = 64 * 1024
    USER_AGENT = "oc-setup/1.0"

    # Local oc probing
    OC_VERSION_TIMEOUT = 10

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
