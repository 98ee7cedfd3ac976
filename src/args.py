"""Argument parsing functionality for oc-setup."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="oc-setup",
        description=(
            "oc-setup - Download and stage the OpenShift oc client for a pipeline step"
        ),
        add_help=True,
    )

    parser.add_argument("-v", "--version",
                        dest="VERSION",
                        help="oc version (e.g. 4.1, v3.11.0) or a download URL. "
                             f"Defaults to ${Constants.ENV_INPUT_VERSION}, then the latest stable release.",
                        action="store",
                        type=str)
    parser.add_argument("--os",
                        dest="OS_TYPE",
                        help="Agent OS identifier. Detected from the host when omitted.",
                        action="store",
                        type=str,
                        choices=["Linux", "Darwin", "Windows_NT"])
    parser.add_argument("--use-local-oc",
                        dest="USE_LOCAL_OC",
                        help="Reuse an oc already on PATH when it matches the requested version.",
                        action="store_true")
    parser.add_argument("-d", "--download-dir",
                        dest="DOWNLOAD_DIR",
                        help=f"Archive directory (default: ${Constants.ENV_WORKING_DIR}/"
                             f"{Constants.DOWNLOAD_DIR_NAME})",
                        action="store",
                        type=str)
    parser.add_argument("--oc-utils",
                        dest="OC_UTILS",
                        help="Replacement mirror / latest-patch table (YAML or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="REQUEST_TIMEOUT",
                        help=f"HTTP timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store",
                        type=int)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
