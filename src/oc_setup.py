"""oc-setup - stage the OpenShift oc client for a pipeline step

    Returns:
        int: Exit code
"""
import logging
import platform
import sys

from constants import ExitCodes, Messages
from common.errors import InstallError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import apply_overrides, load_config, requested_version, use_local_oc
from install.handler import install_oc
from install.path_env import add_oc_to_path
from resolution.models import OSType

logger = logging.getLogger(__name__)


def detect_os_type(args) -> str:
    """OS identifier from ``--os`` or the host platform."""
    if getattr(args, "OS_TYPE", None):
        return args.OS_TYPE
    member = OSType.from_platform(platform.system())
    # unsupported hosts fall through to resolution, which rejects them
    return member.value if member else platform.system()


def run(args) -> str:
    """Install oc, register it on PATH and return the executable path."""
    version = requested_version(args)
    os_type = detect_os_type(args)
    if is_debug_enabled(logger):
        logger.debug(
            "Install requested",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="run",
                version=version or None,
                os_type=os_type,
            ),
        )

    oc_path = install_oc(version, os_type, use_local_oc(args))
    if not oc_path:
        raise InstallError(Messages.NO_BINARY)
    add_oc_to_path(oc_path, os_type)
    return oc_path


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    try:
        apply_overrides(args, load_config(args.CONFIG))
        oc_path = run(args)
    except InstallError as e:
        logger.error("%s", e)
        sys.exit(e.exit_code.value)

    logger.info(Messages.SUCCESS)
    print(oc_path)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
