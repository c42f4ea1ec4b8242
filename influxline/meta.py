from importlib.metadata import PackageNotFoundError, version
import logging
import platform
from typing import Dict, Optional


LOG = logging.getLogger(__name__)

DISTRIBUTION_NAME = "influxline"


def get_version() -> Optional[str]:
    """
    Get the version of the influxline package.

    Returns:
      Optional[str]: The influxline version if found, otherwise None.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        LOG.debug("Unable to get influxline version.")
        return None


def get_user_agent() -> str:
    """
    Get the user agent string for HTTP requests.

    Returns:
      str: The user agent string in the format: influxline/{version} ({os} {arch}; Python/{python_version})
    """
    return _format_user_agent(get_version())


def _format_user_agent(client_version: Optional[str]) -> str:
    os_name = platform.system()

    machine = platform.machine()
    # Normalize architecture names
    if machine in ("x86_64", "AMD64"):
        arch = "x86_64"
    elif machine in ("arm64", "aarch64"):
        arch = "arm_64"
    elif machine == "i386":
        arch = "x86"
    else:
        arch = machine or "unknown"

    python_version = platform.python_version()

    return f"{DISTRIBUTION_NAME}/{client_version or 'unknown'} ({os_name} {arch}; Python/{python_version})"


def get_meta_http_headers() -> Dict[str, str]:
    """
    Get the metadata headers sent with every request.

    Returns:
      Dict[str, str]: The metadata headers.
    """
    client_version = get_version()

    return {
        "Influxline-Client-Version": client_version or "",
        "User-Agent": _format_user_agent(client_version),
    }
