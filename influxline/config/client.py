from typing import NamedTuple, Optional, Union
import logging

import httpx

from influxline.constants import ALLOWED_URL_SCHEMES, REQUEST_TIMEOUT
from influxline.errors import ConfigurationError
from .log_codes import (
    CLIENT_RESOLVED,
    CLIENT_URL_INVALID,
    CLIENT_CREDENTIALS_INCOMPLETE,
    CLIENT_TIMEOUT_INVALID,
)

logger = logging.getLogger(__name__)


CLIENT_URL_KEY = "url"
CLIENT_USERNAME_KEY = "username"
CLIENT_PASSWORD_KEY = "password"
CLIENT_TIMEOUT_KEY = "timeout"

REDACTED = "****"


class ClientConfig(NamedTuple):
    """
    Connection settings for an HttpClient.

    Args:
        url (str): Base URL of the database HTTP API.
        username (Optional[str]): Basic auth username.
        password (Optional[str]): Basic auth password.
        timeout (float): Request timeout in seconds.
    """

    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: float = REQUEST_TIMEOUT

    @property
    def has_credentials(self) -> bool:
        return self.username is not None and self.password is not None

    def as_dict(self) -> dict[str, Union[str, float, None]]:
        return {
            CLIENT_URL_KEY: self.url,
            CLIENT_USERNAME_KEY: self.username,
            CLIENT_PASSWORD_KEY: REDACTED if self.password is not None else None,
            CLIENT_TIMEOUT_KEY: self.timeout,
        }


def parse_base_url(url: str, source: str = "arguments") -> httpx.URL:
    """
    Parse and validate the base URL of the database HTTP API.

    The returned URL path always ends with a slash, so endpoint names join
    below it instead of replacing its last segment.

    Args:
        url (str): The base URL.
        source (str): The source of the value.

    Returns:
        httpx.URL: The normalized base URL.

    Raises:
        ConfigurationError: If the URL is not an absolute http(s) URL.
    """
    try:
        parsed = httpx.URL(url.strip())
    except httpx.InvalidURL as e:
        logger.error(CLIENT_URL_INVALID, extra={"url": url, "source": source})
        raise ConfigurationError(reason=str(e), source=source) from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.host:
        logger.error(CLIENT_URL_INVALID, extra={"url": url, "source": source})
        raise ConfigurationError(
            reason=f"Not an absolute http(s) URL: {url!r}", source=source
        )

    # An empty path can render without its slash, always set it explicitly
    path = parsed.path if parsed.path.endswith("/") else f"{parsed.path}/"
    return parsed.copy_with(path=path)


def check_credentials(
    username: Optional[str], password: Optional[str], source: str = "arguments"
) -> None:
    """
    Require username and password to be given together.

    Raises:
        ConfigurationError: If only one of them is set.
    """
    if (username is None) != (password is None):
        logger.error(CLIENT_CREDENTIALS_INCOMPLETE, extra={"source": source})
        raise ConfigurationError(
            reason="Username and password must be provided together.", source=source
        )


def parse_timeout(
    timeout: Union[str, float, None], source: str = "arguments"
) -> Optional[float]:
    """
    Parse a request timeout in seconds.

    Returns:
        Optional[float]: The timeout, or None if not provided.

    Raises:
        ConfigurationError: If the timeout is not a positive number.
    """
    if timeout is None or timeout == "":
        return None

    try:
        value = float(timeout)
    except (TypeError, ValueError):
        value = None

    if value is None or value <= 0:
        logger.error(
            CLIENT_TIMEOUT_INVALID, extra={"timeout": timeout, "source": source}
        )
        raise ConfigurationError(
            reason=f"Timeout must be a positive number of seconds, got {timeout!r}",
            source=source,
        )

    return value


def get_client_config(
    url: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
    timeout: Union[str, float, None] = None,
) -> ClientConfig:
    """
    Validate explicit connection settings and bundle them for reuse.

    Nothing is read from the environment or from files.

    Args:
        url (str): The base URL of the database HTTP API.
        username (Optional[str]): The basic auth username.
        password (Optional[str]): The basic auth password.
        timeout (Union[str, float, None]): The request timeout in seconds.

    Returns:
        ClientConfig: The validated configuration, with a normalized URL.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    base_url = parse_base_url(url)
    check_credentials(username, password)
    timeout_val = parse_timeout(timeout)

    config = ClientConfig(
        url=str(base_url),
        username=username,
        password=password,
        timeout=timeout_val if timeout_val is not None else REQUEST_TIMEOUT,
    )

    logger.debug(CLIENT_RESOLVED, extra=config.as_dict())
    return config
