from .client import (
    ClientConfig,
    check_credentials,
    get_client_config,
    parse_base_url,
    parse_timeout,
)

__all__ = [
    "ClientConfig",
    "check_credentials",
    "get_client_config",
    "parse_base_url",
    "parse_timeout",
]
