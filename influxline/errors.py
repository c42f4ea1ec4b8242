from typing import Optional


class InfluxLineError(Exception):
    """
    Base exception for influxline errors.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An unexpected error occurred while talking to the database."):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(InfluxLineError, ValueError):
    """
    Error raised when the client configuration is invalid.

    Args:
        reason (Optional[str]): The reason for the error.
        source (str): Where the invalid values came from.
        message (str): The error message template.
    """
    def __init__(self, reason: Optional[str] = None, source: str = "arguments",
                 message: str = "Invalid client configuration in {source}."):
        self.source = source
        self.message = message.format(source=source)
        if reason:
            self.message += f"\nDetails: {reason}"
        super().__init__(self.message)


class TransportError(InfluxLineError):
    """
    Error raised when the database server could not be reached.

    Args:
        url (Optional[str]): The URL of the failed request.
        message (str): The error message.
    """
    def __init__(self, url: Optional[str] = None,
                 message: str = "Unable to complete the request to the database server."):
        self.url = url
        self.message = message
        if url:
            self.message += f"\nURL: {url}"
        super().__init__(self.message)


class NetworkConnectionError(TransportError):
    """
    Error raised when there is a network connection issue.

    Args:
        url (Optional[str]): The URL of the failed request.
        message (str): The error message.
    """
    def __init__(self, url: Optional[str] = None,
                 message: str = "Network connection error: Unable to reach the database server.\n"
                                "Please check the server URL and your network connection."):
        super().__init__(url=url, message=message)


class RequestTimeoutError(TransportError):
    """
    Error raised when a request times out.

    Args:
        url (Optional[str]): The URL of the failed request.
        message (str): The error message.
    """
    def __init__(self, url: Optional[str] = None,
                 message: str = "Request timed out: The database server did not respond in time."):
        super().__init__(url=url, message=message)


class ClientClosedError(TransportError):
    """
    Error raised when a request is made through a closed client.

    Args:
        url (Optional[str]): The URL of the refused request.
        message (str): The error message.
    """
    def __init__(self, url: Optional[str] = None,
                 message: str = "The client has been closed and cannot send requests."):
        super().__init__(url=url, message=message)
