"""
HTTP client for the database write/query API.

``HttpClient`` issues three kinds of requests against a base URL: ``ping``,
``write`` and ``query``. ``ping`` and ``write`` report success as a boolean
(HTTP 204 only) and never raise for HTTP or network problems. ``query``
returns the raw response body for any status, but raises a
``TransportError`` when the server cannot be reached at all.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING

import httpx

from influxline.config import check_credentials, parse_base_url
from influxline.constants import (
    DATABASE_PARAM,
    PING_ENDPOINT,
    QUERY_ENDPOINT,
    QUERY_PARAM,
    REQUEST_TIMEOUT,
    SUCCESS_STATUS_CODE,
    WRITE_CONTENT_TYPE,
    WRITE_ENDPOINT,
)
from influxline.errors import (
    ClientClosedError,
    NetworkConnectionError,
    RequestTimeoutError,
)
from influxline.log_codes import (
    CLIENT_CLOSED,
    CLIENT_CREATED,
    PING_OK,
    PING_TRANSPORT_ERROR,
    PING_UNEXPECTED_STATUS,
    QUERY_RESPONSE,
    QUERY_TRANSPORT_ERROR,
    WRITE_OK,
    WRITE_TRANSPORT_ERROR,
    WRITE_UNEXPECTED_STATUS,
)
from influxline.meta import get_meta_http_headers
from influxline.point import BatchPoints

if TYPE_CHECKING:
    from influxline.config import ClientConfig

logger = logging.getLogger(__name__)


class Client(ABC):
    """
    Operations every database client provides.
    """

    @abstractmethod
    def ping(self) -> bool:
        """Return True if the server is up and answering."""

    @abstractmethod
    def write(self, batch: BatchPoints) -> bool:
        """Write all points of the batch, return True on success."""

    @abstractmethod
    def query(self, q: str, database: str) -> str:
        """Run a query and return the raw response body."""


class HttpClient(Client):
    """
    Synchronous client for the database HTTP API.

    Holds only immutable configuration, so one instance can be shared between
    threads. The underlying ``httpx.Client`` is created on demand unless one
    is injected; an injected client is never closed by ``HttpClient``.
    """

    def __init__(
        self,
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        check_credentials(username, password)

        self._base_url = parse_base_url(url)
        self._username = username
        self._auth: Optional[httpx.BasicAuth] = (
            httpx.BasicAuth(username, password)
            if username is not None and password is not None
            else None
        )
        self._timeout = timeout
        self._headers = get_meta_http_headers()
        self._owns_http_client = http_client is None
        self._http_client = http_client or self._create_http_client()

        logger.debug(
            CLIENT_CREATED,
            extra={
                "url": self.url,
                "authenticated": self._auth is not None,
                "timeout": self._timeout,
            },
        )

    @classmethod
    def from_config(
        cls, config: "ClientConfig", http_client: Optional[httpx.Client] = None
    ) -> "HttpClient":
        return cls(
            url=config.url,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
            http_client=http_client,
        )

    @property
    def url(self) -> str:
        return str(self._base_url)

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def timeout(self) -> float:
        return self._timeout

    def credentials(self, username: str, password: str) -> "HttpClient":
        """
        Return a client for the same server that authenticates every request
        with HTTP Basic credentials.

        The new client takes over this client's connection pool, including
        the duty to close it, so closing this client afterwards leaves the
        pool open.
        """
        derived = HttpClient(
            url=self.url,
            username=username,
            password=password,
            timeout=self._timeout,
            http_client=self._http_client,
        )
        derived._owns_http_client = self._owns_http_client
        self._owns_http_client = False
        return derived

    def _create_http_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self._timeout))

    def _endpoint_url(self, endpoint: str) -> httpx.URL:
        return self._base_url.join(endpoint)

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        if self._http_client.is_closed:
            raise ClientClosedError(url=str(self._endpoint_url(endpoint)))

        request_headers = dict(self._headers)
        if headers:
            request_headers.update(headers)

        return self._http_client.request(
            method,
            self._endpoint_url(endpoint),
            params=params,
            content=content,
            headers=request_headers,
            auth=self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT,
            timeout=self._timeout,
        )

    def ping(self) -> bool:
        """
        Check that the server is reachable.

        Returns:
            bool: True only if the server answered 204 No Content.
        """
        try:
            response = self._request("GET", PING_ENDPOINT)
        except (httpx.HTTPError, ClientClosedError) as e:
            logger.warning(PING_TRANSPORT_ERROR, extra={"error": str(e)})
            return False

        if response.status_code != SUCCESS_STATUS_CODE:
            logger.warning(
                PING_UNEXPECTED_STATUS, extra={"status_code": response.status_code}
            )
            return False

        logger.debug(
            PING_OK,
            extra={"server_version": response.headers.get("X-Influxdb-Version")},
        )
        return True

    def write(self, batch: BatchPoints) -> bool:
        """
        Write a batch of points in a single request.

        Args:
            batch (BatchPoints): The points and their target database.

        Returns:
            bool: True only if the server answered 204 No Content.
        """
        body = batch.serialize()

        try:
            response = self._request(
                "POST",
                WRITE_ENDPOINT,
                params={DATABASE_PARAM: batch.database},
                content=body.encode("utf-8"),
                headers={"Content-Type": WRITE_CONTENT_TYPE},
            )
        except (httpx.HTTPError, ClientClosedError) as e:
            logger.warning(
                WRITE_TRANSPORT_ERROR,
                extra={"database": batch.database, "error": str(e)},
            )
            return False

        if response.status_code != SUCCESS_STATUS_CODE:
            logger.warning(
                WRITE_UNEXPECTED_STATUS,
                extra={
                    "database": batch.database,
                    "status_code": response.status_code,
                    "response": response.text,
                },
            )
            return False

        logger.debug(
            WRITE_OK, extra={"database": batch.database, "points": len(batch)}
        )
        return True

    def query(self, q: str, database: str) -> str:
        """
        Run a query and return the response body as-is.

        The body is returned for every status code; the server reports query
        errors inside the JSON body.

        Args:
            q (str): The query text.
            database (str): The database to query.

        Returns:
            str: The raw response body.

        Raises:
            RequestTimeoutError: If the request timed out.
            NetworkConnectionError: If the server could not be reached.
            ClientClosedError: If the client has already been closed.
        """
        url = self._endpoint_url(QUERY_ENDPOINT)

        try:
            response = self._request(
                "GET",
                QUERY_ENDPOINT,
                params={DATABASE_PARAM: database, QUERY_PARAM: q},
            )
        except httpx.TimeoutException as e:
            logger.error(
                QUERY_TRANSPORT_ERROR, extra={"database": database, "error": str(e)}
            )
            raise RequestTimeoutError(url=str(url)) from e
        except httpx.RequestError as e:
            logger.error(
                QUERY_TRANSPORT_ERROR, extra={"database": database, "error": str(e)}
            )
            raise NetworkConnectionError(url=str(url)) from e

        logger.debug(
            QUERY_RESPONSE,
            extra={"database": database, "status_code": response.status_code},
        )
        return response.text

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()
            logger.debug(CLIENT_CLOSED, extra={"url": self.url})

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpClient(url={self.url!r}, username={self._username!r})"
