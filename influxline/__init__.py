# -*- coding: utf-8 -*-

__author__ = """influxline developers"""

from influxline.client import Client, HttpClient
from influxline.config import ClientConfig, get_client_config
from influxline.errors import (
    ClientClosedError,
    ConfigurationError,
    InfluxLineError,
    NetworkConnectionError,
    RequestTimeoutError,
    TransportError,
)
from influxline.meta import get_version
from influxline.point import BatchPoints, Field, FieldType, Point

VERSION = get_version()

__all__ = [
    "BatchPoints",
    "Client",
    "ClientClosedError",
    "ClientConfig",
    "ConfigurationError",
    "Field",
    "FieldType",
    "HttpClient",
    "InfluxLineError",
    "NetworkConnectionError",
    "Point",
    "RequestTimeoutError",
    "TransportError",
    "VERSION",
    "get_client_config",
]
