# -*- coding: utf-8 -*-

# HTTP API
PING_ENDPOINT = "ping"
WRITE_ENDPOINT = "write"
QUERY_ENDPOINT = "query"

DATABASE_PARAM = "db"
QUERY_PARAM = "q"

# ping and write only succeed on 204 No Content
SUCCESS_STATUS_CODE = 204

WRITE_CONTENT_TYPE = "text/plain; charset=utf-8"

ALLOWED_URL_SCHEMES = ("http", "https")

# Seconds
REQUEST_TIMEOUT = 30.0

# Line protocol
BOOLEAN_TRUE = "t"
BOOLEAN_FALSE = "f"
INTEGER_SUFFIX = "i"
LINE_SEPARATOR = "\n"
