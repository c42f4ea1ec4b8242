"""
Log codes for point encoding and HTTP client operations.
"""

POINT = "point"
POINT_NO_FIELDS = f"{POINT}.no_fields"

BATCH = "batch"
BATCH_EMPTY = f"{BATCH}.empty"

CLIENT = "client"
CLIENT_CREATED = f"{CLIENT}.created"
CLIENT_CLOSED = f"{CLIENT}.closed"

PING = f"{CLIENT}.ping"
PING_OK = f"{PING}.ok"
PING_UNEXPECTED_STATUS = f"{PING}.unexpected_status"
PING_TRANSPORT_ERROR = f"{PING}.transport_error"

WRITE = f"{CLIENT}.write"
WRITE_OK = f"{WRITE}.ok"
WRITE_UNEXPECTED_STATUS = f"{WRITE}.unexpected_status"
WRITE_TRANSPORT_ERROR = f"{WRITE}.transport_error"

QUERY = f"{CLIENT}.query"
QUERY_RESPONSE = f"{QUERY}.response"
QUERY_TRANSPORT_ERROR = f"{QUERY}.transport_error"
