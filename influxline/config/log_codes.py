"""
Log codes for configuration-related operations.
"""

CONFIG = "config"

# Client Configuration
CLIENT = f"{CONFIG}.client"
CLIENT_RESOLVED = f"{CLIENT}.resolved"
CLIENT_URL_INVALID = f"{CLIENT}.invalid_url"
CLIENT_CREDENTIALS_INCOMPLETE = f"{CLIENT}.credentials_incomplete"
CLIENT_TIMEOUT_INVALID = f"{CLIENT}.invalid_timeout"
