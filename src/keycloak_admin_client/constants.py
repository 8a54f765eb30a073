"""
Constants used throughout the Keycloak admin client.

This module defines:
- Default connection values
- OAuth2 grant types understood by the token endpoint
- Endpoint path templates
- Token freshness margin for interactive sessions
"""

# Default connection values
DEFAULT_BASE_URL = "http://127.0.0.1:8080/auth"
DEFAULT_REALM = "master"
DEFAULT_CLIENT_ID = "admin-cli"
DEFAULT_TIMEOUT_SECONDS = 60.0

# OAuth2 grant types
GRANT_TYPE_PASSWORD = "password"
GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"
GRANT_TYPE_REFRESH_TOKEN = "refresh_token"

# Scope requested when an offline token is wanted
OFFLINE_ACCESS_SCOPE = "offline_access"

# Endpoint templates
TOKEN_ENDPOINT_TEMPLATE = "{base_url}/realms/{realm}/protocol/openid-connect/token"
ADMIN_REALMS_PATH = "/admin/realms"
ADMIN_REALM_PATH = "/admin/realms/{realm}"
ADMIN_CONSOLE_PATH = "/admin/{realm}/console"
SERVER_INFO_PATH = "/admin/serverinfo"

# Interactive sessions refresh the token when it expires within this many seconds
TOKEN_MIN_VALIDITY_SECONDS = 5

# Content type of token endpoint requests
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Response bodies longer than this are truncated in log records
LOG_BODY_PREVIEW_LIMIT = 1024
