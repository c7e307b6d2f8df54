"""Application-wide constants for npm-mcp.

Constants that define application behavior.
For settings read from the environment, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    "SERVER_NAME",
    "CLI_NAME",
    # Environment variables
    "ENV_URL",
    "ENV_EMAIL",
    "ENV_PASSWORD",
    "ENV_READONLY",
    "ENV_TIMEOUT",
    "ENV_LOG_LEVEL",
    "ENV_LOG_FILE",
    # Defaults
    "DEFAULT_NPM_URL",
    "DEFAULT_SERVER_LOG_LEVEL",
    "DEFAULT_CLI_LOG_LEVEL",
    "READONLY_TRUE_VALUE",
    # Remote API paths
    "API_PREFIX",
    "TOKEN_PATH",
    "HEALTH_PATH",
    "PROXY_HOSTS_PATH",
    "STREAMS_PATH",
    "REDIRECTION_HOSTS_PATH",
    "DEAD_HOSTS_PATH",
    "ACCESS_LISTS_PATH",
    "CERTIFICATES_PATH",
    "USERS_PATH",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "npm-mcp"

# Name advertised to MCP clients
SERVER_NAME = "nginx-proxy-manager"

CLI_NAME = "npm-cli"

# =============================================================================
# Environment variables
# =============================================================================

ENV_URL = "NPM_URL"
ENV_EMAIL = "NPM_EMAIL"
ENV_PASSWORD = "NPM_PASSWORD"
ENV_READONLY = "NPM_READONLY"
ENV_TIMEOUT = "NPM_TIMEOUT"
ENV_LOG_LEVEL = "NPM_LOG_LEVEL"
ENV_LOG_FILE = "NPM_LOG_FILE"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_NPM_URL = "http://localhost:81"

# The MCP server talks to its client over stdout, so everything goes to stderr.
# The CLI keeps stderr quiet unless something is wrong.
DEFAULT_SERVER_LOG_LEVEL = "INFO"
DEFAULT_CLI_LOG_LEVEL = "WARNING"

# Only this exact value enables readonly mode
READONLY_TRUE_VALUE = "true"

# =============================================================================
# Remote API paths (relative to the configured base URL)
# =============================================================================

API_PREFIX = "/api"
TOKEN_PATH = "/tokens"
HEALTH_PATH = "/"
PROXY_HOSTS_PATH = "/nginx/proxy-hosts"
STREAMS_PATH = "/nginx/streams"
REDIRECTION_HOSTS_PATH = "/nginx/redirection-hosts"
DEAD_HOSTS_PATH = "/nginx/dead-hosts"
ACCESS_LISTS_PATH = "/nginx/access-lists"
CERTIFICATES_PATH = "/nginx/certificates"
USERS_PATH = "/users"
