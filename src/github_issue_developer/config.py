import os

from github_issue_developer import __version__

# --- Helper for parsing boolean env vars ---


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable.

    Accepts common boolean string representations: '1', 'true', 'yes', 'on'
    (case-insensitive).

    Args:
        name: Environment variable name
        default: Default value if variable is not set

    Returns:
        bool: The parsed boolean value
    """
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float = 1.0) -> float:
    """Parse a float environment variable.

    Args:
        name: Environment variable name
        default: Default value if variable is not set or parsing fails

    Returns:
        float: The parsed float value, or default if parsing fails
    """
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        return default


def _env_log_level(name: str, default: str = "INFO") -> str:
    """Parse a log level name, falling back to default for unknown values."""
    val = os.getenv(name, default).strip().upper()
    if val not in LOG_LEVELS:
        return default
    return val


# --- Server Identity ---
SERVER_NAME = os.getenv("MCP_SERVER_NAME", "github-issue-developer")
SERVER_VERSION = __version__

# --- Transport ---
# Empty selects the stdio transport; "host:port" selects HTTP with SSE.
HTTP_ADDR = os.getenv("MCP_HTTP_ADDR", "")

# --- Logging Configuration ---
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
WORKSPACE_ROOT = os.getcwd()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(WORKSPACE_ROOT, "logs"))
LOG_FILE_PATH = os.path.join(LOG_DIR, "mcp_server_app.log")
LOG_LEVEL = _env_log_level("LOG_LEVEL")
ENABLE_FILE_LOG = _env_bool("GITHUB_ISSUE_DEVELOPER_ENABLE_FILE_LOG")

# --- Uvicorn Configuration (HTTP transport only) ---
TIMEOUT_GRACEFUL_SHUTDOWN = int(os.getenv("TIMEOUT_GRACEFUL_SHUTDOWN", "3"))
TIMEOUT_KEEP_ALIVE = int(os.getenv("TIMEOUT_KEEP_ALIVE", "5"))

# --- Telemetry ---
# Lightweight, opt-in counters/timers for prompt requests
TELEMETRY_ENABLED = _env_bool("GITHUB_ISSUE_DEVELOPER_TELEMETRY_ENABLED")
TELEMETRY_SAMPLE_RATE = _env_float("GITHUB_ISSUE_DEVELOPER_TELEMETRY_SAMPLE_RATE", 1.0)
