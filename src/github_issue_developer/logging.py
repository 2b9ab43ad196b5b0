"""Centralized logging configuration for the GitHub Issue Developer server.

This module should be imported once, as early as possible in the application's
lifecycle, typically in the main entrypoint (__main__.py). It sets up the
root logger with handlers and formatting based on the application's
configuration settings.
"""

import logging
import sys
from pathlib import Path

from github_issue_developer import config
from github_issue_developer.logging_context import CorrelationIdFilter

logger = logging.getLogger(__name__)

LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s:%(lineno)d - [%(correlation_id)s] %(message)s"
)

level = getattr(logging, config.LOG_LEVEL, logging.INFO)

# Log to stderr only: stdout is the protocol channel of the stdio transport.
# If GITHUB_ISSUE_DEVELOPER_ENABLE_FILE_LOG is set, also log to a file.
handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
if config.ENABLE_FILE_LOG:
    Path(config.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)
    handlers.append(logging.FileHandler(config.LOG_FILE_PATH))

# Filters sit on the handlers so records from third-party loggers
# (uvicorn, mcp) also carry the field.
for handler in handlers:
    handler.addFilter(CorrelationIdFilter())

logging.basicConfig(
    level=level,
    format=LOG_FORMAT,
    handlers=handlers,
)

logger.info(
    "Logging configured. Level: %s, File logging enabled: %s",
    config.LOG_LEVEL,
    config.ENABLE_FILE_LOG,
)
