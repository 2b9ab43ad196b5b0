"""Per-request correlation IDs for log lines.

The HTTP middleware sets the ID for the lifetime of a request; the
CorrelationIdFilter copies it onto every record so the log format can
reference ``%(correlation_id)s``. Outside a request (stdio transport,
startup) the field renders as ``-``.
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def set_correlation_id(value: Optional[str]) -> None:
    """Set the correlation ID for the current request context.

    Args:
        value: The correlation ID string, or None to clear it
    """
    _correlation_id.set(value)


def get_correlation_id() -> Optional[str]:
    """Get the correlation ID from the current request context.

    Returns:
        Optional[str]: The correlation ID if set, None otherwise
    """
    return _correlation_id.get()


def resolve_correlation_id(incoming: Optional[str]) -> str:
    """Return the caller-supplied ID, or a fresh UUID4 when none was sent."""
    if incoming and incoming.strip():
        return incoming.strip()
    return str(uuid.uuid4())


class CorrelationIdFilter(logging.Filter):
    """Attach the current correlation ID to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True
