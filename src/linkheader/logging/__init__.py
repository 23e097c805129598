"""structlog configuration for linkheader and its command line."""

from ._models import LogLevel, Profile
from ._structlog import add_log_severity, configure_logging

__all__ = [
    "LogLevel",
    "Profile",
    "add_log_severity",
    "configure_logging",
]
