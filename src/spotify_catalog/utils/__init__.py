"""Shared utility helpers for the Spotify catalog client."""

from .logging import LoggingOptions, configure_logging, get_logger, log_file_path
from .errors import ErrorDescriptor, ErrorSeverity, describe_exception
from .sanitize import mask_secret, redact_headers

__all__ = [
    "ErrorDescriptor",
    "ErrorSeverity",
    "LoggingOptions",
    "configure_logging",
    "describe_exception",
    "get_logger",
    "log_file_path",
    "mask_secret",
    "redact_headers",
]
