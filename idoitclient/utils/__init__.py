"""Utility functions for idoitclient."""

from idoitclient.utils.helpers import ensure_dir, get_data_path
from idoitclient.utils.exceptions import (
    IdoitClientError,
    InvalidArgument,
    ProtocolError,
    TransportError,
    ErrorCategory,
    sanitize_error_message,
)

__all__ = [
    "ensure_dir",
    "get_data_path",
    "IdoitClientError",
    "InvalidArgument",
    "ProtocolError",
    "TransportError",
    "ErrorCategory",
    "sanitize_error_message",
]
