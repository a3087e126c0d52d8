"""
fsadmin Core.

Configuration, logging, data models, errors and session management.
"""

from fsadmin.core.config import FsAdminConfig
from fsadmin.core.errors import (
    BlockSizeError,
    ClusterSizeError,
    CommandError,
    FsAdminError,
    OutputFormatError,
    ToolNotFoundError,
    ValidationError,
)
from fsadmin.core.logging import get_logger, setup_logging
from fsadmin.core.session import Session

__all__ = [
    "FsAdminConfig",
    "BlockSizeError",
    "ClusterSizeError",
    "CommandError",
    "FsAdminError",
    "OutputFormatError",
    "ToolNotFoundError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "Session",
]
