"""
fsadmin error types.

Every operation raises one of these on failure; nothing is retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsadmin.platform.base import CommandResult


class FsAdminError(Exception):
    """Base class for all fsadmin errors."""


class CommandError(FsAdminError):
    """An external tool exited nonzero or could not be spawned."""

    def __init__(self, context: str, result: CommandResult) -> None:
        self.context = context
        self.command = result.command
        self.returncode = result.returncode
        self.stderr = result.stderr
        super().__init__(f"{context}: {result.stderr}")


class OutputFormatError(FsAdminError):
    """Tool output did not match the expected format."""


class ValidationError(FsAdminError, ValueError):
    """Caller input was rejected before any process was spawned."""


class BlockSizeError(ValidationError):
    """Block size is not positive or not a power of two."""

    def __init__(self, blocksize: int) -> None:
        self.blocksize = blocksize
        super().__init__("block size must be > 0 and a power of 2")


class ClusterSizeError(ValidationError):
    """FAT cluster size maps to an unsupported sectors-per-cluster value."""

    def __init__(
        self,
        fstype: str,
        blocksize: int,
        sector_size: int,
        sectors_per_cluster: int,
    ) -> None:
        self.fstype = fstype
        self.blocksize = blocksize
        self.sector_size = sector_size
        self.sectors_per_cluster = sectors_per_cluster
        super().__init__(
            f"unsupported cluster size for {fstype} filesystem "
            f"(requested cluster size = {blocksize}, sector size = {sector_size}, "
            f"trying sectors per cluster = {sectors_per_cluster})"
        )


class ToolNotFoundError(FsAdminError):
    """A required binary is missing from the appliance."""
