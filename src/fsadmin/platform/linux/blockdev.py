"""Block device queries used by the filesystem wrappers."""

from __future__ import annotations

from fsadmin.core.errors import CommandError
from fsadmin.platform.base import CommandRunner
from fsadmin.platform.linux.parsers import parse_sector_size


class BlockDevice:
    """Thin wrapper over ``blockdev`` for device geometry."""

    BLOCKDEV = "blockdev"

    def __init__(self, runner: CommandRunner, blockdev: str | None = None) -> None:
        self.runner = runner
        if blockdev is not None:
            self.BLOCKDEV = blockdev

    def get_sector_size(self, device: str) -> int:
        """Logical sector size of device in bytes."""
        result = self.runner.run_command([self.BLOCKDEV, "--getss", device])
        if not result.success:
            raise CommandError("blockdev --getss", result)
        return parse_sector_size(result.stdout)
