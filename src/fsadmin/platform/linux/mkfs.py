"""
Generic filesystem creation through the ``mkfs`` dispatcher.

Each filesystem family needs a few extra flags to run unattended on a
virtual disk; those are added here before handing off to mkfs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsadmin.core.errors import BlockSizeError, ClusterSizeError, CommandError
from fsadmin.core.logging import OperationLogger, get_logger
from fsadmin.core.models import FileSystem, MkfsOptions
from fsadmin.platform.linux.blockdev import BlockDevice

if TYPE_CHECKING:
    from fsadmin.core.config import ToolsConfig
    from fsadmin.platform.base import CommandRunner

logger = get_logger(__name__)

MIN_SECTORS_PER_CLUSTER = 1
MAX_SECTORS_PER_CLUSTER = 128


def is_power_of_2(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class MkfsAdmin:
    """Creates filesystems of arbitrary type."""

    MKFS = "mkfs"

    def __init__(
        self,
        runner: CommandRunner,
        tools: ToolsConfig | None = None,
        blockdev: BlockDevice | None = None,
    ) -> None:
        self.runner = runner
        if tools is not None:
            self.MKFS = tools.mkfs
        self.blockdev = blockdev or BlockDevice(
            runner, tools.blockdev if tools is not None else None
        )

    def build_command(self, options: MkfsOptions) -> list[str]:
        """Assemble the mkfs argument vector.

        May query the device sector size (FAT cluster sizes) but never
        modifies the device.
        """
        fstype = options.fstype
        fs = FileSystem.from_string(fstype)

        cmd = [self.MKFS, "-t", fstype]

        # Skip zeroing and bad block scan, pointless on virtual disks
        if fs == FileSystem.NTFS:
            cmd.append("-Q")

        # Otherwise these prompt for confirmation
        if fs in (FileSystem.REISERFS, FileSystem.JFS):
            cmd.append("-f")

        # Single node: no cluster locking, one journal, no questions
        if fs in (FileSystem.GFS, FileSystem.GFS2):
            cmd.extend(["-p", "lock_nolock", "-j", "1", "-O"])

        if options.blocksize is not None:
            cmd.extend(self._blocksize_args(fs, options))

        cmd.append(options.device)
        return cmd

    def _blocksize_args(self, fs: FileSystem, options: MkfsOptions) -> list[str]:
        blocksize = options.blocksize
        if blocksize is None or not is_power_of_2(blocksize):
            raise BlockSizeError(blocksize)

        if fs.is_fat:
            # FAT takes a cluster size in sectors rather than bytes
            sector_size = self.blockdev.get_sector_size(options.device)
            sectors_per_cluster = blocksize // sector_size
            if not MIN_SECTORS_PER_CLUSTER <= sectors_per_cluster <= MAX_SECTORS_PER_CLUSTER:
                raise ClusterSizeError(
                    options.fstype, blocksize, sector_size, sectors_per_cluster
                )
            return ["-s", str(sectors_per_cluster)]

        if fs == FileSystem.NTFS:
            return ["-c", str(blocksize)]

        return ["-b", str(blocksize)]

    def make_filesystem(self, options: MkfsOptions) -> None:
        """Create a filesystem of options.fstype on options.device."""
        with OperationLogger(
            "mkfs",
            logger,
            device=options.device,
            fstype=options.fstype,
            blocksize=options.blocksize,
        ):
            cmd = self.build_command(options)
            result = self.runner.run_command(cmd)
            if not result.success:
                raise CommandError(f"{options.fstype}: {options.device}", result)
