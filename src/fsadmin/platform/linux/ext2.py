"""
ext2/3/4 administration.

Wraps tune2fs, e2label, e2fsck, resize2fs and mke2fs for label, UUID,
consistency checking, growing and external journal handling.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from fsadmin.core.errors import CommandError, ToolNotFoundError, ValidationError
from fsadmin.core.logging import OperationLogger, get_logger
from fsadmin.core.models import (
    ExternalJournalFormatOptions,
    FilesystemAttributes,
    JournalLabel,
    JournalOptions,
    JournalUUID,
)
from fsadmin.platform.linux.parsers import (
    parse_e2label_output,
    parse_filesystem_uuid,
    parse_tune2fs_list,
)

if TYPE_CHECKING:
    from fsadmin.core.config import ToolsConfig
    from fsadmin.platform.base import CommandResult, CommandRunner

logger = get_logger(__name__)


class Ext2Admin:
    """Operations on ext2/3/4 filesystems."""

    # Tool paths (can be overridden for testing)
    TUNE2FS = "/sbin/tune2fs"
    E2LABEL = "/sbin/e2label"
    E2FSCK = "/sbin/e2fsck"
    RESIZE2FS = "/sbin/resize2fs"
    MKE2FS = "/sbin/mke2fs"

    # mke4fs first: on older distributions ext4 was only reachable through
    # that name, later it was renamed to mke2fs
    MKE2FS_CANDIDATES: tuple[str, ...] = ("/sbin/mke4fs", "/sbin/mke2fs")

    def __init__(self, runner: CommandRunner, tools: ToolsConfig | None = None) -> None:
        self.runner = runner
        if tools is not None:
            self.TUNE2FS = tools.tune2fs
            self.E2LABEL = tools.e2label
            self.E2FSCK = tools.e2fsck
            self.RESIZE2FS = tools.resize2fs
            self.MKE2FS = tools.mke2fs
            self.MKE2FS_CANDIDATES = tuple(tools.mke2fs_candidates)

    def _run(self, context: str, command: list[str]) -> CommandResult:
        result = self.runner.run_command(command)
        if not result.success:
            raise CommandError(context, result)
        return result

    # ==================== Attributes ====================

    def list_attributes(self, device: str) -> FilesystemAttributes:
        """List every superblock attribute reported by ``tune2fs -l``."""
        with OperationLogger("tune2fs_l", logger, device=device) as op:
            result = self._run("tune2fs", [self.TUNE2FS, "-l", device])
            attributes = parse_tune2fs_list(result.stdout)
            op.update(attributes=len(attributes))
            return attributes

    # ==================== Label / UUID ====================

    def set_label(self, device: str, label: str) -> None:
        with OperationLogger("set_e2label", logger, device=device, label=label):
            self._run("e2label", [self.E2LABEL, device, label])

    def get_label(self, device: str) -> str:
        with OperationLogger("get_e2label", logger, device=device):
            result = self._run("e2label", [self.E2LABEL, device])
            return parse_e2label_output(result.stdout)

    def set_uuid(self, device: str, uuid: str) -> None:
        with OperationLogger("set_e2uuid", logger, device=device, uuid=uuid):
            self._run("tune2fs -U", [self.TUNE2FS, "-U", uuid, device])

    def get_uuid(self, device: str) -> str:
        """Read the filesystem UUID.

        tune2fs has no option to print just the UUID, so this scans the
        full ``tune2fs -l`` listing for the ``Filesystem UUID:`` line.
        """
        with OperationLogger("get_e2uuid", logger, device=device):
            result = self._run("tune2fs -l", [self.TUNE2FS, "-l", device])
            return parse_filesystem_uuid(result.stdout)

    # ==================== Check / Resize ====================

    def check(self, device: str) -> None:
        """Force a preen-mode check. Any nonzero e2fsck status is a failure."""
        with OperationLogger("e2fsck_f", logger, device=device):
            self._run("e2fsck", [self.E2FSCK, "-p", "-f", device])

    def resize(self, device: str) -> None:
        """Grow the filesystem to fill its device."""
        with OperationLogger("resize2fs", logger, device=device):
            self._run("resize2fs", [self.RESIZE2FS, device])

    # ==================== External journals ====================

    def create_journal(self, options: JournalOptions) -> None:
        """Format options.device as an external journal device."""
        if options.label is not None and options.uuid is not None:
            raise ValidationError("journal label and UUID are mutually exclusive")

        cmd = [self.MKE2FS, "-O", "journal_dev", "-b", str(options.blocksize)]
        context = "mke2journal"
        if options.label is not None:
            cmd.extend(["-L", options.label])
            context = "mke2journal_L"
        elif options.uuid is not None:
            cmd.extend(["-U", options.uuid])
            context = "mke2journal_U"
        cmd.append(options.device)

        with OperationLogger(
            context, logger, device=options.device, blocksize=options.blocksize
        ):
            self._run(context, cmd)

    def find_mke2fs(self) -> str:
        """Return the first mke2fs candidate present in the appliance."""
        for prog in self.MKE2FS_CANDIDATES:
            if os.access(prog, os.F_OK):
                return prog
        raise ToolNotFoundError("mke2fs: no mke2fs binary found in appliance")

    def create_with_external_journal(self, options: ExternalJournalFormatOptions) -> None:
        """Create an ext filesystem whose journal lives on another device."""
        prog = self.find_mke2fs()
        journal_spec = options.journal.spec
        if isinstance(options.journal, JournalLabel):
            context = "mke2fs_JL"
        elif isinstance(options.journal, JournalUUID):
            context = "mke2fs_JU"
        else:
            context = "mke2fs_J"

        with OperationLogger(
            context,
            logger,
            device=options.device,
            fstype=options.fstype,
            journal=journal_spec,
            program=prog,
        ):
            self._run(
                context,
                [
                    prog,
                    "-t",
                    options.fstype,
                    "-J",
                    journal_spec,
                    "-b",
                    str(options.blocksize),
                    options.device,
                ],
            )
