"""
Filesystem actions.

Exposes the ext2 and mkfs wrappers under their remote-call names.
Positional arguments keep the order remote callers already use, e.g.
``mke2journal_L(blocksize, label, device)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsadmin.core.models import (
    ExternalJournalFormatOptions,
    JournalDevice,
    JournalLabel,
    JournalOptions,
    JournalRef,
    JournalUUID,
    MkfsOptions,
)

if TYPE_CHECKING:
    from fsadmin.actions.base import ActionRegistry
    from fsadmin.platform.linux.ext2 import Ext2Admin
    from fsadmin.platform.linux.mkfs import MkfsAdmin


def register_ext2_actions(registry: ActionRegistry, ext2: Ext2Admin) -> None:
    """Register tune2fs/e2label/e2fsck/resize2fs/mke2fs actions."""

    def tune2fs_l(device: str) -> list[str]:
        return ext2.list_attributes(device).to_flat_list()

    def mke2journal(blocksize: int, device: str) -> None:
        ext2.create_journal(JournalOptions(blocksize=blocksize, device=device))

    def mke2journal_L(blocksize: int, label: str, device: str) -> None:
        ext2.create_journal(JournalOptions(blocksize=blocksize, device=device, label=label))

    def mke2journal_U(blocksize: int, uuid: str, device: str) -> None:
        ext2.create_journal(JournalOptions(blocksize=blocksize, device=device, uuid=uuid))

    def _mke2fs(fstype: str, blocksize: int, device: str, journal: JournalRef) -> None:
        ext2.create_with_external_journal(
            ExternalJournalFormatOptions(
                fstype=fstype, blocksize=blocksize, device=device, journal=journal
            )
        )

    def mke2fs_J(fstype: str, blocksize: int, device: str, journal: str) -> None:
        _mke2fs(fstype, blocksize, device, JournalDevice(journal))

    def mke2fs_JL(fstype: str, blocksize: int, device: str, label: str) -> None:
        _mke2fs(fstype, blocksize, device, JournalLabel(label))

    def mke2fs_JU(fstype: str, blocksize: int, device: str, uuid: str) -> None:
        _mke2fs(fstype, blocksize, device, JournalUUID(uuid))

    registry.register("tune2fs_l", tune2fs_l, "List all ext2/3/4 superblock attributes")
    registry.register("set_e2label", ext2.set_label, "Set the ext2/3/4 filesystem label")
    registry.register("get_e2label", ext2.get_label, "Get the ext2/3/4 filesystem label")
    registry.register("set_e2uuid", ext2.set_uuid, "Set the ext2/3/4 filesystem UUID")
    registry.register("get_e2uuid", ext2.get_uuid, "Get the ext2/3/4 filesystem UUID")
    registry.register("e2fsck_f", ext2.check, "Force a check of an ext2/3/4 filesystem")
    registry.register("resize2fs", ext2.resize, "Grow an ext2/3/4 filesystem to its device")
    registry.register("mke2journal", mke2journal, "Make an external journal device")
    registry.register("mke2journal_L", mke2journal_L, "Make a labelled external journal")
    registry.register("mke2journal_U", mke2journal_U, "Make an external journal with a UUID")
    registry.register("mke2fs_J", mke2fs_J, "Make ext2/3/4 with external journal device")
    registry.register("mke2fs_JL", mke2fs_JL, "Make ext2/3/4 with journal found by label")
    registry.register("mke2fs_JU", mke2fs_JU, "Make ext2/3/4 with journal found by UUID")


def register_mkfs_actions(registry: ActionRegistry, mkfs: MkfsAdmin) -> None:
    """Register the generic mkfs actions."""

    def mkfs_opts(fstype: str, device: str, blocksize: int | None = None) -> None:
        mkfs.make_filesystem(MkfsOptions(fstype=fstype, device=device, blocksize=blocksize))

    def mkfs_(fstype: str, device: str) -> None:
        mkfs_opts(fstype, device)

    def mkfs_b(fstype: str, blocksize: int, device: str) -> None:
        mkfs_opts(fstype, device, blocksize=blocksize)

    registry.register("mkfs", mkfs_, "Make a filesystem")
    registry.register("mkfs_b", mkfs_b, "Make a filesystem with the given block size")
    registry.register("mkfs_opts", mkfs_opts, "Make a filesystem, block size optional")
