"""
Tests for fsadmin.platform.linux.ext2 module.

Uses a fake runner so no tool is actually executed.
"""

from pathlib import Path

import pytest

from fsadmin.core.config import ToolsConfig
from fsadmin.core.errors import (
    CommandError,
    OutputFormatError,
    ToolNotFoundError,
    ValidationError,
)
from fsadmin.core.models import (
    ExternalJournalFormatOptions,
    JournalDevice,
    JournalLabel,
    JournalOptions,
    JournalUUID,
)
from fsadmin.platform.linux.ext2 import Ext2Admin


@pytest.fixture
def ext2(fake_runner, tools_dir: Path) -> Ext2Admin:
    tools = ToolsConfig(
        mke2fs_candidates=[str(tools_dir / "mke4fs"), str(tools_dir / "mke2fs")],
    )
    return Ext2Admin(fake_runner, tools)


class TestListAttributes:
    """Tests for Ext2Admin.list_attributes."""

    def test_command_and_parse(self, ext2, fake_runner, tune2fs_output: str) -> None:
        fake_runner.queue(stdout=tune2fs_output)

        attrs = ext2.list_attributes("/dev/sda1")

        assert fake_runner.commands == [["/sbin/tune2fs", "-l", "/dev/sda1"]]
        assert attrs.get("Filesystem state") == "clean"
        assert attrs.get("Filesystem volume name") == ""

    def test_failure_embeds_stderr(self, ext2, fake_runner) -> None:
        fake_runner.queue(
            returncode=1,
            stdout="Filesystem volume name: partial\n",
            stderr="Bad magic number in super-block",
        )

        with pytest.raises(CommandError) as exc_info:
            ext2.list_attributes("/dev/sda1")

        assert str(exc_info.value) == "tune2fs: Bad magic number in super-block"
        assert exc_info.value.returncode == 1

    def test_truncated_banner(self, ext2, fake_runner) -> None:
        fake_runner.queue(stdout="tune2fs 1.47.0 (5-Feb-2023)")
        with pytest.raises(OutputFormatError):
            ext2.list_attributes("/dev/sda1")


class TestLabel:
    """Tests for label operations."""

    def test_set_label(self, ext2, fake_runner) -> None:
        ext2.set_label("/dev/sda1", "data")
        assert fake_runner.commands == [["/sbin/e2label", "/dev/sda1", "data"]]

    def test_set_label_failure(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="No such file or directory")
        with pytest.raises(CommandError, match="^e2label: No such file"):
            ext2.set_label("/dev/sdz1", "data")

    def test_get_label(self, ext2, fake_runner) -> None:
        fake_runner.queue(stdout="data\n")
        assert ext2.get_label("/dev/sda1") == "data"
        assert fake_runner.commands == [["/sbin/e2label", "/dev/sda1"]]

    def test_get_empty_label(self, ext2, fake_runner) -> None:
        fake_runner.queue(stdout="\n")
        assert ext2.get_label("/dev/sda1") == ""


class TestUUID:
    """Tests for UUID operations."""

    def test_set_uuid(self, ext2, fake_runner) -> None:
        ext2.set_uuid("/dev/sda1", "01234567-89ab-cdef-0123-456789abcdef")
        assert fake_runner.commands == [
            ["/sbin/tune2fs", "-U", "01234567-89ab-cdef-0123-456789abcdef", "/dev/sda1"]
        ]

    def test_set_uuid_failure(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="Invalid UUID format")
        with pytest.raises(CommandError, match="^tune2fs -U: Invalid UUID format"):
            ext2.set_uuid("/dev/sda1", "nope")

    def test_get_uuid(self, ext2, fake_runner, tune2fs_output: str) -> None:
        fake_runner.queue(stdout=tune2fs_output)
        assert ext2.get_uuid("/dev/sda1") == "2b6c9fa1-1f0b-4c1e-9d3e-8d6b0f1a2c3d"
        assert fake_runner.commands == [["/sbin/tune2fs", "-l", "/dev/sda1"]]

    def test_get_uuid_missing(self, ext2, fake_runner) -> None:
        fake_runner.queue(stdout="tune2fs 1.47.0\nInode count: 1\n")
        with pytest.raises(OutputFormatError, match="no Filesystem UUID"):
            ext2.get_uuid("/dev/sda1")

    def test_get_uuid_tool_failure(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="Bad magic number")
        with pytest.raises(CommandError, match="^tune2fs -l: Bad magic number"):
            ext2.get_uuid("/dev/sda1")


class TestCheckAndResize:
    """Tests for e2fsck and resize2fs."""

    def test_check(self, ext2, fake_runner) -> None:
        ext2.check("/dev/sda1")
        assert fake_runner.commands == [["/sbin/e2fsck", "-p", "-f", "/dev/sda1"]]

    @pytest.mark.parametrize("returncode", [1, 4])
    def test_check_any_nonzero_fails(self, ext2, fake_runner, returncode: int) -> None:
        fake_runner.queue(returncode=returncode, stderr="/dev/sda1: UNEXPECTED INCONSISTENCY")

        with pytest.raises(CommandError) as exc_info:
            ext2.check("/dev/sda1")

        assert exc_info.value.returncode == returncode
        assert str(exc_info.value).startswith("e2fsck: ")

    def test_resize(self, ext2, fake_runner) -> None:
        ext2.resize("/dev/sda1")
        assert fake_runner.commands == [["/sbin/resize2fs", "/dev/sda1"]]

    def test_resize_failure(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="Please run 'e2fsck -f /dev/sda1' first.")
        with pytest.raises(CommandError, match="^resize2fs: Please run"):
            ext2.resize("/dev/sda1")


class TestCreateJournal:
    """Tests for external journal device creation."""

    def test_bare(self, ext2, fake_runner) -> None:
        ext2.create_journal(JournalOptions(blocksize=4096, device="/dev/sdb1"))
        assert fake_runner.commands == [
            ["/sbin/mke2fs", "-O", "journal_dev", "-b", "4096", "/dev/sdb1"]
        ]

    def test_with_label(self, ext2, fake_runner) -> None:
        ext2.create_journal(JournalOptions(blocksize=4096, device="/dev/sdb1", label="jnl"))
        assert fake_runner.commands == [
            ["/sbin/mke2fs", "-O", "journal_dev", "-b", "4096", "-L", "jnl", "/dev/sdb1"]
        ]

    def test_with_uuid(self, ext2, fake_runner) -> None:
        ext2.create_journal(JournalOptions(blocksize=1024, device="/dev/sdb1", uuid="1234-abcd"))
        assert fake_runner.commands == [
            ["/sbin/mke2fs", "-O", "journal_dev", "-b", "1024", "-U", "1234-abcd", "/dev/sdb1"]
        ]

    def test_label_and_uuid_rejected(self, ext2, fake_runner) -> None:
        options = JournalOptions(blocksize=4096, device="/dev/sdb1", label="jnl", uuid="1234")
        with pytest.raises(ValidationError):
            ext2.create_journal(options)
        assert fake_runner.commands == []

    def test_failure_context(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="invalid block size")
        with pytest.raises(CommandError, match="^mke2journal_L: invalid block size"):
            ext2.create_journal(JournalOptions(blocksize=3, device="/dev/sdb1", label="jnl"))


class TestFindMke2fs:
    """Tests for mke2fs binary resolution."""

    def test_prefers_mke4fs(self, ext2, tools_dir: Path) -> None:
        assert ext2.find_mke2fs() == str(tools_dir / "mke4fs")

    def test_falls_back_to_mke2fs(self, ext2, tools_dir: Path) -> None:
        (tools_dir / "mke4fs").unlink()
        assert ext2.find_mke2fs() == str(tools_dir / "mke2fs")

    def test_neither_present(self, ext2, tools_dir: Path) -> None:
        (tools_dir / "mke4fs").unlink()
        (tools_dir / "mke2fs").unlink()
        with pytest.raises(ToolNotFoundError, match="no mke2fs binary"):
            ext2.find_mke2fs()


class TestCreateWithExternalJournal:
    """Tests for creating a filesystem with an external journal."""

    @pytest.mark.parametrize(
        "journal, spec",
        [
            (JournalDevice("/dev/sdb1"), "device=/dev/sdb1"),
            (JournalLabel("jnl"), "device=LABEL=jnl"),
            (JournalUUID("1234-abcd"), "device=UUID=1234-abcd"),
        ],
    )
    def test_journal_spec(self, ext2, fake_runner, tools_dir: Path, journal, spec: str) -> None:
        ext2.create_with_external_journal(
            ExternalJournalFormatOptions(
                fstype="ext3", blocksize=4096, device="/dev/sda1", journal=journal
            )
        )
        assert fake_runner.commands == [
            [str(tools_dir / "mke4fs"), "-t", "ext3", "-J", spec, "-b", "4096", "/dev/sda1"]
        ]

    def test_missing_binary_spawns_nothing(self, ext2, fake_runner, tools_dir: Path) -> None:
        (tools_dir / "mke4fs").unlink()
        (tools_dir / "mke2fs").unlink()

        with pytest.raises(ToolNotFoundError):
            ext2.create_with_external_journal(
                ExternalJournalFormatOptions(
                    fstype="ext4",
                    blocksize=4096,
                    device="/dev/sda1",
                    journal=JournalDevice("/dev/sdb1"),
                )
            )
        assert fake_runner.commands == []

    def test_failure_context(self, ext2, fake_runner) -> None:
        fake_runner.queue(returncode=1, stderr="journal superblock not found")
        with pytest.raises(CommandError, match="^mke2fs_JU: journal superblock"):
            ext2.create_with_external_journal(
                ExternalJournalFormatOptions(
                    fstype="ext4",
                    blocksize=4096,
                    device="/dev/sda1",
                    journal=JournalUUID("1234"),
                )
            )


class TestDefaults:
    """Tests for default tool paths."""

    def test_class_defaults_without_config(self, fake_runner) -> None:
        ext2 = Ext2Admin(fake_runner)
        ext2.resize("/dev/sda1")
        assert fake_runner.commands == [["/sbin/resize2fs", "/dev/sda1"]]
        assert ext2.MKE2FS_CANDIDATES == ("/sbin/mke4fs", "/sbin/mke2fs")
