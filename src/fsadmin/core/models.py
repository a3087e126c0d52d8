"""
fsadmin data models.

Defines the request and result structures passed between the action
layer and the filesystem tool wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class FileSystem(Enum):
    """Filesystem type tags understood by the wrappers.

    Anything not listed maps to OTHER; the caller's original string is
    still what gets passed to mkfs.
    """

    EXT2 = "ext2"
    EXT3 = "ext3"
    EXT4 = "ext4"
    NTFS = "ntfs"
    MSDOS = "msdos"
    VFAT = "vfat"
    REISERFS = "reiserfs"
    JFS = "jfs"
    GFS = "gfs"
    GFS2 = "gfs2"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: str) -> FileSystem:
        """Create FileSystem from string value."""
        for fs in cls:
            if fs.value == value:
                return fs
        return cls.OTHER

    @property
    def is_fat(self) -> bool:
        return self in (FileSystem.VFAT, FileSystem.MSDOS)

    @property
    def is_extended(self) -> bool:
        return self in (FileSystem.EXT2, FileSystem.EXT3, FileSystem.EXT4)


@dataclass
class FilesystemAttributes:
    """Ordered superblock attributes as reported by ``tune2fs -l``.

    Duplicate keys are kept as separate entries.
    """

    pairs: list[tuple[str, str]] = field(default_factory=list)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def append(self, key: str, value: str) -> None:
        self.pairs.append((key, value))

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value recorded for key."""
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def to_flat_list(self) -> list[str]:
        """Alternating key, value list as returned over the wire."""
        flat: list[str] = []
        for key, value in self.pairs:
            flat.extend((key, value))
        return flat

    def to_dict(self) -> dict[str, str]:
        # Later duplicates overwrite earlier ones
        return dict(self.pairs)


@dataclass(frozen=True)
class JournalDevice:
    """External journal addressed by device path."""

    path: str

    @property
    def spec(self) -> str:
        return f"device={self.path}"


@dataclass(frozen=True)
class JournalLabel:
    """External journal addressed by filesystem label."""

    label: str

    @property
    def spec(self) -> str:
        return f"device=LABEL={self.label}"


@dataclass(frozen=True)
class JournalUUID:
    """External journal addressed by UUID."""

    uuid: str

    @property
    def spec(self) -> str:
        return f"device=UUID={self.uuid}"


JournalRef = Union[JournalDevice, JournalLabel, JournalUUID]


@dataclass
class JournalOptions:
    """Options for creating an external journal device."""

    blocksize: int
    device: str
    label: str | None = None
    uuid: str | None = None


@dataclass
class ExternalJournalFormatOptions:
    """Options for creating an ext filesystem that uses an external journal."""

    fstype: str
    blocksize: int
    device: str
    journal: JournalRef


@dataclass
class MkfsOptions:
    """Options for creating a filesystem through the mkfs dispatcher."""

    fstype: str
    device: str
    blocksize: int | None = None  # None = let mkfs pick
