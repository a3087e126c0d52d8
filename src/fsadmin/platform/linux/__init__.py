"""
fsadmin Linux tool wrappers.

Implements filesystem administration using standard Linux tools:
- tune2fs, e2label for attributes, labels and UUIDs
- e2fsck, resize2fs for checking and growing
- mke2fs/mke4fs for external journals
- mkfs for everything else
- blockdev for sector sizes
"""

from fsadmin.platform.linux.blockdev import BlockDevice
from fsadmin.platform.linux.ext2 import Ext2Admin
from fsadmin.platform.linux.mkfs import MkfsAdmin, is_power_of_2
from fsadmin.platform.linux.parsers import (
    parse_e2label_output,
    parse_filesystem_uuid,
    parse_sector_size,
    parse_tune2fs_list,
)

__all__ = [
    "BlockDevice",
    "Ext2Admin",
    "MkfsAdmin",
    "is_power_of_2",
    "parse_e2label_output",
    "parse_filesystem_uuid",
    "parse_sector_size",
    "parse_tune2fs_list",
]
