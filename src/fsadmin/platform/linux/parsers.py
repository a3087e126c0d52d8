"""
Linux output parsers.

Parsers for tune2fs, e2label and blockdev output.
"""

from __future__ import annotations

import re

from fsadmin.core.errors import OutputFormatError
from fsadmin.core.models import FilesystemAttributes

TUNE2FS_BANNER = "tune2fs "
UUID_MARKER = "\nFilesystem UUID:"

# tune2fs spellings for an unset attribute
NONE_VALUES = frozenset({"<none>", "<not available>", "(none)"})

# C-locale isspace(), not str.isspace()
WHITESPACE = " \t\n\v\f\r"

# Same, minus the newline that ends the current line
LINE_WHITESPACE = " \t\v\f\r"

UUID_CHARS_RE = re.compile(r"[0-9A-Fa-f-]*")


def parse_tune2fs_list(output: str) -> FilesystemAttributes:
    """
    Parse ``tune2fs -l`` output into ordered key/value pairs.

    Example input:
    tune2fs 1.47.0 (5-Feb-2023)
    Filesystem volume name:   <none>
    Filesystem UUID:          2b6c9fa1-1f0b-4c1e-9d3e-8d6b0f1a2c3d
    """
    if output.startswith(TUNE2FS_BANNER):
        newline = output.find("\n")
        if newline == -1:
            raise OutputFormatError("tune2fs: truncated output")
        output = output[newline + 1 :]

    attributes = FilesystemAttributes()

    for line in output.split("\n"):
        if not line:
            continue

        key, colon, value = line.partition(":")
        if not colon:
            attributes.append(line, "")
            continue

        value = value.lstrip(WHITESPACE)
        if value in NONE_VALUES:
            value = ""
        attributes.append(key, value)

    return attributes


def parse_filesystem_uuid(output: str) -> str:
    """Extract the UUID following ``Filesystem UUID:`` in tune2fs -l output."""
    start = output.find(UUID_MARKER)
    if start == -1:
        raise OutputFormatError("no Filesystem UUID in the output of tune2fs -l")

    rest = output[start + len(UUID_MARKER) :].lstrip(LINE_WHITESPACE)
    if not rest or rest[0] == "\n":
        raise OutputFormatError("malformed Filesystem UUID in the output of tune2fs -l")

    uuid = UUID_CHARS_RE.match(rest).group(0)
    if not uuid:
        raise OutputFormatError("malformed Filesystem UUID in the output of tune2fs -l")

    return uuid


def parse_e2label_output(output: str) -> str:
    """Strip the single trailing newline e2label prints after the label."""
    if output.endswith("\n"):
        return output[:-1]
    return output


def parse_sector_size(output: str) -> int:
    """Parse the logical sector size printed by ``blockdev --getss``."""
    text = output.strip()
    if not text.isdigit():
        raise OutputFormatError(f"blockdev: unexpected sector size output: {output!r}")

    sector_size = int(text)
    if sector_size <= 0:
        raise OutputFormatError(f"blockdev: invalid sector size: {sector_size}")
    return sector_size
