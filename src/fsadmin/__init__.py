"""
fsadmin - Filesystem administration for guest appliances.

Drives tune2fs, e2label, e2fsck, resize2fs, mke2fs and mkfs and turns
their output into structured results for remote callers.
"""

__version__ = "1.0.0"

from fsadmin.core.config import FsAdminConfig
from fsadmin.core.session import Session

__all__ = ["FsAdminConfig", "Session", "__version__"]
