"""
fsadmin actions.

The named operations offered to remote callers.
"""

from fsadmin.actions.base import Action, ActionRegistry
from fsadmin.actions.filesystem import register_ext2_actions, register_mkfs_actions

__all__ = [
    "Action",
    "ActionRegistry",
    "register_ext2_actions",
    "register_mkfs_actions",
]
