"""
fsadmin Session Management.

Wires configuration, logging, the command runner, the tool wrappers and
the action registry together.
"""

from __future__ import annotations

import uuid
from typing import Any

from fsadmin.actions import ActionRegistry, register_ext2_actions, register_mkfs_actions
from fsadmin.core.config import FsAdminConfig, load_config
from fsadmin.core.logging import get_logger, setup_logging
from fsadmin.platform import CommandRunner, is_admin
from fsadmin.platform.linux import Ext2Admin, MkfsAdmin

logger = get_logger(__name__)


class Session:
    """A configured set of filesystem wrappers."""

    def __init__(
        self,
        config: FsAdminConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.id = str(uuid.uuid4())
        self.config = config or load_config()

        setup_logging(self.config.logging)

        self.runner = runner or CommandRunner(
            timeout=self.config.tools.command_timeout_seconds
        )
        self.ext2 = Ext2Admin(self.runner, self.config.tools)
        self.mkfs = MkfsAdmin(self.runner, self.config.tools)

        self.actions = ActionRegistry()
        register_ext2_actions(self.actions, self.ext2)
        register_mkfs_actions(self.actions, self.mkfs)

        if not is_admin():
            logger.warning("Not running as root; most filesystem tools will fail")

        logger.info("Session started", session_id=self.id)

    def call(self, action: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch a named action."""
        return self.actions.dispatch(action, *args, **kwargs)
