"""
fsadmin action registry.

Maps remote-call names to handlers so the daemon's protocol layer can
dispatch requests without knowing about the tool wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fsadmin.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Action:
    """A callable exposed under a remote-call name."""

    name: str
    handler: Callable[..., Any]
    description: str = ""


class ActionRegistry:
    """Registry of named actions."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register(
        self,
        name: str,
        handler: Callable[..., Any],
        description: str = "",
    ) -> None:
        """Register an action handler."""
        logger.debug("Registering action", name=name)
        self._actions[name] = Action(name=name, handler=handler, description=description)

    def get(self, name: str) -> Action | None:
        """Get a registered action."""
        return self._actions.get(name)

    def list_actions(self) -> list[str]:
        """List all registered action names."""
        return list(self._actions.keys())

    def dispatch(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Run an action. Handler errors propagate to the caller."""
        action = self._actions.get(name)
        if action is None:
            raise KeyError(f"Action not found: {name}")
        logger.debug("Dispatching action", name=name)
        return action.handler(*args, **kwargs)
