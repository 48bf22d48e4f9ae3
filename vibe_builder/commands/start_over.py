"""
Start Over Command - Reset and start fresh
"""

from typing import Any, Dict

from ..core.services import Services
from ..models import CommandResult
from ..utils.logger import get_logger
from .base import Command

logger = get_logger(__name__)


class StartOverCommand(Command):
    name = "start-over"
    description = "Reset everything and start fresh"
    aliases = ("/start-over-simpler", "/start-over", "/reset", "/fresh-start")
    required_services = ("context_manager",)
    optional_services = ("progress_tracker",)

    async def run(self, user_input: str, context: Dict[str, Any], services: Services) -> CommandResult:
        context_manager = services.require(self.name, "context_manager")

        # Only a real session has context to clear
        session_reset = bool(context.get("session_id"))
        if session_reset:
            context_manager.reset()
        else:
            logger.debug("No session id in context; nothing to reset")

        return CommandResult.ok(
            "Everything has been reset. Ready for a fresh start!",
            session_reset=session_reset,
            reset_items=[
                "Session context cleared",
                "Progress history reset",
                "Cache cleared",
                "Ready for new project",
            ],
        )
