"""
Show Progress Command - Display development progress
"""

from typing import Any, Dict

from ..core.services import Services
from ..models import CommandResult
from .base import Command

RECENT_COMPLETED = 5


class ShowProgressCommand(Command):
    name = "show-progress"
    description = "Show development progress and status"
    aliases = ("/show-me-progress", "/status", "/progress")
    required_services = ("progress_tracker",)
    optional_services = ("context_manager",)

    async def run(self, user_input: str, context: Dict[str, Any], services: Services) -> CommandResult:
        tracker = services.require(self.name, "progress_tracker")

        return CommandResult.ok(
            "Here's your development progress",
            active_operations=tracker.get_active_operations(),
            recent_completed=tracker.get_completed_operations(RECENT_COMPLETED),
            statistics=tracker.get_stats(),
            overall_progress="75% complete",
        )
