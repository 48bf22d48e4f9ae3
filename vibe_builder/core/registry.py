"""
Registry - Command discovery and lookup

Maintains the set of available commands and resolves slash triggers to
commands. Names and triggers are unique across the registry.
"""

from typing import TYPE_CHECKING, Dict, List, Optional

from ..errors import ConfigurationError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..commands.base import Command

logger = get_logger(__name__)


class CommandRegistry:
    """
    Central registry for all commands.

    Provides:
    - Registration with trigger conflict detection
    - Lookup by name or slash trigger
    - Search and listing
    """

    def __init__(self, commands: Optional[List["Command"]] = None):
        self.commands: Dict[str, "Command"] = {}
        self.triggers: Dict[str, str] = {}

        for command in commands or []:
            self.register(command)

    def register(self, command: "Command") -> None:
        """Register a command; raises ConfigurationError on a name or trigger clash."""
        if not command.name:
            raise ConfigurationError(f"{type(command).__name__} has no name")
        if command.name in self.commands:
            raise ConfigurationError(f"Command already registered: {command.name}")

        for trigger in command.triggers:
            owner = self.triggers.get(trigger.lower())
            if owner is not None:
                raise ConfigurationError(
                    f"Trigger '{trigger}' of '{command.name}' is already used by '{owner}'"
                )

        self.commands[command.name] = command
        for trigger in command.triggers:
            self.triggers[trigger.lower()] = command.name

        logger.debug(f"Registered command: {command.name} ({', '.join(command.triggers)})")

    def unregister(self, name: str) -> None:
        """Remove a command and its triggers."""
        command = self.commands.pop(name, None)
        if command is None:
            return
        for trigger in command.triggers:
            self.triggers.pop(trigger.lower(), None)
        logger.debug(f"Unregistered command: {name}")

    def get(self, name: str) -> Optional["Command"]:
        return self.commands.get(name)

    def resolve(self, trigger: str) -> Optional["Command"]:
        """Find the command for a slash trigger (the leading slash is optional)."""
        trigger = trigger.strip().lower()
        if not trigger.startswith("/"):
            trigger = f"/{trigger}"
        name = self.triggers.get(trigger)
        return self.commands.get(name) if name else None

    def list_commands(self) -> List["Command"]:
        return list(self.commands.values())

    def search(self, query: str) -> List["Command"]:
        """Search commands by name, description or trigger."""
        query_lower = query.lower()
        results = []

        for command in self.list_commands():
            if (query_lower in command.name.lower() or
                    query_lower in command.description.lower() or
                    any(query_lower in t for t in command.triggers)):
                results.append(command)

        return results

    def stats(self) -> Dict[str, int]:
        return {
            "commands": len(self.commands),
            "triggers": len(self.triggers),
        }
