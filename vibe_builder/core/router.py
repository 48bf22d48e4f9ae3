"""
Router - Command dispatch

Routes user input to commands:
- "/alias arguments" runs the command registered for that alias
- free text is mapped to a command by intent keywords, defaulting to
  build-app with the whole text as the vibe
- "/help" (or a help-like question) lists the available commands
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..errors import MissingDependencyError, UnknownCommandError
from ..models import CommandResult
from ..utils.logger import get_logger
from .classifier import KeywordRule, RuleTable
from .registry import CommandRegistry
from .services import Services

logger = get_logger(__name__)

HELP_TRIGGER = "/help"

# First match wins, in this order
INTENT_RULES = RuleTable(
    name="intent",
    default="/build-my-app",
    rules=(
        KeywordRule("/build-my-app", ("build", "create", "make", "develop", "app", "application")),
        KeywordRule("/fix-whatever-is-broken", ("fix", "repair", "broken", "error", "problem", "issue")),
        KeywordRule("/make-it-look-better", ("better", "improve", "enhance", "design", "look", "ui")),
        KeywordRule("/deploy-when-ready", ("deploy", "publish", "online", "live", "launch")),
        KeywordRule("/show-me-progress", ("progress", "status", "show", "check", "see")),
        KeywordRule(HELP_TRIGGER, ("help", "how", "what", "commands")),
    ),
)


@dataclass(frozen=True)
class ParsedInput:
    """How a line of user input was understood"""
    trigger: str
    arguments: str
    direct: bool
    confidence: float


class CommandRouter:
    """
    Dispatcher over a command registry.

    Required collaborators of every registered command are checked when
    the router is built, unless strict is False.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        services: Optional[Services] = None,
        strict: bool = True,
        intent_rules: RuleTable = INTENT_RULES,
        history_limit: int = 100,
    ):
        self.registry = registry
        self.services = services or Services()
        self.intent_rules = intent_rules
        self.history_limit = history_limit
        self.history: List[Dict[str, Any]] = []

        if strict:
            self.check_dependencies()

    def check_dependencies(self) -> None:
        for command in self.registry.list_commands():
            missing = self.services.missing(list(command.required_services))
            if missing:
                raise MissingDependencyError(command.name, missing[0])

    def parse(self, user_input: str) -> ParsedInput:
        text = user_input.strip()

        if text.startswith("/"):
            parts = text.split(maxsplit=1)
            return ParsedInput(
                trigger=parts[0].lower(),
                arguments=parts[1] if len(parts) > 1 else "",
                direct=True,
                confidence=0.9,
            )

        return ParsedInput(
            trigger=self.intent_rules.classify(text),
            arguments=text,
            direct=False,
            confidence=0.7,
        )

    async def route(self, user_input: str, context: Optional[Dict[str, Any]] = None) -> CommandResult:
        """
        Run the command that matches the input.

        Args:
            user_input: Raw line typed by the user
            context: Session context passed through to the command

        Returns:
            The command's result

        Raises:
            UnknownCommandError: If a slash trigger matches no command
        """
        parsed = self.parse(user_input)
        logger.info(f"Routing {parsed.trigger} (direct={parsed.direct}, confidence={parsed.confidence})")

        if parsed.trigger == HELP_TRIGGER:
            return self.help()

        command = self.registry.resolve(parsed.trigger)
        if command is None:
            raise UnknownCommandError(parsed.trigger)

        context = context if context is not None else {}
        try:
            result = await command.execute(parsed.arguments, context, self.services)
        except Exception as e:
            self._record(command.name, "error", context, error=str(e))
            raise

        self._record(command.name, result.status.value, context)
        return result

    def _record(self, command: str, status: str, context: Dict[str, Any], error: Optional[str] = None) -> None:
        """Keep the dispatch history and, for a known session, the session's command log."""
        entry = {"command": command, "status": status}
        if error is not None:
            entry["error"] = error
        self.history.append(entry)
        if len(self.history) > self.history_limit:
            self.history = self.history[-self.history_limit:]

        session_id = context.get("session_id")
        if session_id and self.services.context_manager is not None:
            self.services.context_manager.add_command(session_id, command, status)

    def help(self) -> CommandResult:
        commands = [
            {
                "name": command.name,
                "description": command.description,
                "triggers": command.triggers,
            }
            for command in self.registry.list_commands()
        ]
        return CommandResult.ok("Available commands", commands=commands)
