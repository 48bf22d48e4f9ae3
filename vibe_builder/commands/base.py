"""
Command base classes

Every command exposes execute(user_input, context, services) and returns
a CommandResult. Input and service requirements are checked before the
command does anything observable.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..core.services import Services
from ..errors import InvalidInputError, MissingDependencyError
from ..models import CommandResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """
    A named, alias-triggered unit of behavior.

    Subclasses set the class attributes and implement run().
    """

    name: str = ""
    description: str = ""
    aliases: Tuple[str, ...] = ()
    required_services: Tuple[str, ...] = ()
    optional_services: Tuple[str, ...] = ()

    @property
    def triggers(self) -> List[str]:
        """Slash triggers in priority order: aliases, then /<name>."""
        triggers = list(self.aliases)
        own = f"/{self.name}"
        if own not in triggers:
            triggers.append(own)
        return triggers

    def matches(self, alias: str) -> bool:
        alias = alias.strip().lower()
        if not alias.startswith("/"):
            alias = f"/{alias}"
        return alias in self.triggers

    def check_services(self, services: Optional[Services]) -> Services:
        """Raise MissingDependencyError for the first absent required collaborator."""
        services = services if services is not None else Services()
        for service in self.required_services:
            if not services.has(service):
                raise MissingDependencyError(self.name, service)
        return services

    def validate_input(self, user_input: Any) -> str:
        if not isinstance(user_input, str):
            raise InvalidInputError(
                f"User input must be a string, got {type(user_input).__name__}",
                command=self.name,
            )
        return user_input

    async def execute(
        self,
        user_input: str,
        context: Optional[Dict[str, Any]] = None,
        services: Optional[Services] = None,
    ) -> CommandResult:
        """
        Run the command.

        Args:
            user_input: Free text after the command trigger (may be empty)
            context: Caller context (session_id and anything else)
            services: Collaborators

        Raises:
            InvalidInputError: If the input cannot be processed
            MissingDependencyError: If a required collaborator is absent
        """
        user_input = self.validate_input(user_input)
        services = self.check_services(services)
        logger.info(f"Executing {self.name}")
        return await self.run(user_input, context if context is not None else {}, services)

    @abstractmethod
    async def run(self, user_input: str, context: Dict[str, Any], services: Services) -> CommandResult:
        ...

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "aliases": list(self.aliases),
            "required_services": list(self.required_services),
            "optional_services": list(self.optional_services),
        }


class DelegatingCommand(Command):
    """
    A command that hands the request to one specialist and wraps the
    specialist's answer in a canned response.

    A specialist answer with success False turns the result into a
    partial success.
    """

    required_services = ("agent_pool",)

    agent_id: str = ""
    task_type: str = ""
    success_message: str = ""
    partial_message: str = "The specialist reported a problem; review the result before continuing."

    async def run(self, user_input: str, context: Dict[str, Any], services: Services) -> CommandResult:
        agent_pool = services.require(self.name, "agent_pool")

        logger.debug(f"{self.name} delegating '{self.task_type}' to {self.agent_id}")
        result = await agent_pool.execute_with_agent(self.agent_id, {
            "type": self.task_type,
            "input": user_input,
            "context": context,
        }, context)

        payload = self.build_payload(user_input, result)
        payload["result"] = result

        if isinstance(result, dict) and result.get("success") is False:
            return CommandResult.partial(self.partial_message, **payload)
        return CommandResult.ok(self.success_message, **payload)

    @abstractmethod
    def build_payload(self, user_input: str, result: Dict[str, Any]) -> Dict[str, Any]:
        ...
