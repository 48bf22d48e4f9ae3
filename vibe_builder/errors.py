"""
Error taxonomy for Vibe Builder

Every error raised by commands, the dispatcher or the reference
collaborators derives from VibeBuilderError.
"""

from typing import Any, Dict, List, Optional


class VibeBuilderError(Exception):
    """Base error for Vibe Builder."""

    def __init__(self, message: str, extra_info: Optional[Dict[str, Any]] = None):
        msg = message
        if extra_info:
            msg += " (" + ", ".join(f"{key}: {value}" for key, value in extra_info.items() if value is not None) + ")"
        super().__init__(msg)


class ConfigurationError(VibeBuilderError):
    """Raised when configuration or a rule file is invalid."""
    pass


class MissingDependencyError(VibeBuilderError):
    """Raised when a command needs a collaborator the services bag does not provide."""

    def __init__(self, command: str, service: str):
        self.command = command
        self.service = service
        super().__init__(
            f"Command '{command}' requires the '{service}' service",
            extra_info={"command": command, "service": service},
        )


class InvalidInputError(VibeBuilderError):
    """Raised when user input cannot be processed."""

    def __init__(self, message: str, command: Optional[str] = None):
        self.command = command
        super().__init__(message, extra_info={"command": command})


class UnknownCommandError(VibeBuilderError):
    """Raised when the dispatcher cannot resolve a command alias."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Unknown command: {alias}. Try /help for available commands.")


class SpecialistExecutionError(VibeBuilderError):
    """
    Raised when a specialist call fails during the build pipeline.

    Keeps the specialist that failed, the progress step it was running at
    and the results of the specialists that completed before it.
    """

    def __init__(
        self,
        agent_id: str,
        step: int,
        cause: BaseException,
        completed_results: Optional[List[Dict[str, Any]]] = None,
    ):
        self.agent_id = agent_id
        self.step = step
        self.cause = cause
        self.completed_results = list(completed_results or [])
        super().__init__(
            f"Specialist '{agent_id}' failed at step {step}: {cause}",
            extra_info={"completed_specialists": len(self.completed_results)},
        )
