"""
Wiring for the default command set and collaborators
"""

from typing import Optional

from .commands import default_commands
from .config import Config
from .core import (
    CommandRegistry,
    CommandRouter,
    PlanRouter,
    ProgressTracker,
    Services,
    SessionContextManager,
    SimulatedAgentPool,
    load_classifier,
)
from .core.classifier import VibeClassifier


def default_services() -> Services:
    """Services bag backed by the in-process collaborators."""
    return Services(
        agent_pool=SimulatedAgentPool(),
        progress_tracker=ProgressTracker(),
        context_manager=SessionContextManager(),
        intelligent_router=PlanRouter(),
    )


def create_router(
    services: Optional[Services] = None,
    classifier: Optional[VibeClassifier] = None,
) -> CommandRouter:
    """Build a router over every built-in command."""
    Config.validate()
    classifier = classifier or load_classifier(Config.RULES_FILE)
    registry = CommandRegistry(default_commands(classifier=classifier))
    return CommandRouter(registry, services or default_services())
