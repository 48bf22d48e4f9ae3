"""
Core modules for Vibe Builder

- classifier: keyword rule tables for vibes
- planner: application plan and specialist team
- registry / router: command lookup and dispatch
- services: collaborator container
- progress_tracker, agent_pool, context_manager, plan_router:
  in-process collaborators
"""

from .agent_pool import SimulatedAgentPool
from .classifier import KeywordRule, RuleTable, VibeClassifier, load_classifier
from .context_manager import SessionContextManager
from .plan_router import PlanRouter
from .planner import determine_required_specialists, plan_application
from .progress_tracker import ProgressTracker
from .registry import CommandRegistry
from .router import CommandRouter
from .services import Services

__all__ = [
    "SimulatedAgentPool",
    "KeywordRule",
    "RuleTable",
    "VibeClassifier",
    "load_classifier",
    "SessionContextManager",
    "PlanRouter",
    "determine_required_specialists",
    "plan_application",
    "ProgressTracker",
    "CommandRegistry",
    "CommandRouter",
    "Services",
]
