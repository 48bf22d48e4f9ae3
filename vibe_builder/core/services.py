"""
Services - Collaborators available to commands

Commands receive a Services container on every execute call. Each
command declares which collaborators it requires and which it can use
when present; the dispatcher checks the requirements when it is built,
and commands check them again before doing any work.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..errors import MissingDependencyError


@runtime_checkable
class AgentPoolLike(Protocol):
    async def execute_with_agent(
        self, agent_id: str, command: Dict[str, Any], context: Dict[str, Any]
    ) -> Dict[str, Any]:
        ...


@runtime_checkable
class ProgressTrackerLike(Protocol):
    def start_operation(self, operation_id: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...

    def update_progress(self, operation_id: str, step: int, message: str) -> None:
        ...

    def complete_operation(self, operation_id: str, result: Optional[Dict[str, Any]] = None) -> None:
        ...

    def fail_operation(self, operation_id: str, error: Any) -> None:
        ...

    def get_active_operations(self) -> List[Dict[str, Any]]:
        ...

    def get_completed_operations(self, limit: int = 10) -> List[Dict[str, Any]]:
        ...

    def get_stats(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class ContextManagerLike(Protocol):
    def add_command(self, session_id: str, command: str, status: str) -> None:
        ...

    def reset(self) -> None:
        ...


@runtime_checkable
class IntelligentRouterLike(Protocol):
    async def determine_optimal_route(self, app_plan: Any, context: Dict[str, Any]) -> Dict[str, Any]:
        ...


@runtime_checkable
class RoutingMetricsLike(Protocol):
    def export_metrics(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class TokenBudgetManagerLike(Protocol):
    def get_budget_status(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class ErrorHandlerLike(Protocol):
    def get_health_status(self) -> Dict[str, Any]:
        ...


@dataclass
class Services:
    """
    Collaborator container passed into every command.

    All members are optional here; requirements are declared per command.
    """
    agent_pool: Optional[AgentPoolLike] = None
    progress_tracker: Optional[ProgressTrackerLike] = None
    context_manager: Optional[ContextManagerLike] = None
    intelligent_router: Optional[IntelligentRouterLike] = None
    routing_metrics: Optional[RoutingMetricsLike] = None
    token_budget_manager: Optional[TokenBudgetManagerLike] = None
    error_handler: Optional[ErrorHandlerLike] = None

    @classmethod
    def names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def has(self, name: str) -> bool:
        return getattr(self, name, None) is not None

    def require(self, command: str, name: str) -> Any:
        """
        Return a collaborator or raise MissingDependencyError.

        Args:
            command: Name of the command asking (for the error message)
            name: Services attribute name
        """
        if name not in self.names():
            raise ValueError(f"Unknown service: {name}")
        service = getattr(self, name)
        if service is None:
            raise MissingDependencyError(command, name)
        return service

    def missing(self, names: List[str]) -> List[str]:
        return [name for name in names if not self.has(name)]

    def available(self) -> List[str]:
        return [name for name in self.names() if self.has(name)]
