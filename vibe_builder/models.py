"""
Data models for Vibe Builder

Transient records produced while a command runs: the vibe analysis,
the application plan derived from it, specialist descriptors and the
command result returned to the dispatcher.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ResultStatus(str, Enum):
    """Outcome of a command execution"""
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    FAILURE = "failure"


@dataclass(frozen=True)
class VibeAnalysis:
    """Classification of one free-text vibe."""
    raw_input: str
    app_type: str
    features: List[str]
    complexity: str
    urgency: str
    style: str

    def has_feature(self, feature: str) -> bool:
        return feature in self.features

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_input": self.raw_input,
            "app_type": self.app_type,
            "features": list(self.features),
            "complexity": self.complexity,
            "urgency": self.urgency,
            "style": self.style,
        }


@dataclass(frozen=True)
class Specialist:
    """
    Descriptor of an external worker role.

    `agent_id` must match the `agent` field of the result the agent pool
    returns for it, since integration looks results up by that id.
    """
    agent_id: str
    name: str
    task: str
    requirements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "agent_id": self.agent_id,
            "name": self.name,
            "task": self.task,
            "requirements": list(self.requirements),
        }


@dataclass(frozen=True)
class TechStack:
    """Recommended technologies for a plan"""
    frontend: str = "React"
    backend: Optional[str] = None
    database: Optional[str] = None
    styling: str = "CSS3/Responsive"
    deployment: str = "Static Hosting"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frontend": self.frontend,
            "backend": self.backend,
            "database": self.database,
            "styling": self.styling,
            "deployment": self.deployment,
        }


@dataclass(frozen=True)
class Architecture:
    pattern: str
    layers: List[str]
    scalability: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern,
            "layers": list(self.layers),
            "scalability": self.scalability,
        }


@dataclass(frozen=True)
class ApplicationPlan:
    """Plan derived from a VibeAnalysis, alive for one execute call."""
    app_type: str
    required_specialists: List[Specialist]
    tech_stack: TechStack
    features: List[str]
    timeline: str
    architecture: Architecture

    def to_dict(self) -> Dict[str, Any]:
        return {
            "app_type": self.app_type,
            "required_specialists": [s.to_dict() for s in self.required_specialists],
            "tech_stack": self.tech_stack.to_dict(),
            "features": list(self.features),
            "timeline": self.timeline,
            "architecture": self.architecture.to_dict(),
        }


@dataclass
class CommandResult:
    """
    Result record returned by every command.

    `payload` holds the command-specific fields (deployment_url,
    test_results, metrics, ...). `success` is derived from `status`.
    """
    status: ResultStatus
    message: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "status": self.status.value,
            "message": self.message,
            **self.payload,
        }

    @classmethod
    def ok(cls, message: str, **payload: Any) -> "CommandResult":
        return cls(status=ResultStatus.SUCCESS, message=message, payload=payload)

    @classmethod
    def partial(cls, message: str, **payload: Any) -> "CommandResult":
        return cls(status=ResultStatus.PARTIAL_SUCCESS, message=message, payload=payload)

    @classmethod
    def failed(cls, message: str, **payload: Any) -> "CommandResult":
        return cls(status=ResultStatus.FAILURE, message=message, payload=payload)
