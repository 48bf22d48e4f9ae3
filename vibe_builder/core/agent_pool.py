"""
Agent Pool - Simulated specialist agents

Stand-in for the external agent pool. Every specialist answers with a
canned result tagged with its agent id; no real work is performed.
Per-agent execution metrics are kept so the dashboard has something to
report.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import VibeBuilderError
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AgentProfile:
    """A simulated specialist"""
    agent_id: str
    message: str
    capabilities: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)


AGENT_PROFILES = [
    AgentProfile(
        agent_id="frontend-specialist",
        message="Frontend components created successfully",
        capabilities=["ui-design", "component-creation", "responsive-design",
                      "user-experience", "visual-design", "accessibility"],
        tools=["react", "css", "html", "figma", "design-systems"],
    ),
    AgentProfile(
        agent_id="backend-specialist",
        message="Backend API created successfully",
        capabilities=["api-development", "authentication", "business-logic", "integrations"],
        tools=["node", "express", "jwt"],
    ),
    AgentProfile(
        agent_id="database-specialist",
        message="Database system created successfully",
        capabilities=["data-modeling", "schema-design", "query-optimization"],
        tools=["sql", "json-storage"],
    ),
    AgentProfile(
        agent_id="deployment-specialist",
        message="Deployment configuration created successfully",
        capabilities=["cloud-deployment", "ci-cd", "monitoring"],
        tools=["docker", "static-hosting", "cdn"],
    ),
    AgentProfile(
        agent_id="testing-specialist",
        message="Testing framework created successfully",
        capabilities=["unit-testing", "integration-testing", "quality-validation"],
        tools=["jest", "playwright"],
    ),
    AgentProfile(
        agent_id="project-manager",
        message="Project plan created! Your app development is organized and ready to proceed.",
        capabilities=["project-planning", "timeline-management", "coordination"],
        tools=["roadmaps", "checklists"],
    ),
    AgentProfile(
        agent_id="token-optimizer",
        message="Token optimization complete!",
        capabilities=["context-compression", "budget-tracking"],
        tools=["context-filters"],
    ),
]


class SimulatedAgentPool:
    """
    Agent pool with canned specialists.

    Results have the shape the build pipeline expects:
        {"success": True, "agent": <agent_id>, "message": ..., "result": {...},
         "execution_time": <ms>}
    """

    def __init__(self, profiles: Optional[List[AgentProfile]] = None, history_limit: int = 100):
        self.agents: Dict[str, AgentProfile] = {}
        self.metrics: Dict[str, Dict[str, Any]] = {}
        self.history_limit = history_limit
        self.history: List[Dict[str, Any]] = []

        for profile in profiles or AGENT_PROFILES:
            self.agents[profile.agent_id] = profile
            self.metrics[profile.agent_id] = {
                "total_executions": 0,
                "successful_executions": 0,
                "average_execution_time": 0.0,
            }

    def get_agent(self, agent_id: str) -> AgentProfile:
        agent = self.agents.get(agent_id)
        if agent is None:
            raise VibeBuilderError(f"Agent not found: {agent_id}")
        return agent

    def list_agents(self) -> List[str]:
        return list(self.agents.keys())

    async def execute_with_agent(
        self,
        agent_id: str,
        command: Dict[str, Any],
        context: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Run a command with one specialist.

        Args:
            agent_id: Specialist identifier
            command: {"type": ..., "input" or "requirements": ..., "context": ...}
            context: Caller context

        Returns:
            Specialist result tagged with the agent id
        """
        agent = self.get_agent(agent_id)
        start = time.perf_counter()
        task_type = command.get("type", "unknown")

        logger.info(f"{agent_id} processing: {task_type}")

        result = {
            "success": True,
            "agent": agent.agent_id,
            "message": agent.message,
            "result": {
                "task": task_type,
                "requirements": list(command.get("requirements", [])),
                "capabilities_used": list(agent.capabilities),
                "tools": list(agent.tools),
            },
        }

        execution_time = (time.perf_counter() - start) * 1000
        result["execution_time"] = execution_time
        self._record(agent_id, execution_time, success=True)
        self.history.append({"agent": agent_id, "type": task_type})
        if len(self.history) > self.history_limit:
            self.history = self.history[-self.history_limit:]

        return result

    def _record(self, agent_id: str, execution_time: float, success: bool) -> None:
        metrics = self.metrics[agent_id]
        metrics["total_executions"] += 1
        if success:
            metrics["successful_executions"] += 1
        total = metrics["total_executions"]
        metrics["average_execution_time"] = (
            metrics["average_execution_time"] * (total - 1) + execution_time
        ) / total

    def get_agent_performance(self, agent_id: str) -> Dict[str, Any]:
        metrics = self.metrics.get(agent_id)
        if metrics is None:
            return {"available": False}

        total = metrics["total_executions"]
        return {
            "available": True,
            "total_executions": total,
            "success_rate": metrics["successful_executions"] / total if total else 0.0,
            "average_execution_time": metrics["average_execution_time"],
        }
