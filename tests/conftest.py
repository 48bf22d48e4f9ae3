"""
Pytest configuration and fixtures for Vibe Builder tests
"""

import pytest
from typing import Any, Dict, List, Optional

from vibe_builder.core import (
    PlanRouter,
    ProgressTracker,
    Services,
    SessionContextManager,
)


class RecordingAgentPool:
    """Agent pool double that records every call and can fail on demand"""

    def __init__(self, fail_on: Optional[Dict[str, BaseException]] = None, unsuccessful: Optional[List[str]] = None):
        self.calls: List[Dict[str, Any]] = []
        self.fail_on = fail_on or {}
        self.unsuccessful = unsuccessful or []

    async def execute_with_agent(self, agent_id, command, context):
        self.calls.append({"agent_id": agent_id, "command": command, "context": context})
        if agent_id in self.fail_on:
            raise self.fail_on[agent_id]
        return {
            "success": agent_id not in self.unsuccessful,
            "agent": agent_id,
            "result": {"built_by": agent_id, "task": command.get("type")},
            "execution_time": 5,
        }

    @property
    def agent_ids(self) -> List[str]:
        return [call["agent_id"] for call in self.calls]


class StepRecorder:
    """Collects every progress update emitted by a tracker"""

    def __init__(self, tracker: ProgressTracker):
        self.updates: List[Dict[str, Any]] = []
        tracker.on_progress("all", lambda update, operation_id: self.updates.append(update))

    @property
    def running_steps(self) -> List[int]:
        return [u["step"] for u in self.updates if u["status"] == "running"]

    @property
    def statuses(self) -> List[str]:
        return [u["status"] for u in self.updates]


@pytest.fixture
def make_agent_pool():
    """Factory for agent pools with failing or unsuccessful specialists"""
    return RecordingAgentPool


@pytest.fixture
def agent_pool():
    return RecordingAgentPool()


@pytest.fixture
def tracker():
    return ProgressTracker(completed_history=100, detail_limit=20)


@pytest.fixture
def step_recorder(tracker):
    return StepRecorder(tracker)


@pytest.fixture
def context_manager():
    return SessionContextManager()


@pytest.fixture
def services(agent_pool, tracker, context_manager):
    return Services(
        agent_pool=agent_pool,
        progress_tracker=tracker,
        context_manager=context_manager,
        intelligent_router=PlanRouter(),
    )
