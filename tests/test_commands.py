"""
Tests for the canned and delegating commands
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from vibe_builder.commands import (
    AddFeatureCommand,
    DeployCommand,
    FixBrokenCommand,
    ImproveDesignCommand,
    IntelligenceDashboardCommand,
    OptimizeTokensCommand,
    ShowProgressCommand,
    StartOverCommand,
    TestCommand,
    default_commands,
)
from vibe_builder.commands.deploy import DEPLOYMENT_URL
from vibe_builder.core import Services, SimulatedAgentPool
from vibe_builder.errors import InvalidInputError, MissingDependencyError
from vibe_builder.models import ResultStatus


class TestCommandBase:
    def test_triggers_end_with_own_name(self):
        assert DeployCommand().triggers == ["/deploy-when-ready", "/go-live", "/launch", "/deploy"]
        assert StartOverCommand().triggers == ["/start-over-simpler", "/start-over", "/reset", "/fresh-start"]

    def test_matches(self):
        command = DeployCommand()
        assert command.matches("/GO-LIVE")
        assert command.matches("launch")
        assert not command.matches("/deploy-later")

    def test_default_commands(self):
        names = [command.name for command in default_commands()]
        assert names == [
            "build-app",
            "fix-broken",
            "improve-design",
            "deploy",
            "show-progress",
            "add-feature",
            "test",
            "start-over",
            "intelligence-dashboard",
            "optimize-tokens",
        ]

    def test_to_dict(self):
        data = ShowProgressCommand().to_dict()
        assert data["name"] == "show-progress"
        assert data["required_services"] == ["progress_tracker"]

    @pytest.mark.asyncio
    async def test_non_string_input_rejected(self):
        with pytest.raises(InvalidInputError):
            await FixBrokenCommand().execute(42)

    @pytest.mark.asyncio
    async def test_empty_input_allowed(self, services):
        result = await DeployCommand().execute("", {}, services)
        assert result.success


class TestDelegatingCommands:
    """Commands that hand work to one specialist"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("command, agent_id, task_type", [
        (DeployCommand(), "deployment-specialist", "cloud-deployment"),
        (TestCommand(), "testing-specialist", "comprehensive-testing"),
        (OptimizeTokensCommand(), "token-optimizer", "token-optimization"),
        (ImproveDesignCommand(), "frontend-specialist", "make-it-look-better"),
    ])
    async def test_delegates_to_specialist(self, services, agent_pool, command, agent_id, task_type):
        context = {"session_id": "s1"}
        result = await command.execute("please", context, services)

        assert result.success
        assert agent_pool.calls == [{
            "agent_id": agent_id,
            "command": {"type": task_type, "input": "please", "context": context},
            "context": context,
        }]
        assert result["result"]["agent"] == agent_id

    @pytest.mark.asyncio
    async def test_deploy_payload(self, services):
        result = await DeployCommand().execute("", {}, services)

        assert result.message == "Your app has been deployed successfully!"
        assert result["deployment_url"] == DEPLOYMENT_URL
        assert len(result["features"]) == 4

    @pytest.mark.asyncio
    async def test_test_payload(self, services):
        result = await TestCommand().execute("", {}, services)
        assert result["test_results"]["passed"] == 45
        assert result["test_results"]["coverage"] == "87%"

    @pytest.mark.asyncio
    async def test_optimize_payload(self, services):
        result = await OptimizeTokensCommand().execute("", {}, services)
        assert result["optimization"]["tokens_reduced"] == "61%"

    @pytest.mark.asyncio
    async def test_improve_design_recommends_patterns(self, services):
        result = await ImproveDesignCommand().execute("make it Fast on Mobile", {}, services)
        assert result["recommended_patterns"] == ["Responsive Design", "Performance"]
        assert len(result["improvements"]) == 4

    @pytest.mark.asyncio
    async def test_unsuccessful_specialist_is_partial(self, services, make_agent_pool):
        services.agent_pool = make_agent_pool(unsuccessful=["deployment-specialist"])
        result = await DeployCommand().execute("", {}, services)

        assert result.status == ResultStatus.PARTIAL_SUCCESS
        assert result.success is False
        assert result["deployment_url"] == DEPLOYMENT_URL

    @pytest.mark.asyncio
    async def test_specialist_error_propagates(self, services):
        pool = MagicMock()
        pool.execute_with_agent = AsyncMock(side_effect=ConnectionError("pool offline"))
        services.agent_pool = pool

        with pytest.raises(ConnectionError):
            await TestCommand().execute("", {}, services)

    @pytest.mark.asyncio
    async def test_missing_agent_pool(self):
        with pytest.raises(MissingDependencyError) as exc_info:
            await DeployCommand().execute("", {}, Services())
        assert exc_info.value.service == "agent_pool"

    @pytest.mark.asyncio
    async def test_with_simulated_pool(self):
        pool = SimulatedAgentPool()
        result = await DeployCommand().execute("", {}, Services(agent_pool=pool))

        assert result.success
        assert result["result"]["message"] == "Deployment configuration created successfully"
        assert pool.get_agent_performance("deployment-specialist")["total_executions"] == 1


class TestCannedCommands:
    @pytest.mark.asyncio
    async def test_fix_broken_needs_nothing(self):
        result = await FixBrokenCommand().execute("it crashes", {}, Services())

        assert result.success
        assert len(result["issues_fixed"]) == 3
        assert result["next_steps"] == ["Test the application", "Deploy updates"]

    @pytest.mark.asyncio
    async def test_add_feature(self):
        result = await AddFeatureCommand().execute("add login", {}, Services())
        assert result["feature"] == "User Authentication System"
        assert len(result["implementation"]) == 4

    @pytest.mark.asyncio
    async def test_show_progress(self, services, tracker):
        tracker.start_operation("running")
        for i in range(7):
            tracker.start_operation(f"done-{i}")
            tracker.complete_operation(f"done-{i}")

        result = await ShowProgressCommand().execute("", {}, services)

        assert [op["id"] for op in result["active_operations"]] == ["running"]
        assert len(result["recent_completed"]) == 5
        assert result["statistics"]["total_operations"] == 8
        assert result["overall_progress"] == "75% complete"

    @pytest.mark.asyncio
    async def test_show_progress_requires_tracker(self):
        with pytest.raises(MissingDependencyError):
            await ShowProgressCommand().execute("", {}, Services())

    @pytest.mark.asyncio
    async def test_start_over_resets_session(self, services, context_manager):
        context_manager.get_session("s1")
        result = await StartOverCommand().execute("", {"session_id": "s1"}, services)

        assert result["session_reset"] is True
        assert context_manager.sessions == {}
        assert len(result["reset_items"]) == 4

    @pytest.mark.asyncio
    async def test_start_over_without_session(self, services):
        context_manager = MagicMock()
        services.context_manager = context_manager

        result = await StartOverCommand().execute("", {}, services)

        assert result.success
        assert result["session_reset"] is False
        context_manager.reset.assert_not_called()

    @pytest.mark.asyncio
    async def test_dashboard_placeholders(self):
        result = await IntelligenceDashboardCommand().execute("", {}, Services())

        metrics = result["metrics"]
        assert metrics["routing"] == {"accuracy": "90%"}
        assert metrics["token_usage"] == {"efficiency": "65%"}
        assert metrics["error_handling"] == {"status": "healthy"}
        assert metrics["system_health"] == "Excellent"

    @pytest.mark.asyncio
    async def test_dashboard_uses_sources(self):
        routing_metrics = MagicMock()
        routing_metrics.export_metrics.return_value = {"accuracy": "97%"}
        error_handler = MagicMock()
        error_handler.get_health_status.return_value = {"status": "degraded"}

        services = Services(routing_metrics=routing_metrics, error_handler=error_handler)
        result = await IntelligenceDashboardCommand().execute("", {}, services)

        assert result["metrics"]["routing"] == {"accuracy": "97%"}
        assert result["metrics"]["error_handling"] == {"status": "degraded"}
        assert result["metrics"]["token_usage"] == {"efficiency": "65%"}
