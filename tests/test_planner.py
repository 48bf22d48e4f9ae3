"""
Tests for the application planner
"""

from vibe_builder.core.classifier import VibeClassifier
from vibe_builder.core.planner import (
    design_architecture,
    determine_required_specialists,
    estimate_timeline,
    plan_application,
    recommend_tech_stack,
)
from vibe_builder.models import VibeAnalysis


def make_vibe(features, complexity="medium", style="professional", app_type="general-app"):
    return VibeAnalysis(
        raw_input="",
        app_type=app_type,
        features=features,
        complexity=complexity,
        urgency="medium",
        style=style,
    )


class TestRequiredSpecialists:
    """Team selection and ordering"""

    def test_basic_team(self):
        specialists = determine_required_specialists(make_vibe(["basic-functionality"]))
        assert [s.agent_id for s in specialists] == [
            "project-manager",
            "frontend-specialist",
            "testing-specialist",
            "deployment-specialist",
        ]

    def test_api_backend_adds_backend(self):
        specialists = determine_required_specialists(make_vibe(["api-backend"]))
        assert len(specialists) == 5
        assert specialists[2].agent_id == "backend-specialist"

    def test_authentication_adds_backend(self):
        specialists = determine_required_specialists(make_vibe(["user-authentication"]))
        assert "backend-specialist" in [s.agent_id for s in specialists]

    def test_full_team_order(self):
        specialists = determine_required_specialists(
            make_vibe(["user-authentication", "data-storage", "api-backend"])
        )
        assert [s.agent_id for s in specialists] == [
            "project-manager",
            "frontend-specialist",
            "backend-specialist",
            "database-specialist",
            "testing-specialist",
            "deployment-specialist",
        ]

    def test_backend_only_once(self):
        specialists = determine_required_specialists(make_vibe(["api-backend", "user-authentication"]))
        assert [s.agent_id for s in specialists].count("backend-specialist") == 1

    def test_frontend_carries_style(self):
        specialists = determine_required_specialists(make_vibe(["basic-functionality"], style="playful"))
        frontend = specialists[1]
        assert frontend.task == "ui-development"
        assert frontend.requirements == ["user interface", "responsive design", "playful"]


class TestPlanDetails:
    def test_tech_stack_defaults(self):
        stack = recommend_tech_stack(make_vibe(["basic-functionality"]))
        assert stack.frontend == "React"
        assert stack.backend is None
        assert stack.database is None
        assert stack.deployment == "Static Hosting"

    def test_tech_stack_with_backend_and_storage(self):
        stack = recommend_tech_stack(make_vibe(["api-backend", "data-storage"]))
        assert stack.backend == "Node.js/Express"
        assert stack.database == "JSON/File Storage"

    def test_timeline(self):
        assert estimate_timeline("low") == "2-4 hours"
        assert estimate_timeline("high") == "8-16 hours"
        assert estimate_timeline("unknown") == "4-8 hours"

    def test_architecture(self):
        architecture = design_architecture(make_vibe(["api-backend", "data-storage"], complexity="high"))
        assert len(architecture.layers) == 3
        assert architecture.scalability == "Microservices-ready"

        simple = design_architecture(make_vibe(["basic-functionality"], complexity="low"))
        assert simple.layers == ["Presentation Layer (UI Components)"]
        assert simple.scalability == "Monolithic"

    def test_plan_from_classifier(self):
        vibe = VibeClassifier().analyze("a blog with user login")
        plan = plan_application(vibe)

        assert plan.app_type == "blog"
        assert plan.features == ["user-authentication"]
        assert len(plan.required_specialists) == 5
        assert plan.to_dict()["tech_stack"]["frontend"] == "React"

    def test_plan_is_deterministic(self):
        vibe = make_vibe(["data-storage"])
        assert plan_application(vibe) == plan_application(vibe)
