"""
Application Planner

Turns a VibeAnalysis into an ApplicationPlan:
- which specialists are needed, in execution order
- a recommended tech stack
- a timeline estimate from the complexity
- a layered architecture description

Everything here is deterministic; the same analysis always yields the
same plan.
"""

from typing import List

from ..models import ApplicationPlan, Architecture, Specialist, TechStack, VibeAnalysis

TIMELINES = {
    "low": "2-4 hours",
    "medium": "4-8 hours",
    "high": "8-16 hours",
}


def determine_required_specialists(vibe: VibeAnalysis) -> List[Specialist]:
    """
    Select the specialist team for a vibe.

    Project manager and frontend always lead; backend joins for
    api-backend or user-authentication, database for data-storage;
    testing and deployment always close the list.
    """
    specialists = [
        Specialist(
            agent_id="project-manager",
            name="Project Manager",
            task="project-planning",
            requirements=["overall coordination", "timeline management"],
        ),
        Specialist(
            agent_id="frontend-specialist",
            name="Frontend Developer",
            task="ui-development",
            requirements=["user interface", "responsive design", vibe.style],
        ),
    ]

    if vibe.has_feature("api-backend") or vibe.has_feature("user-authentication"):
        specialists.append(Specialist(
            agent_id="backend-specialist",
            name="Backend Developer",
            task="backend-development",
            requirements=["api development", "authentication", "business logic"],
        ))

    if vibe.has_feature("data-storage"):
        specialists.append(Specialist(
            agent_id="database-specialist",
            name="Database Developer",
            task="database-design",
            requirements=["data modeling", "storage optimization"],
        ))

    specialists.append(Specialist(
        agent_id="testing-specialist",
        name="QA Tester",
        task="quality-assurance",
        requirements=["comprehensive testing", "quality validation"],
    ))
    specialists.append(Specialist(
        agent_id="deployment-specialist",
        name="DevOps Engineer",
        task="deployment",
        requirements=["cloud deployment", "performance optimization"],
    ))

    return specialists


def recommend_tech_stack(vibe: VibeAnalysis) -> TechStack:
    return TechStack(
        backend="Node.js/Express" if vibe.has_feature("api-backend") else None,
        database="JSON/File Storage" if vibe.has_feature("data-storage") else None,
    )


def estimate_timeline(complexity: str) -> str:
    """Unknown complexity levels get the medium estimate."""
    return TIMELINES.get(complexity, TIMELINES["medium"])


def design_architecture(vibe: VibeAnalysis) -> Architecture:
    layers = ["Presentation Layer (UI Components)"]
    if vibe.has_feature("api-backend"):
        layers.append("API Layer (Backend Services)")
    if vibe.has_feature("data-storage"):
        layers.append("Data Layer (Storage)")

    return Architecture(
        pattern="Component-based architecture",
        layers=layers,
        scalability="Microservices-ready" if vibe.complexity == "high" else "Monolithic",
    )


def plan_application(vibe: VibeAnalysis) -> ApplicationPlan:
    """Build the full application plan for a vibe."""
    return ApplicationPlan(
        app_type=vibe.app_type,
        required_specialists=determine_required_specialists(vibe),
        tech_stack=recommend_tech_stack(vibe),
        features=list(vibe.features),
        timeline=estimate_timeline(vibe.complexity),
        architecture=design_architecture(vibe),
    )
