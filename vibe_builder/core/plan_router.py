"""
Plan Router

Default intelligent router: the specialist route for an application plan
is the plan's own specialist list, in the order it was planned.
"""

from typing import Any, Dict

from ..models import ApplicationPlan


class PlanRouter:
    async def determine_optimal_route(self, app_plan: ApplicationPlan, context: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "specialists": list(app_plan.required_specialists),
            "strategy": "sequential",
        }
