"""
Improve Design Command - Make the app look better

Delegates to the frontend specialist and attaches the design patterns
that fit the request.
"""

from typing import Any, Dict, Optional

from ..libraries import DesignPatterns
from .base import DelegatingCommand


class ImproveDesignCommand(DelegatingCommand):
    name = "improve-design"
    description = "Improve the visual design and user experience"
    aliases = ("/make-it-look-better", "/improve-ui", "/design-upgrade")

    agent_id = "frontend-specialist"
    task_type = "make-it-look-better"
    success_message = "Your app design has been improved!"
    partial_message = "Design changes were only partly applied; see the specialist result."

    def __init__(self, design_patterns: Optional[DesignPatterns] = None):
        self.design_patterns = design_patterns or DesignPatterns()

    def build_payload(self, user_input: str, result: Dict[str, Any]) -> Dict[str, Any]:
        recommended = self.design_patterns.get_recommendations(user_input.lower())
        return {
            "improvements": [
                "Applied modern color scheme",
                "Improved typography and spacing",
                "Enhanced mobile responsiveness",
                "Added smooth animations",
            ],
            "recommended_patterns": [pattern.name for pattern in recommended],
        }
