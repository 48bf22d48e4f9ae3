"""
Design Patterns Library

Frontend design patterns and best practices, with simple keyword-based
recommendations.
"""

from dataclasses import dataclass, field
from textwrap import dedent
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class DesignPattern:
    """A frontend design pattern"""
    name: str
    description: str
    principles: List[str]
    code: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "principles": list(self.principles),
            "code": self.code,
            "tags": list(self.tags),
        }


# (pattern key, context keywords) checked in this order
RECOMMENDATION_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("responsive", ("mobile",)),
    ("accessibility", ("accessible",)),
    ("performance", ("fast", "performance")),
)


class DesignPatterns:
    def __init__(self):
        self.patterns: Dict[str, DesignPattern] = {}
        self._initialize_patterns()

    def _initialize_patterns(self) -> None:
        self.patterns["responsive"] = DesignPattern(
            name="Responsive Design",
            description="Mobile-first responsive design patterns",
            principles=["Mobile-first", "Flexible grids", "Media queries"],
            code=dedent("""\
                .container { max-width: 1200px; margin: 0 auto; }
                @media (max-width: 768px) { .container { padding: 1rem; } }
            """),
            tags=["layout", "mobile"],
        )
        self.patterns["accessibility"] = DesignPattern(
            name="Accessibility",
            description="WCAG compliance patterns",
            principles=["Semantic HTML", "Keyboard navigation", "Screen readers"],
            code=dedent("""\
                <button aria-label="Close dialog" tabindex="0">×</button>
                <img src="image.jpg" alt="Descriptive text">
            """),
            tags=["a11y", "wcag"],
        )
        self.patterns["performance"] = DesignPattern(
            name="Performance",
            description="Frontend performance optimization patterns",
            principles=["Lazy loading", "Code splitting", "Caching"],
            code=dedent("""\
                <img loading="lazy" src="image.jpg">
                <link rel="preload" href="critical.css" as="style">
            """),
            tags=["speed", "loading"],
        )

    def get(self, key: str) -> Optional[DesignPattern]:
        return self.patterns.get(key)

    def get_all(self) -> List[DesignPattern]:
        return list(self.patterns.values())

    def keys(self) -> List[str]:
        return list(self.patterns.keys())

    def get_recommendations(self, context: str) -> List[DesignPattern]:
        """
        Patterns whose keywords appear in the context string.

        Matching is a plain substring test, so "Mobile" does not match
        "mobile". Each rule names a different pattern, so results never
        repeat.
        """
        recommendations = []
        for key, keywords in RECOMMENDATION_RULES:
            if any(keyword in context for keyword in keywords):
                pattern = self.get(key)
                if pattern is not None:
                    recommendations.append(pattern)
        return recommendations
