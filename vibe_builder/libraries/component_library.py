"""
Component Library

UI component templates for the frontend specialist. Built once at
construction and read-only afterwards.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Component:
    """A UI component template"""
    name: str
    description: str
    variants: List[str]
    code: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "variants": list(self.variants),
            "code": self.code,
            "tags": list(self.tags),
        }


class ComponentLibrary:
    """
    Keyed collection of UI components.

    Lookups by key return None for unknown keys.
    """

    def __init__(self):
        self.components: Dict[str, Component] = {}
        self._initialize_components()

    def _initialize_components(self) -> None:
        self.components["button"] = Component(
            name="Button",
            description="Interactive button component",
            variants=["primary", "secondary", "outline"],
            code='<button class="btn btn-primary">Click me</button>',
            tags=["interactive", "action", "input"],
        )
        self.components["form"] = Component(
            name="Form",
            description="Form input component",
            variants=["text", "email", "password"],
            code='<form><input type="text" placeholder="Enter text"></form>',
            tags=["form", "input"],
        )
        self.components["card"] = Component(
            name="Card",
            description="Content card component",
            variants=["basic", "elevated", "outlined"],
            code='<div class="card"><div class="card-content">Content here</div></div>',
            tags=["content", "layout"],
        )
        self.components["navigation"] = Component(
            name="Navigation",
            description="Navigation menu component",
            variants=["horizontal", "vertical", "sidebar"],
            code='<nav><ul><li><a href="#">Home</a></li></ul></nav>',
            tags=["navigation", "menu", "layout"],
        )

    def get(self, key: str) -> Optional[Component]:
        return self.components.get(key)

    def get_all(self) -> List[Component]:
        return list(self.components.values())

    def keys(self) -> List[str]:
        return list(self.components.keys())

    def find_by_category(self, category: str) -> List[Component]:
        """
        Components whose tags contain the category, or whose description
        mentions it. Case-insensitive; results keep insertion order.
        """
        category_lower = category.lower()
        return [
            component for component in self.get_all()
            if category_lower in (tag.lower() for tag in component.tags)
            or category_lower in component.description.lower()
        ]
