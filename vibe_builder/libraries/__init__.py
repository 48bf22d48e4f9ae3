"""
Static lookup libraries used by the frontend commands
"""

from .component_library import Component, ComponentLibrary
from .design_patterns import DesignPattern, DesignPatterns

__all__ = [
    "Component",
    "ComponentLibrary",
    "DesignPattern",
    "DesignPatterns",
]
