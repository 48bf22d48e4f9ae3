"""
Vibe Builder - alias-triggered commands that turn an app "vibe" into a
specialist build plan.
"""

__version__ = "0.1.0"

from .errors import (
    ConfigurationError,
    InvalidInputError,
    MissingDependencyError,
    SpecialistExecutionError,
    UnknownCommandError,
    VibeBuilderError,
)
from .models import ApplicationPlan, CommandResult, ResultStatus, Specialist, VibeAnalysis

__all__ = [
    "__version__",
    "ConfigurationError",
    "InvalidInputError",
    "MissingDependencyError",
    "SpecialistExecutionError",
    "UnknownCommandError",
    "VibeBuilderError",
    "ApplicationPlan",
    "CommandResult",
    "ResultStatus",
    "Specialist",
    "VibeAnalysis",
]
