"""
Commands - alias-triggered units of behavior

default_commands() returns one instance of every built-in command in the
order the dispatcher checks them.
"""

from typing import List, Optional

from ..core.classifier import VibeClassifier
from .add_feature import AddFeatureCommand
from .base import Command, DelegatingCommand
from .build_app import BuildAppCommand
from .deploy import DeployCommand
from .fix_broken import FixBrokenCommand
from .improve_design import ImproveDesignCommand
from .intelligence_dashboard import IntelligenceDashboardCommand
from .optimize_tokens import OptimizeTokensCommand
from .show_progress import ShowProgressCommand
from .start_over import StartOverCommand
from .testing import TestCommand


def default_commands(classifier: Optional[VibeClassifier] = None) -> List[Command]:
    return [
        BuildAppCommand(classifier=classifier),
        FixBrokenCommand(),
        ImproveDesignCommand(),
        DeployCommand(),
        ShowProgressCommand(),
        AddFeatureCommand(),
        TestCommand(),
        StartOverCommand(),
        IntelligenceDashboardCommand(),
        OptimizeTokensCommand(),
    ]


__all__ = [
    "Command",
    "DelegatingCommand",
    "AddFeatureCommand",
    "BuildAppCommand",
    "DeployCommand",
    "FixBrokenCommand",
    "ImproveDesignCommand",
    "IntelligenceDashboardCommand",
    "OptimizeTokensCommand",
    "ShowProgressCommand",
    "StartOverCommand",
    "TestCommand",
    "default_commands",
]
