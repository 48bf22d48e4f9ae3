"""
Vibe Classifier - Keyword rule tables

Turns a free-text vibe into a VibeAnalysis using ordered rule tables:
- app type, complexity, urgency, style: first matching rule wins
- features: every matching rule contributes a tag

Rule order is data. Earlier rules take priority, so "a blog with a shop"
is a blog because the blog rule is declared before the ecommerce rule.
Matching is case-insensitive substring matching against the raw input.

Rule files are JSON documents validated against RuleDocument before any
table is built from them.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigurationError
from ..models import VibeAnalysis
from ..utils.logger import get_logger

logger = get_logger(__name__)

TableName = Literal["app_type", "features", "complexity", "urgency", "style"]


class KeywordRuleModel(BaseModel):
    """A rule as written in a rule file."""
    label: str = Field(..., description="Label produced when any keyword matches")
    keywords: List[str] = Field(..., min_length=1, description="Substrings to look for")


class RuleTableModel(BaseModel):
    """A rule table as written in a rule file."""
    name: TableName = Field(..., description="Which dimension this table classifies")
    mode: Literal["first", "all"] = Field("first", description="'first' match or 'all' matches")
    default: str = Field(..., description="Label used when no rule matches")
    rules: List[KeywordRuleModel] = Field(default_factory=list, description="Rules in priority order")


class RuleDocument(BaseModel):
    """Top level of a rule file."""
    tables: List[RuleTableModel] = Field(default_factory=list, description="Tables to override")


@dataclass(frozen=True)
class KeywordRule:
    """Maps a group of keywords to one label"""
    label: str
    keywords: Tuple[str, ...]

    def matches(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "keywords": list(self.keywords)}

    @classmethod
    def from_model(cls, model: KeywordRuleModel) -> "KeywordRule":
        return cls(label=model.label, keywords=tuple(k.lower() for k in model.keywords))


@dataclass(frozen=True)
class RuleTable:
    """
    An ordered list of keyword rules with a default label.

    mode "first" returns the label of the first matching rule.
    mode "all" returns the labels of every matching rule in declaration
    order, or a one-element list holding the default when none match.
    """
    name: str
    rules: Tuple[KeywordRule, ...]
    default: str
    mode: Literal["first", "all"] = "first"

    def classify(self, text: str) -> str:
        lowered = text.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                return rule.label
        return self.default

    def classify_all(self, text: str) -> List[str]:
        lowered = text.lower()
        labels = [rule.label for rule in self.rules if rule.matches(lowered)]
        return labels if labels else [self.default]

    @property
    def labels(self) -> List[str]:
        return [rule.label for rule in self.rules] + [self.default]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mode": self.mode,
            "default": self.default,
            "rules": [rule.to_dict() for rule in self.rules],
        }

    @classmethod
    def from_model(cls, model: RuleTableModel) -> "RuleTable":
        return cls(
            name=model.name,
            rules=tuple(KeywordRule.from_model(rule) for rule in model.rules),
            default=model.default,
            mode=model.mode,
        )


def _table(name: str, default: str, rules: List[Tuple[str, Tuple[str, ...]]], mode: str = "first") -> RuleTable:
    return RuleTable(
        name=name,
        rules=tuple(KeywordRule(label=label, keywords=keywords) for label, keywords in rules),
        default=default,
        mode=mode,  # type: ignore[arg-type]
    )


APP_TYPE_RULES = _table("app_type", "general-app", [
    ("todo-app", ("todo", "task")),
    ("blog", ("blog", "post")),
    ("ecommerce", ("shop", "store", "ecommerce")),
    ("chat-app", ("chat", "message")),
    ("dashboard", ("dashboard", "admin")),
    ("portfolio", ("portfolio", "resume")),
])

FEATURE_RULES = _table("features", "basic-functionality", [
    ("user-authentication", ("user", "account", "login")),
    ("data-storage", ("database", "data", "store")),
    ("api-backend", ("api", "backend")),
    ("responsive-design", ("responsive", "mobile")),
    ("real-time-updates", ("real-time", "live")),
], mode="all")

COMPLEXITY_RULES = _table("complexity", "medium", [
    ("high", ("enterprise", "complex", "advanced", "sophisticated", "ai", "machine learning")),
    ("medium", ("features", "dashboard", "admin", "api", "database")),
    ("low", ("simple", "basic", "quick", "minimal")),
])

URGENCY_RULES = _table("urgency", "medium", [
    ("high", ("urgent", "asap", "quickly")),
    ("low", ("when you can", "no rush")),
])

STYLE_RULES = _table("style", "professional", [
    ("modern", ("modern", "sleek")),
    ("professional", ("professional", "business")),
    ("playful", ("fun", "colorful")),
    ("minimal", ("minimal", "clean")),
])


@dataclass(frozen=True)
class VibeClassifier:
    """
    Classifies vibes with one rule table per dimension.

    All methods are pure functions of the input string.
    """
    app_type_rules: RuleTable = APP_TYPE_RULES
    feature_rules: RuleTable = FEATURE_RULES
    complexity_rules: RuleTable = COMPLEXITY_RULES
    urgency_rules: RuleTable = URGENCY_RULES
    style_rules: RuleTable = STYLE_RULES
    source: Optional[str] = field(default=None, compare=False)

    def detect_app_type(self, text: str) -> str:
        return self.app_type_rules.classify(text)

    def extract_features(self, text: str) -> List[str]:
        return self.feature_rules.classify_all(text)

    def assess_complexity(self, text: str) -> str:
        return self.complexity_rules.classify(text)

    def detect_urgency(self, text: str) -> str:
        return self.urgency_rules.classify(text)

    def detect_style(self, text: str) -> str:
        return self.style_rules.classify(text)

    def analyze(self, text: str) -> VibeAnalysis:
        """Run every rule table over the vibe."""
        analysis = VibeAnalysis(
            raw_input=text,
            app_type=self.detect_app_type(text),
            features=self.extract_features(text),
            complexity=self.assess_complexity(text),
            urgency=self.detect_urgency(text),
            style=self.detect_style(text),
        )
        logger.debug(
            f"Vibe classified as {analysis.app_type} "
            f"(features={analysis.features}, complexity={analysis.complexity})"
        )
        return analysis

    def tables(self) -> List[RuleTable]:
        return [
            self.app_type_rules,
            self.feature_rules,
            self.complexity_rules,
            self.urgency_rules,
            self.style_rules,
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {"tables": [table.to_dict() for table in self.tables()]}

    @classmethod
    def from_dict(cls, data: Any, source: Optional[str] = None) -> "VibeClassifier":
        """
        Build a classifier from a rule document.

        Tables missing from the document keep their built-in rules.
        Expected shape: {"tables": [{"name": "app_type", "mode": "first",
        "default": "general-app", "rules": [{"label": ..., "keywords": [...]}]}]}

        Raises:
            ConfigurationError: If the document does not match RuleDocument
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Rule document must be a JSON object, got {type(data).__name__}")
        try:
            document = RuleDocument(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid rule document: {e}")

        overrides = {table.name: RuleTable.from_model(table) for table in document.tables}

        if "features" in overrides and overrides["features"].mode != "all":
            raise ConfigurationError("The features table must use mode 'all'")

        return cls(
            app_type_rules=overrides.get("app_type", APP_TYPE_RULES),
            feature_rules=overrides.get("features", FEATURE_RULES),
            complexity_rules=overrides.get("complexity", COMPLEXITY_RULES),
            urgency_rules=overrides.get("urgency", URGENCY_RULES),
            style_rules=overrides.get("style", STYLE_RULES),
            source=source,
        )

    @classmethod
    def from_json(cls, path: Path) -> "VibeClassifier":
        """Load rule tables from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load rule file {path}: {e}")

        logger.info(f"Loaded classification rules from {path}")
        return cls.from_dict(data, source=str(path))


def load_classifier(rules_file: Optional[Path] = None) -> VibeClassifier:
    """Return the built-in classifier, or one loaded from a rule file."""
    if rules_file is None:
        return VibeClassifier()
    return VibeClassifier.from_json(rules_file)


# Module-level helpers bound to the built-in tables
_DEFAULT = VibeClassifier()


def detect_app_type(text: str) -> str:
    return _DEFAULT.detect_app_type(text)


def extract_features(text: str) -> List[str]:
    return _DEFAULT.extract_features(text)


def assess_complexity(text: str) -> str:
    return _DEFAULT.assess_complexity(text)


def detect_urgency(text: str) -> str:
    return _DEFAULT.detect_urgency(text)


def detect_style(text: str) -> str:
    return _DEFAULT.detect_style(text)
