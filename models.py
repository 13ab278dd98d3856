from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class FolderNode:
    name: str
    description: Optional[str] = None
    is_top_level: bool = False
    subfolders: tuple[FolderNode, ...] = ()

    @property
    def has_children(self) -> bool:
        return bool(self.subfolders)


class StepCategory(str, Enum):
    DESKTOP = "Desktop"
    DOWNLOADS = "Downloads"
    QUICK_ACCESS = "QuickAccess"
    AUTOMATION = "Automation"


@dataclass(frozen=True)
class SetupStep:
    id: str
    title: str
    description: str
    details: tuple[str, ...]
    category: StepCategory


@dataclass(frozen=True)
class CategoryStat:
    name: str
    count: float
    percentage: float


@dataclass(frozen=True)
class NamingExample:
    old: str
    new: str


@dataclass(frozen=True)
class AnalysisResult:
    """
    Structured reply of the AI optimizer.
    Field names follow Python style; from_dict/to_dict map the camelCase wire names.
    """
    categories: tuple[CategoryStat, ...]
    problems: tuple[str, ...]
    proposed_structure: str
    naming_examples: tuple[NamingExample, ...]
    powershell_script: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisResult:
        return cls(
            categories=tuple(
                CategoryStat(c["name"], c["count"], c["percentage"]) for c in data["categories"]
            ),
            problems=tuple(data["problems"]),
            proposed_structure=data["proposedStructure"],
            naming_examples=tuple(
                NamingExample(n["old"], n["new"]) for n in data["namingExamples"]
            ),
            powershell_script=data["powershellScript"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "categories": [
                {"name": c.name, "count": c.count, "percentage": c.percentage}
                for c in self.categories
            ],
            "problems": list(self.problems),
            "proposedStructure": self.proposed_structure,
            "namingExamples": [{"old": n.old, "new": n.new} for n in self.naming_examples],
            "powershellScript": self.powershell_script,
        }


class FailureKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    CONFIGURATION = "configuration"
    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Either a parsed result or a failure kind with a user-facing message."""
    result: Optional[AnalysisResult] = None
    failure: Optional[FailureKind] = None
    message: str = ""

    @classmethod
    def success(cls, result: AnalysisResult) -> AnalysisOutcome:
        return cls(result=result)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> AnalysisOutcome:
        return cls(failure=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None and self.result is not None


@dataclass
class NamingInput:
    date: str
    subject: str = "Physics"
    topic: str = "Thermodynamics"
    version: str = "v1"


@dataclass(frozen=True)
class TabSpec:
    key: str
    label: str
    icon: str
