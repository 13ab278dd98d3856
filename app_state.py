from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from ai_analysis import analyze_file_list
from constants import TAB_KEYS
from models import AnalysisOutcome, AnalysisResult, FailureKind, NamingInput
from naming import default_naming_input
from tree_view import NodePath, TreeView

logger = logging.getLogger(__name__)

Client = Callable[[str], AnalysisOutcome]


@dataclass
class AppState:
    """
    All mutable state of one session. Views read it and call the handlers below;
    nothing else writes to it.
    """
    active_tab: str = TAB_KEYS[0]
    naming: NamingInput = field(default_factory=default_naming_input)
    file_list: str = ""
    is_analyzing: bool = False
    result: Optional[AnalysisResult] = None
    error: Optional[AnalysisOutcome] = None
    tree: TreeView = field(default_factory=TreeView)

    @property
    def phase(self) -> str:
        if self.is_analyzing:
            return "analyzing"
        if self.result is not None:
            return "result"
        if self.error is not None:
            return "error"
        return "idle"

    @property
    def can_submit(self) -> bool:
        return not self.is_analyzing and bool(self.file_list.strip())

    def select_tab(self, key: str) -> None:
        if key not in TAB_KEYS:
            raise ValueError(f"Unknown tab: {key!r}")
        self.active_tab = key

    def edit_naming(self, **fields) -> None:
        self.naming = replace(self.naming, **fields)

    def set_file_list(self, text: str) -> None:
        self.file_list = text

    def toggle_folder(self, path: NodePath) -> None:
        self.tree.toggle(path)

    def submit_analysis(self, client: Client = analyze_file_list) -> Optional[AnalysisOutcome]:
        """
        Run one analysis round-trip. Returns None when the submit was a no-op
        (blank input or a request already in flight).
        """
        if not self.can_submit:
            return None

        self.is_analyzing = True
        self.error = None
        try:
            outcome = client(self.file_list)
        finally:
            self.is_analyzing = False

        if outcome.ok:
            self.result = outcome.result
        elif outcome.failure is FailureKind.EMPTY_INPUT:
            return None
        else:
            logger.warning("Analysis failed (%s): %s", outcome.failure.value, outcome.message)
            self.result = None
            self.error = outcome
        return outcome

    def reset_analysis(self) -> None:
        self.result = None
        self.error = None
        self.file_list = ""
