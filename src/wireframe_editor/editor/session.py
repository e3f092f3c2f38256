"""Editing session: an editor wrapped in undo/redo history."""

from __future__ import annotations

import logging

from wireframe_editor.editor.editor import WireframeEditor
from wireframe_editor.editor.state import EditorState
from wireframe_editor.history import History
from wireframe_editor.models.plan import Dimensions, Plan
from wireframe_editor.models.settings import ToolSettings

logger = logging.getLogger(__name__)


class EditingSession:
    """Records every plan the editor commits and replays undo/redo into it."""

    def __init__(
        self,
        plan: Plan,
        size: Dimensions | None = None,
        settings: ToolSettings | None = None,
        offset: tuple[float, float] = (0.0, 0.0),
    ):
        self.history: History[Plan] = History(plan)
        self.commits = 0
        self.editor = WireframeEditor(
            plan, self._on_change, size=size, settings=settings, offset=offset
        )

    def _on_change(self, plan: Plan) -> None:
        self.history.set(plan)
        self.commits += 1
        logger.info("Commit %d: %d walls", self.commits, len(plan.walls))

    @property
    def plan(self) -> Plan:
        return self.history.present

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def undo(self) -> bool:
        if not self.history.undo():
            return False
        self.editor.plan = self.history.present
        return True

    def redo(self) -> bool:
        if not self.history.redo():
            return False
        self.editor.plan = self.history.present
        return True

    def load(self, plan: Plan) -> None:
        """Replace the document and start a fresh history.

        Open drag and extend sessions are dropped; the active tool is kept.
        """
        self.history.reset(plan)
        self.editor.plan = plan
        self.editor.state = EditorState(tool=self.editor.tool)
        logger.info("Loaded plan with %d walls", len(plan.walls))
