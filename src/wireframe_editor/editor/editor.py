"""Editor facade: owns the interaction state and talks to the caller.

The caller hands in a plan and a change callback. Pointer events arrive
in client pixels, are mapped into document space and run through the
state machine; every committed plan is adopted and passed to
``on_change``. Undo/redo and persistence are the caller's business.
"""

from __future__ import annotations

import logging
from typing import Callable

from wireframe_editor.editor.events import Event, KeyDown, PointerDown, PointerMove, PointerUp
from wireframe_editor.editor.machine import step
from wireframe_editor.editor.state import DrawDrag, EditorState, Tool
from wireframe_editor.editor.transform import ScreenTransform, client_to_document, fit_transform
from wireframe_editor.geometry import create_wall_rectangle
from wireframe_editor.models.geometry import Point, Polygon
from wireframe_editor.models.plan import Dimensions, Plan
from wireframe_editor.models.settings import ToolSettings

logger = logging.getLogger(__name__)


class WireframeEditor:
    """Pointer-driven wall editor for one plan overlay.

    Args:
        plan: Initial plan document.
        on_change: Called with the full replacement plan on every commit.
        size: Pixel size of the overlay box. Without it pointer events
            cannot be mapped and land on the document origin.
        settings: Toolbar settings (thickness, snap, pick tolerance).
        offset: Pixel position of the overlay box inside the client area.
    """

    def __init__(
        self,
        plan: Plan,
        on_change: Callable[[Plan], None],
        size: Dimensions | None = None,
        settings: ToolSettings | None = None,
        offset: tuple[float, float] = (0.0, 0.0),
    ):
        self._plan = plan
        self.on_change = on_change
        self.settings = settings or ToolSettings()
        self.state = EditorState()
        self.size = size
        self.offset = offset
        self.transform: ScreenTransform | None = None
        self._refit()

    # ── Document ──────────────────────────────────────────────────────

    @property
    def plan(self) -> Plan:
        return self._plan

    @plan.setter
    def plan(self, plan: Plan) -> None:
        """Swap in a plan from outside (undo, redo, reload).

        Interaction state is left alone, so an open session keeps its
        indices; transitions on indices that no longer exist are no-ops.
        """
        self._plan = plan
        self._refit()

    def resize(
        self,
        size: Dimensions | None,
        offset: tuple[float, float] | None = None,
    ) -> None:
        """Adopt a new overlay box. The offset is kept unless given."""
        self.size = size
        if offset is not None:
            self.offset = offset
        self._refit()

    def _refit(self) -> None:
        if self.size is None:
            self.transform = None
        else:
            self.transform = fit_transform(self._plan.dimensions, self.size, self.offset)

    # ── Toolbar ───────────────────────────────────────────────────────

    @property
    def tool(self) -> Tool:
        return self.state.tool

    def set_tool(self, tool: Tool | str) -> None:
        self.state = self.state.with_tool(Tool(tool))

    def set_thickness(self, thickness: int) -> None:
        """Set draw thickness. Raises ValidationError outside 4..100."""
        self.settings = ToolSettings.model_validate(
            {**self.settings.model_dump(), "thickness": thickness}
        )

    def set_snap(self, snap: bool) -> None:
        self.settings = self.settings.model_copy(update={"snap": bool(snap)})

    # ── Input ─────────────────────────────────────────────────────────

    def client_to_document(self, client_x: float, client_y: float) -> Point:
        return client_to_document(self.transform, client_x, client_y)

    def mouse_down(self, client_x: float, client_y: float) -> Plan | None:
        return self.dispatch(PointerDown(self.client_to_document(client_x, client_y)))

    def mouse_move(self, client_x: float, client_y: float) -> Plan | None:
        return self.dispatch(PointerMove(self.client_to_document(client_x, client_y)))

    def mouse_up(self, client_x: float, client_y: float) -> Plan | None:
        return self.dispatch(PointerUp(self.client_to_document(client_x, client_y)))

    def key_down(self, key: str) -> None:
        self.dispatch(KeyDown(key))

    def dispatch(self, event: Event) -> Plan | None:
        """Run one document-space event. Returns the committed plan, if any."""
        transition = step(self.state, self._plan, self.settings, event)
        self.state = transition.state
        if transition.commit is None:
            return None
        self._plan = transition.commit
        self.on_change(transition.commit)
        return transition.commit

    # ── Feedback ──────────────────────────────────────────────────────

    def preview_polygon(self) -> Polygon | None:
        """Rectangle the draw tool would add on release, if a draw is open."""
        drag = self.state.drag
        if not isinstance(drag, DrawDrag):
            return None
        end = drag.live_point if drag.live_point is not None else drag.anchor
        return create_wall_rectangle(drag.anchor, end, self.settings.thickness)
