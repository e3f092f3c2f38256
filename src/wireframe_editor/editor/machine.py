"""Tool state machine.

Every transition is a pure function of (state, plan, settings, event)
returning the next state and at most one committed plan. Nothing here
raises for a miss: clicks on empty space, picks out of tolerance and
sessions whose wall has since disappeared all end as silent no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from wireframe_editor.editor.events import Event, KeyDown, PointerDown, PointerMove, PointerUp
from wireframe_editor.editor.state import (
    DrawDrag,
    EditorState,
    ExtendSession,
    MoveVertexDrag,
    MoveWallDrag,
    Pick,
    Tool,
    tool_for_key,
)
from wireframe_editor.geometry import (
    create_wall_rectangle,
    nearest_edge,
    pick_vertex,
    pick_wall,
    polygon_translate,
    snap_to_grid,
    sub,
)
from wireframe_editor.models.geometry import Point
from wireframe_editor.models.plan import Plan
from wireframe_editor.models.settings import ToolSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Next interaction state plus the plan to commit, if any."""

    state: EditorState
    commit: Plan | None = None


def _has_vertex(plan: Plan, wall: int, vertex: int) -> bool:
    return plan.has_wall(wall) and 0 <= vertex < len(plan.walls[wall].boundary)


def _pick_wall_and_vertex(
    plan: Plan, p: Point, settings: ToolSettings
) -> tuple[int, int]:
    """(wall, vertex) under ``p``; either is -1 when not found."""
    wi = pick_wall(plan.boundaries(), p, settings.tolerance)
    if wi < 0:
        return -1, -1
    return wi, pick_vertex(plan.walls[wi].boundary, p, settings.tolerance)


# ── Pointer down, one handler per tool ───────────────────────────────


def _down_select(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    wi = pick_wall(plan.boundaries(), p, settings.tolerance)
    if wi < 0:
        return Transition(replace(state, selection=None))
    return Transition(
        replace(state, selection=Pick(wall=wi), drag=MoveWallDrag(anchor=p, wall_index=wi))
    )


def _down_delete(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    wi = pick_wall(plan.boundaries(), p, settings.tolerance)
    if wi < 0:
        return Transition(state)
    logger.debug("Deleting wall %d", wi)
    return Transition(state, plan.remove_wall(wi))


def _down_stretch(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    wi, vi = _pick_wall_and_vertex(plan, p, settings)
    if wi < 0 or vi < 0:
        return Transition(state)
    return Transition(
        replace(
            state,
            selection=Pick(wall=wi, vertex=vi),
            drag=MoveVertexDrag(wall_index=wi, vertex_index=vi),
        )
    )


def _down_draw(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    return Transition(replace(state, drag=DrawDrag(anchor=p, live_point=p)))


def _down_extend(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    """Two clicks: pick a source vertex, then a target wall to project it onto.

    The second click always ends the session. Missing the target cancels
    it without touching the plan.
    """
    source = state.extend
    if source is None:
        wi, vi = _pick_wall_and_vertex(plan, p, settings)
        if wi < 0 or vi < 0:
            return Transition(state)
        logger.debug("Extend source: wall %d vertex %d", wi, vi)
        return Transition(replace(state, extend=ExtendSession(wall=wi, vertex=vi)))

    cleared = replace(state, extend=None)
    target = pick_wall(plan.boundaries(), p, settings.tolerance)
    if target < 0 or not _has_vertex(plan, source.wall, source.vertex):
        logger.debug("Extend cancelled")
        return Transition(cleared)

    source_point = plan.walls[source.wall].boundary[source.vertex]
    edge, q = nearest_edge(plan.walls[target].boundary, source_point)
    if edge < 0:
        return Transition(cleared)
    if settings.snap:
        q = snap_to_grid(q, settings.grid)

    boundary = list(plan.walls[source.wall].boundary)
    boundary[source.vertex] = q
    logger.debug("Extend: wall %d vertex %d -> wall %d edge %d", source.wall, source.vertex, target, edge)
    return Transition(cleared, plan.replace_wall(source.wall, boundary))


def _down_noop(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    return Transition(state)


_DownHandler = Callable[[EditorState, Plan, ToolSettings, Point], Transition]

_DOWN_HANDLERS: dict[Tool, _DownHandler] = {
    Tool.SELECT: _down_select,
    Tool.DELETE: _down_delete,
    Tool.STRETCH: _down_stretch,
    Tool.DRAW: _down_draw,
    Tool.EXTEND: _down_extend,
    Tool.MOVE: _down_noop,
}


def pointer_down(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    return _DOWN_HANDLERS[state.tool](state, plan, settings, p)


# ── Pointer move ──────────────────────────────────────────────────────


def pointer_move(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    """Drive the open drag, or refresh hover when nothing is being dragged.

    Moving a wall snaps the incremental delta to whole units, then
    re-anchors on the raw pointer. Moving a vertex snaps its absolute
    position to the grid.
    """
    drag = state.drag

    if isinstance(drag, MoveWallDrag):
        if not plan.has_wall(drag.wall_index):
            return Transition(state)
        delta = sub(p, drag.anchor)
        if settings.snap:
            delta = snap_to_grid(delta, 1)
        boundary = polygon_translate(plan.walls[drag.wall_index].boundary, delta)
        return Transition(
            replace(state, drag=replace(drag, anchor=p)),
            plan.replace_wall(drag.wall_index, boundary),
        )

    if isinstance(drag, MoveVertexDrag):
        if not _has_vertex(plan, drag.wall_index, drag.vertex_index):
            return Transition(state)
        boundary = list(plan.walls[drag.wall_index].boundary)
        boundary[drag.vertex_index] = snap_to_grid(p, settings.grid) if settings.snap else p
        return Transition(state, plan.replace_wall(drag.wall_index, boundary))

    if isinstance(drag, DrawDrag):
        return Transition(replace(state, drag=replace(drag, live_point=p)))

    return Transition(replace(state, hover=_hover_at(state.tool, plan, settings, p)))


def _hover_at(tool: Tool, plan: Plan, settings: ToolSettings, p: Point) -> Pick | None:
    wi = pick_wall(plan.boundaries(), p, settings.tolerance)
    if wi < 0:
        return None
    if tool != Tool.STRETCH:
        return Pick(wall=wi)
    vi = pick_vertex(plan.walls[wi].boundary, p, settings.tolerance)
    return Pick(wall=wi, vertex=vi if vi >= 0 else None)


# ── Pointer up ────────────────────────────────────────────────────────


def pointer_up(state: EditorState, plan: Plan, settings: ToolSettings, p: Point) -> Transition:
    """End the drag. Only a draw drag commits here; the rest already did."""
    drag = state.drag
    released = replace(state, drag=None)
    if isinstance(drag, DrawDrag):
        end = drag.live_point if drag.live_point is not None else drag.anchor
        rect = create_wall_rectangle(drag.anchor, end, settings.thickness)
        return Transition(released, plan.append_wall(rect))
    return Transition(released)


def key_down(state: EditorState, key: str) -> Transition:
    tool = tool_for_key(key)
    if tool is None:
        return Transition(state)
    if tool != state.tool:
        logger.debug("Tool %s -> %s", state.tool.value, tool.value)
    return Transition(state.with_tool(tool))


def step(state: EditorState, plan: Plan, settings: ToolSettings, event: Event) -> Transition:
    """Apply one input event."""
    if isinstance(event, PointerDown):
        return pointer_down(state, plan, settings, event.point)
    if isinstance(event, PointerMove):
        return pointer_move(state, plan, settings, event.point)
    if isinstance(event, PointerUp):
        return pointer_up(state, plan, settings, event.point)
    if isinstance(event, KeyDown):
        return key_down(state, event.key)
    raise TypeError(f"Unknown event: {event!r}")
