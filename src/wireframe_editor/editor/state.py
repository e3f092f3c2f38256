"""Interaction state: current tool, hover, selection and open sessions.

The whole interaction state lives in one immutable ``EditorState``
record. Transitions build a new record with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from wireframe_editor.models.geometry import Point


class Tool(str, Enum):
    """Editing modes. Exactly one is active at a time.

    MOVE is a reserved mode: it can be selected but no pointer event
    does anything while it is active.
    """

    SELECT = "select"
    DRAW = "draw"
    DELETE = "delete"
    STRETCH = "stretch"
    MOVE = "move"
    EXTEND = "extend"


# Single-key shortcuts, matched case-insensitively.
SHORTCUTS: dict[str, Tool] = {
    "v": Tool.SELECT,
    "d": Tool.DRAW,
    "x": Tool.DELETE,
    "delete": Tool.DELETE,
    "s": Tool.STRETCH,
    "t": Tool.EXTEND,
    "m": Tool.MOVE,
}


def tool_for_key(key: str) -> Tool | None:
    """Tool bound to ``key``, or None for unbound keys."""
    return SHORTCUTS.get(key.lower())


@dataclass(frozen=True)
class Pick:
    """A wall index and optionally one of its vertices (hover or selection)."""

    wall: int
    vertex: int | None = None


@dataclass(frozen=True)
class MoveWallDrag:
    """Dragging a whole wall. ``anchor`` follows the pointer after every move."""

    anchor: Point
    wall_index: int


@dataclass(frozen=True)
class MoveVertexDrag:
    """Dragging one vertex of a wall."""

    wall_index: int
    vertex_index: int


@dataclass(frozen=True)
class DrawDrag:
    """Rubber-band wall being drawn from ``anchor`` to ``live_point``."""

    anchor: Point
    live_point: Point | None = None


DragSession = Union[MoveWallDrag, MoveVertexDrag, DrawDrag]


@dataclass(frozen=True)
class ExtendSession:
    """Source vertex picked by the first click of the extend tool."""

    wall: int
    vertex: int


@dataclass(frozen=True)
class EditorState:
    tool: Tool = Tool.SELECT
    hover: Pick | None = None
    selection: Pick | None = None
    drag: DragSession | None = None
    extend: ExtendSession | None = None

    def with_tool(self, tool: Tool) -> EditorState:
        """Switch tools, abandoning any open drag or extend session.

        Edits already committed by the abandoned session stay in place.
        Re-selecting the active tool changes nothing.
        """
        if tool == self.tool:
            return self
        return replace(self, tool=tool, drag=None, extend=None)
