"""Interactive wall editing: tool state machine, editor and session."""

from wireframe_editor.editor.editor import WireframeEditor
from wireframe_editor.editor.events import Event, KeyDown, PointerDown, PointerMove, PointerUp
from wireframe_editor.editor.machine import Transition, step
from wireframe_editor.editor.session import EditingSession
from wireframe_editor.editor.state import (
    DragSession,
    DrawDrag,
    EditorState,
    ExtendSession,
    MoveVertexDrag,
    MoveWallDrag,
    Pick,
    Tool,
    tool_for_key,
)
from wireframe_editor.editor.transform import (
    ScreenTransform,
    client_to_document,
    fit_transform,
    invert_point,
)

__all__ = [
    "DragSession",
    "DrawDrag",
    "EditingSession",
    "EditorState",
    "Event",
    "ExtendSession",
    "KeyDown",
    "MoveVertexDrag",
    "MoveWallDrag",
    "Pick",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "ScreenTransform",
    "Tool",
    "Transition",
    "WireframeEditor",
    "client_to_document",
    "fit_transform",
    "invert_point",
    "step",
    "tool_for_key",
]
