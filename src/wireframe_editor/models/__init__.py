"""Plan document models."""

from wireframe_editor.models.geometry import ORIGIN, Point, Polygon
from wireframe_editor.models.plan import Dimensions, Plan, Room, Wall
from wireframe_editor.models.settings import MAX_THICKNESS, MIN_THICKNESS, ToolSettings

__all__ = [
    "ORIGIN",
    "Point",
    "Polygon",
    "Dimensions",
    "Plan",
    "Room",
    "Wall",
    "MAX_THICKNESS",
    "MIN_THICKNESS",
    "ToolSettings",
]
