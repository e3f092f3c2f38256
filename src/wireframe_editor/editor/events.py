"""Input events fed to the state machine, in document coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from wireframe_editor.models.geometry import Point


@dataclass(frozen=True)
class PointerDown:
    point: Point


@dataclass(frozen=True)
class PointerMove:
    point: Point


@dataclass(frozen=True)
class PointerUp:
    point: Point


@dataclass(frozen=True)
class KeyDown:
    key: str  # key name as reported by the toolkit, e.g. "v" or "Delete"


Event = Union[PointerDown, PointerMove, PointerUp, KeyDown]
