"""Plan document: walls, openings, rooms and canvas dimensions.

Plans are immutable values. Every edit builds a new Plan so that the
caller's history can keep each committed version as its own snapshot.
Walls have no ids; a wall is identified by its index in ``Plan.walls``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from wireframe_editor.models.geometry import Polygon


class Wall(BaseModel):
    """A structural element drawn as a filled polygon."""

    model_config = ConfigDict(frozen=True)

    boundary: Polygon = ()


class Room(BaseModel):
    """A labelled room outline. Carried through edits untouched."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str = ""
    boundary: Polygon = ()


class Dimensions(BaseModel):
    """Size of the document coordinate space."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(ge=0)
    height: float = Field(ge=0)


class Plan(BaseModel):
    """A floor plan overlay.

    Only ``walls`` is editable. Doors, windows and rooms are rendered
    but never changed by the editor.
    """

    model_config = ConfigDict(frozen=True)

    walls: tuple[Wall, ...] = ()
    doors: tuple[Wall, ...] = ()
    windows: tuple[Wall, ...] = ()
    rooms: tuple[Room, ...] = ()
    dimensions: Dimensions

    @classmethod
    def load(cls, path: str | Path) -> Plan:
        """Load a plan from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save the plan to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path

    # ── Edits (each returns a new Plan) ───────────────────────────────

    def boundaries(self) -> list[Polygon]:
        """Wall boundaries in wall-index order."""
        return [w.boundary for w in self.walls]

    def has_wall(self, index: int) -> bool:
        return 0 <= index < len(self.walls)

    def with_walls(self, walls: list[Wall] | tuple[Wall, ...]) -> Plan:
        return self.model_copy(update={"walls": tuple(walls)})

    def replace_wall(self, index: int, boundary: Polygon) -> Plan:
        """Swap in a new boundary for the wall at ``index``."""
        walls = list(self.walls)
        walls[index] = Wall(boundary=tuple(boundary))
        return self.with_walls(walls)

    def remove_wall(self, index: int) -> Plan:
        """Drop the wall at ``index``; later walls shift down by one."""
        walls = list(self.walls)
        del walls[index]
        return self.with_walls(walls)

    def append_wall(self, boundary: Polygon) -> Plan:
        return self.with_walls([*self.walls, Wall(boundary=tuple(boundary))])
