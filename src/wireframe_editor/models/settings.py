"""Toolbar settings shared by the editor, renderer and CLI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MIN_THICKNESS = 4
MAX_THICKNESS = 100


class ToolSettings(BaseModel):
    """Toolbar state: wall thickness for the draw tool and the snap toggle.

    ``tolerance`` is the pick radius for walls and vertices, ``grid`` the
    snap spacing for absolute vertex placement.
    """

    model_config = ConfigDict(frozen=True)

    thickness: int = Field(
        default=20, ge=MIN_THICKNESS, le=MAX_THICKNESS,
        description="Width of newly drawn walls (document units)",
    )
    snap: bool = Field(default=True, description="Gate for every grid-snapping call site")
    tolerance: float = Field(default=8.0, gt=0, description="Pick radius (document units)")
    grid: float = Field(default=5.0, gt=0, description="Snap grid for vertex placement")
