"""Plan overlay rendering using matplotlib.

Draws the editable layer the way the editor shows it over the generated
image:
- Walls as filled polygons, hovered and selected walls highlighted
- Vertex handles on every wall while the stretch tool is active
- Doors and windows as open polylines (read-only)
- Rooms as dashed outlines with their names
- The rubber-band rectangle of an open draw
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
from matplotlib.patches import Ellipse, Polygon as PolygonPatch

from wireframe_editor.editor.state import EditorState, Pick, Tool
from wireframe_editor.models.geometry import Point
from wireframe_editor.models.plan import Dimensions, Plan
from wireframe_editor.models.settings import ToolSettings

# fill, outline
_WALL_COLORS = ("#212121", "#000000")
_HOVER_COLORS = ("#1565C0", "#0D47A1")
_SELECTED_COLORS = ("#EF6C00", "#E65100")

_HANDLE_RADIUS_PX = 6


def _xy(points: Sequence[Point]) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


def _wall_colors(index: int, hover: Pick | None, selection: Pick | None) -> tuple[str, str]:
    if selection is not None and selection.wall == index:
        return _SELECTED_COLORS
    if hover is not None and hover.wall == index:
        return _HOVER_COLORS
    return _WALL_COLORS


def render_overlay(
    plan: Plan,
    output_path: str | Path,
    state: EditorState | None = None,
    settings: ToolSettings | None = None,
    size: Dimensions | None = None,
    preview: Sequence[Point] | None = None,
    dpi: int = 100,
) -> Path:
    """Render a plan overlay to PNG.

    The document space (``plan.dimensions``) is stretched to fill the
    pixel box on both axes independently, with the origin top-left.

    Args:
        plan: Plan to draw.
        output_path: Output image path.
        state: Interaction state for hover/selection/handle feedback.
        settings: Toolbar settings (only the snap flag is shown).
        size: Output size in pixels. Defaults to the plan dimensions.
        preview: Rubber-band polygon of an open draw.
        dpi: Image resolution.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    state = state or EditorState()
    width = plan.dimensions.width or 1.0
    height = plan.dimensions.height or 1.0
    size = size or plan.dimensions
    px_w = max(size.width, 1.0)
    px_h = max(size.height, 1.0)

    fig = plt.figure(figsize=(px_w / dpi, px_h / dpi), dpi=dpi)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # image coordinates: y grows downward
    ax.set_aspect("auto")
    ax.axis("off")

    for room in plan.rooms:
        _draw_room(ax, room.boundary, room.name)

    for i, wall in enumerate(plan.walls):
        if len(wall.boundary) < 2:
            continue
        fill, outline = _wall_colors(i, state.hover, state.selection)
        ax.add_patch(PolygonPatch(
            _xy(wall.boundary), closed=True,
            facecolor=fill, edgecolor=outline, linewidth=1.0, alpha=0.85, zorder=10,
        ))

    for window in plan.windows:
        _draw_polyline(ax, window.boundary, color="#4CAF50")
    for door in plan.doors:
        _draw_polyline(ax, door.boundary, color="#2196F3")

    if state.tool == Tool.STRETCH:
        # handles are sized in pixels, so convert to document units per axis
        rx = _HANDLE_RADIUS_PX * width / px_w
        ry = _HANDLE_RADIUS_PX * height / px_h
        for i, wall in enumerate(plan.walls):
            for vi, v in enumerate(wall.boundary):
                hovered = (
                    state.hover is not None
                    and state.hover.wall == i
                    and state.hover.vertex == vi
                )
                ax.add_patch(Ellipse(
                    (v.x, v.y), 2 * rx, 2 * ry,
                    facecolor="#FFEB3B" if hovered else "white",
                    edgecolor="#424242", linewidth=0.8, zorder=20,
                ))

    if preview is not None and len(preview) >= 2:
        ax.add_patch(PolygonPatch(
            _xy(preview), closed=True,
            facecolor="#90CAF9", edgecolor="#1E88E5",
            linewidth=1.0, linestyle="--", alpha=0.5, zorder=30,
        ))

    if settings is not None and settings.snap:
        ax.text(
            0.01, 0.99, "snap", transform=ax.transAxes,
            fontsize=7, va="top", color="#757575", zorder=40,
        )

    fig.savefig(str(output_path), dpi=dpi)
    plt.close(fig)

    return output_path


def render_editor(editor, output_path: str | Path, dpi: int = 100) -> Path:
    """Render a ``WireframeEditor`` as the user currently sees it."""
    return render_overlay(
        editor.plan,
        output_path,
        state=editor.state,
        settings=editor.settings,
        size=editor.size,
        preview=editor.preview_polygon(),
        dpi=dpi,
    )


def _draw_polyline(ax: plt.Axes, points: Sequence[Point], color: str) -> None:
    if len(points) < 2:
        return
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    ax.plot(xs, ys, color=color, linewidth=1.5, zorder=15)


def _draw_room(ax: plt.Axes, points: Sequence[Point], name: str) -> None:
    """Draw a room as a dashed outline with its name at the vertex centroid."""
    if len(points) < 3:
        return
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    ax.plot(xs + [xs[0]], ys + [ys[0]], color="#9E9E9E", linewidth=0.5, linestyle=":", zorder=3)
    if name:
        ax.text(
            sum(xs) / len(xs), sum(ys) / len(ys), name,
            fontsize=6, ha="center", va="center",
            color="#616161", style="italic", zorder=4,
        )
