"""Tests for overlay rendering."""

from pathlib import Path

from wireframe_editor.editor import EditorState, Pick, Tool, WireframeEditor
from wireframe_editor.export.overlay import render_editor, render_overlay
from wireframe_editor.models import Dimensions, Plan, Point, Room, ToolSettings, Wall

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _rect(x0, y0, x1, y1):
    return (
        Point(x=x0, y=y0), Point(x=x1, y=y0),
        Point(x=x1, y=y1), Point(x=x0, y=y1),
    )


def _plan() -> Plan:
    return Plan(
        walls=(
            Wall(boundary=_rect(0, 0, 100, 20)),
            Wall(boundary=_rect(0, 100, 20, 200)),
            Wall(boundary=(Point(x=5, y=5),)),  # degenerate, skipped
        ),
        doors=(Wall(boundary=(Point(x=30, y=20), Point(x=60, y=20))),),
        windows=(Wall(boundary=(Point(x=0, y=40), Point(x=0, y=80))),),
        rooms=(Room(name="Hall", type="hall", boundary=_rect(20, 20, 200, 200)),),
        dimensions=Dimensions(width=400, height=300),
    )


def _is_png(path: Path) -> bool:
    return path.read_bytes()[:8] == PNG_MAGIC


class TestRenderOverlay:
    def test_plain(self, tmp_path):
        out = render_overlay(_plan(), tmp_path / "plain.png")
        assert out == tmp_path / "plain.png"
        assert _is_png(out)

    def test_string_path(self, tmp_path):
        out = render_overlay(_plan(), str(tmp_path / "str.png"))
        assert isinstance(out, Path)
        assert out.exists()

    def test_with_feedback(self, tmp_path):
        state = EditorState(
            tool=Tool.STRETCH,
            hover=Pick(wall=0, vertex=1),
            selection=Pick(wall=1, vertex=0),
        )
        out = render_overlay(
            _plan(),
            tmp_path / "feedback.png",
            state=state,
            settings=ToolSettings(),
            size=Dimensions(width=800, height=300),
            preview=_rect(200, 240, 300, 260),
        )
        assert _is_png(out)

    def test_empty_document(self, tmp_path):
        plan = Plan(dimensions=Dimensions(width=0, height=0))
        assert _is_png(render_overlay(plan, tmp_path / "empty.png"))


class TestRenderEditor:
    def test_open_draw(self, tmp_path):
        plan = _plan()
        editor = WireframeEditor(plan, lambda p: None, size=plan.dimensions)
        editor.set_tool("draw")
        editor.mouse_down(200, 250)
        editor.mouse_move(350, 250)
        assert _is_png(render_editor(editor, tmp_path / "draw.png"))

    def test_without_size(self, tmp_path):
        editor = WireframeEditor(_plan(), lambda p: None)
        assert _is_png(render_editor(editor, tmp_path / "nosize.png", dpi=50))
