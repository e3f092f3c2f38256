"""Wireframe editor CLI.

Usage:
    python -m wireframe_editor <command> <plan.json> [options]

Edits go through the 'apply' command, which replays a JSON list of
pointer/keyboard events against the plan exactly as the interactive
editor would. Read-only commands (info, render) take the plan path only.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from wireframe_editor.editor.session import EditingSession
from wireframe_editor.models.plan import Dimensions, Plan
from wireframe_editor.models.settings import ToolSettings

app = typer.Typer(
    name="wireframe_editor",
    help="Wireframe editor: replay edits on floor-plan wall overlays.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_plan(path: Path) -> Plan:
    if not path.exists():
        _fail(f"Plan not found: {path}")
    try:
        return Plan.load(path)
    except ValidationError as e:
        _fail(f"Invalid plan {path}: {e.error_count()} error(s): {e.errors()[0]['msg']}")


def _parse_size(size: Optional[str], plan: Plan) -> Dimensions:
    """Parse 'WIDTHxHEIGHT'. Defaults to the plan dimensions (1:1 mapping)."""
    if not size:
        return plan.dimensions
    try:
        w, h = size.lower().split("x")
        return Dimensions(width=float(w), height=float(h))
    except ValueError:
        _fail(f"Invalid size '{size}', expected WIDTHxHEIGHT")


def _summary(plan: Plan) -> dict:
    return {
        "walls": len(plan.walls),
        "doors": len(plan.doors),
        "windows": len(plan.windows),
        "rooms": len(plan.rooms),
        "dimensions": {"width": plan.dimensions.width, "height": plan.dimensions.height},
    }


# ---------------------------------------------------------------------------
# Read-only commands
# ---------------------------------------------------------------------------

@app.command()
def version() -> None:
    """Show version."""
    from wireframe_editor import __version__

    typer.echo(f"wireframe-editor v{__version__}")


@app.command()
def info(plan_path: Path = typer.Argument(..., help="Plan JSON file")):
    """Summarize a plan: element counts and dimensions."""
    plan = _load_plan(plan_path)
    walls = [
        {"index": i, "vertices": [[round(p.x, 2), round(p.y, 2)] for p in w.boundary]}
        for i, w in enumerate(plan.walls)
    ]
    _output({"ok": True, **_summary(plan), "wall_boundaries": walls})


@app.command()
def render(
    plan_path: Path = typer.Argument(..., help="Plan JSON file"),
    output: Path = typer.Argument(..., help="Output PNG path"),
    size: Optional[str] = typer.Option(None, "--size", help="Overlay size in pixels, WIDTHxHEIGHT"),
):
    """Render the plan overlay to PNG."""
    from wireframe_editor.export.overlay import render_overlay

    plan = _load_plan(plan_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    render_overlay(plan, output, size=_parse_size(size, plan))
    _output({"ok": True, "rendered": str(output)})


# ---------------------------------------------------------------------------
# Apply command (edits)
# ---------------------------------------------------------------------------

def _dispatch_event(session: EditingSession, event: dict) -> dict | None:
    """Feed one scripted event to the session. Returns a result dict for commits."""
    if not isinstance(event, dict):
        raise TypeError("expected an object")
    kind = event.get("type")
    editor = session.editor

    if kind in ("down", "move", "up"):
        handler = {
            "down": editor.mouse_down,
            "move": editor.mouse_move,
            "up": editor.mouse_up,
        }[kind]
        committed = handler(float(event["x"]), float(event["y"]))
        if committed is None:
            return None
        return {"event": kind, "tool": editor.tool.value, "walls": len(committed.walls)}

    elif kind == "key":
        editor.key_down(str(event["key"]))
        return None

    elif kind == "undo":
        return {"event": kind, "applied": session.undo()}

    elif kind == "redo":
        return {"event": kind, "applied": session.redo()}

    elif kind == "thickness":
        editor.set_thickness(int(event["value"]))
        return None

    elif kind == "snap":
        value = event["value"]
        if not isinstance(value, bool):
            raise ValueError(f"snap value must be true or false, got {value!r}")
        editor.set_snap(value)
        return None

    raise ValueError(f"Unknown event type: {kind!r}")


@app.command()
def apply(
    plan_path: Path = typer.Argument(..., help="Plan JSON file"),
    events_path: Path = typer.Argument(..., help="JSON list of events to replay"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to save the result (default: overwrite plan)"),
    size: Optional[str] = typer.Option(None, "--size", help="Overlay size in pixels, WIDTHxHEIGHT"),
    thickness: int = typer.Option(20, "--thickness", help="Draw tool wall thickness (4-100)"),
    snap: bool = typer.Option(True, "--snap/--no-snap", help="Grid snapping"),
    render_path: Optional[Path] = typer.Option(None, "--render", help="Also render the final editor view to PNG"),
):
    """Replay pointer/keyboard events against a plan and save the result.

    Event objects: {"type": "down"|"move"|"up", "x", "y"} in overlay
    pixels, {"type": "key", "key": "d"}, {"type": "undo"}, {"type": "redo"},
    {"type": "thickness", "value": 30}, {"type": "snap", "value": false}.
    """
    plan = _load_plan(plan_path)
    if not events_path.exists():
        _fail(f"Events not found: {events_path}")

    try:
        events = json.loads(events_path.read_text())
        settings = ToolSettings(thickness=thickness, snap=snap)
    except (json.JSONDecodeError, ValidationError) as e:
        _fail(str(e))
    if not isinstance(events, list):
        _fail("Events file must contain a JSON list")

    session = EditingSession(plan, size=_parse_size(size, plan), settings=settings)
    results = []
    for i, event in enumerate(events):
        try:
            result = _dispatch_event(session, event)
        except (KeyError, TypeError, ValueError) as e:
            _fail(f"Event {i}: {e}")
        if result is not None:
            results.append(result)

    out = output or plan_path
    session.plan.save(out)
    if render_path is not None:
        from wireframe_editor.export.overlay import render_editor

        render_path.parent.mkdir(parents=True, exist_ok=True)
        render_editor(session.editor, render_path)

    _output({
        "ok": True,
        "saved": str(out),
        "events": len(events),
        "commits": session.commits,
        "can_undo": session.can_undo,
        "can_redo": session.can_redo,
        "tool": session.editor.tool.value,
        "results": results,
        **_summary(session.plan),
    })


if __name__ == "__main__":
    app()
