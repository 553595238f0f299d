# app/client/render.py

from datetime import datetime
import textwrap

from app.client.state import ConfessionWall
from app.data_schemas import Confession

PREVIEW_WIDTH = 60


def _shared_on(created_at: str) -> str:
    try:
        return datetime.fromisoformat(created_at).date().isoformat()
    except ValueError:
        return created_at


def preview(message: str, width: int = PREVIEW_WIDTH) -> str:
    """Single-line preview of a message"""
    text = " ".join(message.split())
    short = textwrap.shorten(text, width=width, placeholder="...")
    if short == "..." and text:
        # First word alone is wider than the preview
        return text[: width - 3] + "..."
    return short


def render_landing() -> str:
    return "\n".join(
        [
            "Our Little Secret",
            "A Magical Space for Two",
            "",
            "[start] Write a confession    [browse] Enter the wall",
        ]
    )


def render_form(draft: str, submitting: bool) -> str:
    lines = ["Write Your Confession", ""]
    lines.append(draft if draft else "(type with: write <text>)")
    lines.append("")
    lines.append(f"{len(draft)} characters")
    if submitting:
        lines.append("Sending...")
    elif draft:
        lines.append("[send] Share    [back] Cancel")
    else:
        lines.append("[back] Cancel")
    return "\n".join(lines)


def render_feed(confessions, loading: bool) -> str:
    lines = ["Confession Wall", ""]
    if loading:
        lines.append("Loading secrets...")
    elif not confessions:
        lines.append("Be the first to share a secret!")
        lines.append("[add] Confess Now")
    else:
        for confession in confessions:
            lines.append(
                f"#{confession.id:<5} {confession.likes:>4} <3  {preview(confession.message)}"
            )
    lines.append("")
    lines.append("[open <id>] [like <id>] [add] [refresh] [back]")
    return "\n".join(lines)


def render_detail(confession: Confession) -> str:
    return "\n".join(
        [
            f"Confession #{confession.id}",
            "",
            textwrap.fill(confession.message, width=PREVIEW_WIDTH + 10),
            "",
            f"{confession.likes} likes",
            f"Shared on {_shared_on(confession.created_at)}",
            "",
            "[like] [back]",
        ]
    )


def render(wall: ConfessionWall) -> str:
    """Render the active view of the wall as text"""
    view = wall.view
    if view.kind == "landing":
        return render_landing()
    if view.kind == "form":
        return render_form(view.draft, view.submitting)
    if view.kind == "feed":
        return render_feed(wall.confessions, wall.loading)
    return render_detail(view.confession)
