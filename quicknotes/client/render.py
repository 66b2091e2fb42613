"""
QuickNotes Client — HTML Rendering
====================================

What:  Turns a NoteBoard into the notes page.
How:   Jinja2 template (templates/board.html) plus markdown-it-py for note
       bodies. Raw HTML in notes is disabled, so rendered Markdown is safe to
       mark as trusted markup.
"""

from jinja2 import Environment, PackageLoader, select_autoescape
from markdown_it import MarkdownIt
from markupsafe import Markup
from mdit_py_plugins.tasklists import tasklists_plugin

from quicknotes.client.board import NoteBoard


class MarkdownRenderer:
    """CommonMark plus tables and read-only task lists; raw HTML is escaped."""

    def __init__(self) -> None:
        self._md = (
            MarkdownIt("commonmark", {"html": False, "typographer": True})
            .enable("table")
            .use(tasklists_plugin, enabled=False)
        )

    def render(self, text: str) -> Markup:
        return Markup(self._md.render(text or ""))


_env = Environment(
    loader=PackageLoader("quicknotes.client", "templates"),
    autoescape=select_autoescape(["html"]),
)
_markdown = MarkdownRenderer()
_env.filters["markdown"] = _markdown.render


def render_board(board: NoteBoard, title: str = "Notes") -> str:
    """Render the full page for the board's current state."""
    template = _env.get_template("board.html")
    return template.render(
        title=title,
        notes=board.notes,
        draft_content=board.draft_content,
        editing_note=board.editing_note,
        error=board.error,
        dark_mode=board.dark_mode,
        theme="dark" if board.dark_mode else "light",
    )
