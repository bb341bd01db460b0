"""
Display formatting for answer text

Answers use a small subset of markdown: a line wrapped entirely in ``**``
is a section heading, and ``**text**`` inside a line is emphasis.
"""
import html
import re
from dataclasses import dataclass
from typing import List

HEADING = "heading"
TEXT = "text"
BLANK = "blank"

_INLINE_BOLD = re.compile(r"\*\*(.*?)\*\*")


@dataclass(frozen=True)
class Segment:
    """One rendered line: kind, plain visible text and HTML markup"""
    kind: str
    text: str
    html: str


def format_line(line: str) -> Segment:
    trimmed = line.strip()
    if not trimmed:
        return Segment(BLANK, "", "")

    if trimmed.startswith("**") and trimmed.endswith("**"):
        title = trimmed[2:-2] + ":"
        return Segment(HEADING, title, f'<strong class="heading">{html.escape(title)}</strong>')

    plain = _INLINE_BOLD.sub(r"\1", line)
    markup = _INLINE_BOLD.sub(r"<strong>\1</strong>", html.escape(line, quote=False))
    return Segment(TEXT, plain, markup)


def format_message(text: str) -> List[Segment]:
    """Split a message into display segments, one per line"""
    return [format_line(line) for line in text.split("\n")]


def render_message(text: str) -> str:
    """Render a message as HTML, one block per non-blank line"""
    return "\n".join(
        f"<div>{segment.html}</div>" for segment in format_message(text) if segment.kind != BLANK
    )
