"""
Display helpers for Noted.

Formats notes for the terminal: one line per note, grouped into
"Not completed" and "Completed" sections.
"""

import os
import sys
from typing import Iterable

from noted.db import Note, sort_notes


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_GREEN = "\033[92m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        # Disable if NO_COLOR is set or not a tty
        if os.environ.get("NO_COLOR"):
            return False
        return sys.stdout.isatty()


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


def format_note(note: Note) -> str:
    """Format a note as `007: name  |  text`."""
    return f"{note.id:0>3}: {note.name}  |  {note.text}"


def format_notes(notes: Iterable[Note]) -> str:
    """
    Format notes in canonical order under section headers.

    The "Completed:" header only appears when at least one note is completed.
    """
    lines = [c("Not completed:", Colors.BOLD, Colors.BRIGHT_YELLOW)]
    in_completed = False

    for note in sort_notes(notes):
        if note.completed and not in_completed:
            in_completed = True
            lines.append("")
            lines.append(c("Completed:", Colors.BOLD, Colors.BRIGHT_GREEN))
        lines.append(format_note(note))

    return "\n".join(lines)
