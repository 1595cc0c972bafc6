"""
CLI for Noted.

Minimal CLI using stdlib, in the same spirit as a shell one-liner.
Run without arguments for an interactive prompt.

Usage:
    noted add milk "Buy two litres"   # Add a note
    noted list                        # Show all notes
    noted                             # Interactive mode
    noted --help                      # Show help
"""

import logging
import sys
from typing import Callable

from noted.config import get_db_path, get_log_level, load_config
from noted.db import Database, sort_notes
from noted.display import format_note, format_notes
from noted.errors import CommandError, InvalidId, MissingField, NotedError
from noted.tokenizer import tokenize

logger = logging.getLogger(__name__)

PROMPT = "noted> "

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def setup_logging(level: str) -> None:
    """Configure root logging once for the process. Unknown levels mean WARNING."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=numeric_level,
        stream=sys.stderr,
    )


def print_usage() -> None:
    """Print the one-line usage."""
    print("Usage: noted [command]. To display help, use noted help.")


def print_help() -> None:
    """Print help message."""
    print_usage()
    print("""
Commands:
    help, h                 Show this help
    list, l                 List all notes
    add, a <name> [text]    Add a new note
    complete, c <id>        Mark a note as completed
    uncomplete, u <id>      Mark a note as not completed
    delete, d <id>          Delete a note
    rename, r <id> <name>   Give a note a new name
    text, t <id> <text>     Replace the text of a note
    search, s <pattern>     Find notes by name (% = anything, _ = one char)
    version, v              Show version

Run noted with no command for an interactive prompt.
An empty line leaves it.

Examples:
    noted add test "This is a test note!"
    noted complete 1
    noted search "te%"
""")


def print_version() -> None:
    """Print version."""
    from noted import __version__
    print(f"noted {__version__}")


def require(args: list[str], index: int, field: str) -> str:
    """Get a required positional argument or raise MissingField."""
    if index >= len(args) or not args[index]:
        raise MissingField(field)
    return args[index]


def parse_id(args: list[str], index: int = 0) -> int:
    """Get a note id argument as an int."""
    value = require(args, index, "Id")
    try:
        note_id = int(value)
    except ValueError:
        raise InvalidId(value) from None
    if not MIN_ID <= note_id <= MAX_ID:
        raise InvalidId(value)
    return note_id


def cmd_list(db: Database, args: list[str]) -> int:
    """Show every note, not completed first."""
    print(format_notes(db.get_all_notes()))
    return 0


def cmd_add(db: Database, args: list[str]) -> int:
    """Add a note. Text is optional."""
    name = require(args, 0, "Name")
    text = args[1] if len(args) > 1 else ""
    note = db.add_note(name, text)
    print(f"Added: {format_note(note)}")
    return 0


def cmd_complete(db: Database, args: list[str]) -> int:
    db.complete_note(parse_id(args))
    return 0


def cmd_uncomplete(db: Database, args: list[str]) -> int:
    db.uncomplete_note(parse_id(args))
    return 0


def cmd_delete(db: Database, args: list[str]) -> int:
    db.remove_note(parse_id(args))
    return 0


def cmd_rename(db: Database, args: list[str]) -> int:
    note_id = parse_id(args)
    db.rename_note(note_id, require(args, 1, "Name"))
    return 0


def cmd_text(db: Database, args: list[str]) -> int:
    note_id = parse_id(args)
    # Empty text is allowed, only a missing argument is an error
    if len(args) < 2:
        raise MissingField("Text")
    db.change_note_text(note_id, args[1])
    return 0


def cmd_search(db: Database, args: list[str]) -> int:
    """Find notes by name pattern."""
    pattern = require(args, 0, "Pattern")
    notes = sort_notes(db.search_notes(pattern))
    if not notes:
        print(f"No notes matching: {pattern}")
        return 0
    for note in notes:
        print(format_note(note))
    return 0


Handler = Callable[[Database, list[str]], int]

COMMANDS: dict[str, Handler] = {
    "list": cmd_list,
    "l": cmd_list,
    "add": cmd_add,
    "a": cmd_add,
    "complete": cmd_complete,
    "c": cmd_complete,
    "uncomplete": cmd_uncomplete,
    "u": cmd_uncomplete,
    "delete": cmd_delete,
    "d": cmd_delete,
    "rename": cmd_rename,
    "r": cmd_rename,
    "text": cmd_text,
    "t": cmd_text,
    "search": cmd_search,
    "s": cmd_search,
}

HELP_COMMANDS = ("help", "h", "--help", "-h")
VERSION_COMMANDS = ("version", "v", "--version", "-v")


def run_builtin(command: str) -> bool:
    """Handle commands that need no database. Returns True if handled."""
    if command in HELP_COMMANDS:
        print_help()
        return True
    if command in VERSION_COMMANDS:
        print_version()
        return True
    if command not in COMMANDS:
        print_usage()
        return True
    return False


def dispatch(db: Database, args: list[str]) -> int:
    """Run one command against an open database."""
    if not args:
        print_usage()
        return 0

    command = args[0].lower()
    if run_builtin(command):
        return 0

    logger.debug("Dispatching %s %s", command, args[1:])
    return COMMANDS[command](db, args[1:])


def interactive(db: Database) -> int:
    """
    Read commands until an empty line or EOF.

    Command errors are reported and the prompt keeps going. Storage
    errors propagate and end the session.
    """
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0

        if not line:
            return 0

        try:
            dispatch(db, tokenize(line))
        except CommandError as e:
            print(f"Error: {e}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    One-shot mode opens the database for a single command. With no
    arguments the database stays open for the whole interactive session.
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
    except Exception as e:
        print(f"Error: cannot read config: {e}", file=sys.stderr)
        return 1

    setup_logging(get_log_level(config))

    if args and run_builtin(args[0].lower()):
        return 0

    try:
        with Database(get_db_path(config)) as db:
            if not args:
                return interactive(db)
            return dispatch(db, args)
    except NotedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
