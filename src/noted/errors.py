"""
Error types for Noted.

Storage failures end the run. Command errors are reported to the user and,
in interactive mode, the prompt keeps going.
"""


class NotedError(Exception):
    """Base class for all Noted errors."""


class StorageUnavailable(NotedError):
    """The database file could not be opened or created."""


class StorageError(NotedError):
    """A statement failed against an open database."""


class CommandError(NotedError):
    """Bad input on the command line."""


class MissingField(CommandError):
    """A required command argument was not given."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing field: {field}")


class InvalidId(CommandError):
    """A note id argument is not an integer."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid id: {value}")
