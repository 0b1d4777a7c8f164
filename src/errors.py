"""Error kinds reported to the user by the command loop.

Every NotepadError is recoverable: the loop prints str(err) and reads the
next command. Anything that is not a NotepadError is a bug and propagates.
"""


class NotepadError(Exception):
    """Base class for user-facing notepad failures."""


class InvalidArgument(NotepadError):
    """Wrong number of argument words, or empty note text."""


class NotANumber(NotepadError):
    """A position argument that does not parse as an integer."""


class InvalidPosition(NotepadError):
    """A position outside [1, count]."""


class StorageError(NotepadError):
    """Open, read or write failure on a notes file."""


class DecodeError(StorageError):
    """A notes file whose contents are not a valid notes array."""
