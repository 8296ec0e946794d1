"""Draft errors raised by the core and translated to HTTP responses by the API."""


class DraftError(Exception):
    """Base class for recoverable draft errors."""


class InvalidSelection(DraftError):
    """Hero is unavailable, the turn does not match, or the draft is complete."""


class NothingToUndo(DraftError):
    """Undo requested with an empty draft history."""
