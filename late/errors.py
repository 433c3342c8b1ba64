"""Exception types raised by the late editor core."""


class LateError(Exception):
    """Base class for all editor errors."""


class DocumentIOError(LateError, OSError):
    """A document could not be read from or written to disk."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class KeywordSourceError(LateError, OSError):
    """The keyword file for a file extension could not be loaded.

    Treated like an I/O failure when opening a document.
    """

    def __init__(self, message: str, extension: str = ""):
        super().__init__(message)
        self.extension = extension
