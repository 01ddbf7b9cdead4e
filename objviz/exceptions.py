# objviz/exceptions.py

class VisualizationError(Exception):
    """Base class for every error raised by objviz."""
    pass

class InvalidInputError(VisualizationError):
    """Raised when the root value is absent (None)."""
    pass

class MemberAccessError(VisualizationError):
    """
    Wraps an exception raised while reading a member.

    Never propagated out of a traversal: it is attached to a ``Diagnostic``
    and the member is skipped.
    """

    def __init__(self, path: str, member: str, cause: BaseException):
        self.path = path
        self.member = member
        self.cause = cause
        super().__init__(
            f"Cannot read member '{member}' at {path}: "
            f"{type(cause).__name__}: {cause}"
        )

class TraversalLimitError(VisualizationError):
    """Raised when a configured node-count or depth ceiling is exceeded."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"{message} (at {path})")

class SessionReuseError(VisualizationError):
    """Raised when a Session is built more than once."""
    pass

class SinkError(VisualizationError):
    """Raised when the output document cannot be written."""
    pass

class EmitterNotFoundError(VisualizationError):
    """Raised when an emitter plugin name is unknown."""
    pass
