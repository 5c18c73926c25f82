class ContextError(Exception):
    """Base class for context storage errors"""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"context {name!r}")


class ContextNotFoundError(ContextError):
    """Raised when a named context has no file on disk"""

    def __init__(self, name: str):
        super().__init__(name, f"context {name!r} does not exist")


class ContextExistsError(ContextError):
    """Raised by a non-overwriting rename when the destination exists"""

    def __init__(self, name: str):
        super().__init__(name, f"context {name!r} already exists")
