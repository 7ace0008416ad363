"""Exception types for errors that can and cannot be prevented by the caller."""


class NotImplementedFeatureError(NotImplementedError):
    """Raised when a requested feature or case is not implemented."""

    def __init__(self, message="not implemented"):
        super().__init__(message)


class DebugError(AssertionError):
    """Raised when an internal consistency check fails."""


class PermissionDeniedError(PermissionError):
    """Raised when an operation is refused for lack of permission."""


class CannotConnectError(ConnectionError):
    """Raised when a connection cannot be established."""