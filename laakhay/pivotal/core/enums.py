"""Core enumerations shared by the transport and pagination layers.

Key Types:
    - HTTPMethod: Verbs accepted by the request executor
    - SessionStatus: Terminal state of a fetch session
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP verbs supported by the Tracker v5 API."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @classmethod
    def from_str(cls, method: "str | HTTPMethod") -> "HTTPMethod":
        """Normalize a method name ("GET", "get", HTTPMethod.GET) to the enum.

        Raises:
            ValueError: If the method is not supported
        """
        if isinstance(method, HTTPMethod):
            return method
        try:
            return cls(method.lower())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method}") from None


class SessionStatus(str, Enum):
    """How a fetch session ended.

    A session is RUNNING until exactly one of the terminal states is reached:
    COMPLETED (every item delivered), ABORTED (caller declined to continue)
    or FAILED (transport error, malformed response or callback error).
    """

    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.RUNNING

    def __str__(self) -> str:
        return self.value
