"""Exception hierarchy for the JMAP client."""

from __future__ import annotations


class JmapError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(JmapError, ValueError):
    """A required value is missing or violates a protocol invariant."""


class MethodError(JmapError):
    """The server answered a method call with an ``error`` response."""

    def __init__(self, type: str, description: str | None = None) -> None:
        self.type = type
        self.description = description
        message = f"{type}: {description}" if description else type
        super().__init__(message)


class SetError(JmapError):
    """A ``setMessages`` call reported the target id as not updated/destroyed."""

    def __init__(self, id: str, error: dict | None = None) -> None:
        self.id = id
        self.error = error or {}
        super().__init__(f"Failed to update {id}: {self.error.get('type', 'unknown')}")


class MailboxNotFoundError(JmapError):
    """No mailbox with the requested role exists on the server."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"No mailbox with role {role}")
