"""Custom exceptions for the profile context."""

from typing import Any, Optional


class InvalidProfileStructureError(ValueError):
    """
    Raised when a profile payload or edit doesn't fit the profile shape.

    Attributes:
        message: Error description
        section: Profile section involved (e.g., "skills.tools"), if known
        payload: The offending value (truncated in the message)
    """

    def __init__(self, message: str, section: Optional[str] = None, payload: Any = None):
        self.message = message
        self.section = section
        self.payload = payload

        parts = [message]

        if section:
            parts.append(f"Section: {section}")

        if payload is not None:
            snippet = repr(payload)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Payload: {snippet}")

        super().__init__("\n".join(parts))
