"""Custom exceptions for the feedback context."""

from typing import Any, Optional


class UnknownStruggleAreaError(ValueError):
    """
    Raised when a caller edits a selection with a tag outside the taxonomy.

    Read-only operations (suggestions_for) ignore unknown tags instead.

    Attributes:
        area: The rejected tag
    """

    def __init__(self, area: Any):
        self.area = area
        super().__init__(f"Unknown struggle area: {area!r}")


class FeedbackValidationError(ValueError):
    """
    Raised when a feedback submission is incomplete.

    Attributes:
        message: Error description
        field_name: Name of the offending submission field
    """

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.message = message
        self.field_name = field_name

        parts = [message]
        if field_name:
            parts.append(f"Field: {field_name}")

        super().__init__("\n".join(parts))
