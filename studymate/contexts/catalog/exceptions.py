"""Custom exceptions for the catalog context."""

from typing import Any, Optional


class InvalidCatalogStructureError(ValueError):
    """
    Raised when a catalog payload doesn't match the expected record shape.

    Attributes:
        message: Error description
        record_kind: "topic", "company", "problem" or "company[i].problem"
        index: Position of the offending record in its list
        key: Missing or malformed key, if known
        payload: The offending record (truncated in the message)
    """

    def __init__(
        self,
        message: str,
        record_kind: Optional[str] = None,
        index: Optional[int] = None,
        key: Optional[str] = None,
        payload: Any = None,
    ):
        self.message = message
        self.record_kind = record_kind
        self.index = index
        self.key = key
        self.payload = payload

        parts = [message]

        if record_kind is not None and index is not None:
            parts.append(f"Record: {record_kind}[{index}]")

        if key:
            parts.append(f"Key: {key}")

        if payload is not None:
            snippet = repr(payload)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Payload: {snippet}")

        super().__init__("\n".join(parts))
