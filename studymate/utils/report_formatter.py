"""
Formatting helpers for text-based progress and profile reports.

Used by the CLI scripts to render aligned tables; the core contexts never
import this module.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        # Truncate so one long title can't break the column grid
        text = str(value)
        if len(text) > self.width:
            text = text[: max(self.width - 1, 0)] + "…"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 72):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def progress_bar(percent: int, width: int = 20) -> str:
    """
    Render a percentage as a fixed-width text bar, e.g. "[#####.....]".

    Values outside [0, 100] are clamped for display only.
    """
    clamped = min(max(percent, 0), 100)
    filled = (clamped * width) // 100
    return "[" + "#" * filled + "." * (width - filled) + "]"
