"""
Progress Context

Responsibilities:
- Computes per-topic and per-company completion percentages
- Rolls up progress across collections (sum-weighted, never averaged)
- Builds the dashboard's combined progress and recent-activity list
- Filters company problem sets by title text and difficulty

Owns: Progress arithmetic and company filtering
Never: Loads catalog files or mutates catalog snapshots
"""

from studymate.contexts.progress.aggregator import (
    ActivityEntry,
    ProgressSummary,
    dashboard_progress,
    entity_progress,
    filter_companies,
    overall_progress,
    recent_activity,
    summarize_progress,
)

__all__ = [
    "ActivityEntry",
    "ProgressSummary",
    "dashboard_progress",
    "entity_progress",
    "filter_companies",
    "overall_progress",
    "recent_activity",
    "summarize_progress",
]
