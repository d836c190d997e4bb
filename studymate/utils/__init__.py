"""
Shared utilities for StudyMate.

Common functionality used across contexts:
- Text filtering helpers
- Logger setup
- Report formatting
"""

from studymate.utils.filtering import matches_query, normalize_difficulty_label

__all__ = ["matches_query", "normalize_difficulty_label"]
