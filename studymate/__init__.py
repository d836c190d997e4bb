"""
StudyMate - Progress & Feedback Aggregation Engine

The computed core behind the StudyMate learning and interview-prep client.

Architecture:
- Catalog Context: Topic/company/problem snapshots and catalog file loading
- Progress Context: Per-entity and roll-up completion percentages, company filtering
- Feedback Context: Struggle-area taxonomy and personalized learning suggestions
- Profile Context: Profile records and weighted profile-strength scoring
"""

__version__ = "0.1.0"
