"""Bounded contexts of the StudyMate engine."""
