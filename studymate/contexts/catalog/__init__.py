"""
Catalog Context

Responsibilities:
- Defines the read-only Topic, Company and Problem snapshot records
- Loads catalog files into immutable Catalog snapshots
- Validates catalog structure at the boundary

Owns: Catalog record shapes and catalog file loading
Never: Computes progress or mutates snapshots after construction
"""

from studymate.contexts.catalog.catalog_data_structure import (
    Company,
    Difficulty,
    Problem,
    Topic,
)
from studymate.contexts.catalog.catalog_loader import Catalog
from studymate.contexts.catalog.exceptions import InvalidCatalogStructureError

__all__ = [
    "Catalog",
    "Company",
    "Difficulty",
    "Problem",
    "Topic",
    "InvalidCatalogStructureError",
]
