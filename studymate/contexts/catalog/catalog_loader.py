"""
Catalog snapshot loading.

Builds an immutable Catalog (topics + companies) from a mapping or from a
YAML/JSON catalog file. This is the boundary with the external content catalog:
structural problems are reported here with InvalidCatalogStructureError so the
Progress context can assume well-formed records.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Tuple

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from studymate.contexts.catalog.catalog_data_structure import Company, Topic
from studymate.contexts.catalog.exceptions import InvalidCatalogStructureError
from studymate.contexts.catalog.logger import _log_debug, _log_info, _log_warning

CATALOG_KEYS = ("topics", "companies")


@dataclass(frozen=True)
class Catalog:
    """
    Read-only snapshot of the content catalog.

    Factory methods:
        from_dict(data) - Build from a mapping with "topics" and/or "companies"
        from_file(path) - Load a YAML (or JSON) catalog file
    """

    topics: Tuple[Topic, ...] = field(default_factory=tuple)
    companies: Tuple[Company, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Catalog":
        """
        Build a catalog from a mapping.

        One of the two lists may be absent and becomes empty; a mapping with
        neither key is not a catalog.

        Raises:
            InvalidCatalogStructureError: If the payload or any record is malformed
        """
        if not isinstance(data, Mapping):
            raise InvalidCatalogStructureError(
                f"Catalog must be a mapping, got {type(data).__name__}", payload=data
            )
        if not any(key in data for key in CATALOG_KEYS):
            raise InvalidCatalogStructureError(
                "Catalog has neither 'topics' nor 'companies'", payload=dict(data)
            )

        raw_topics = _list_field(data, "topics")
        raw_companies = _list_field(data, "companies")

        topics = tuple(Topic.from_dict(t, index=i) for i, t in enumerate(raw_topics))
        companies = tuple(Company.from_dict(c, index=i) for i, c in enumerate(raw_companies))

        for kind, records in (("topic", topics), ("company", companies)):
            for record in records:
                if record.solved_problems > record.total_problems:
                    _log_warning(
                        f"{kind} '{record.id}' reports {record.solved_problems} solved "
                        f"of {record.total_problems} total"
                    )

        return cls(topics=topics, companies=companies)

    @classmethod
    def from_file(cls, file_path: Path) -> "Catalog":
        """
        Load a catalog file with OmegaConf.

        Values are taken literally: "${...}" in catalog text is never
        interpolated.

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidCatalogStructureError: If the file isn't valid YAML or the contents are malformed
        """
        file_path = Path(file_path)
        _log_debug(f"Loading catalog from {file_path}")
        try:
            conf = OmegaConf.load(file_path)
            data = OmegaConf.to_container(conf, resolve=False)
        except FileNotFoundError:
            raise
        except (yaml.YAMLError, OmegaConfBaseException, OSError) as e:
            # OmegaConf.load raises OSError for a numeric or boolean top-level document
            raise InvalidCatalogStructureError(
                f"Could not parse {file_path.name}: {type(e).__name__}: {e}"
            ) from e
        catalog = cls.from_dict(data)
        _log_info(
            f"Loaded {len(catalog.topics)} topics and {len(catalog.companies)} companies "
            f"from {file_path.name}"
        )
        return catalog


def _list_field(data: Mapping[str, Any], key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidCatalogStructureError(f"Field '{key}' must be a list", key=key)
    return list(value)
