"""
Disease Knowledge Base
======================

Immutable registry of disease profiles plus the symptom synonym table.

The registry is built once per process and shared read-only by every
analyzer. Profiles keep their declaration order, which the scorer relies
on to break confidence ties.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .. import config
from ..models import SeverityTier
from .disease_profiles import DISEASE_PROFILES, SYMPTOM_SYNONYMS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiseaseProfile:
    """One disease entry: keywords to match and what to recommend."""
    name: str
    keywords: Tuple[str, ...]
    severity_tier: SeverityTier
    specialist: str
    tests: Tuple[str, ...] = ()
    actions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiseaseProfile":
        return cls(
            name=data["name"],
            keywords=tuple(k.lower().strip() for k in data.get("keywords", [])),
            severity_tier=SeverityTier(data["severity_tier"]),
            specialist=data.get("specialist", "General Physician"),
            tests=tuple(data.get("tests", [])),
            actions=tuple(data.get("actions", [])),
        )


class KnowledgeBase:
    """
    Ordered, read-only collection of DiseaseProfile objects.

    Iteration yields profiles in declaration order. Synonyms map a
    canonical symptom phrase to its alternate lay phrasings.
    """

    def __init__(self, profiles: List[DiseaseProfile], synonyms: Optional[Mapping[str, List[str]]] = None):
        seen = set()
        for profile in profiles:
            if profile.name in seen:
                raise ValueError(f"Duplicate disease in knowledge base: {profile.name}")
            seen.add(profile.name)

        self._profiles: Tuple[DiseaseProfile, ...] = tuple(profiles)
        self._by_name = MappingProxyType({p.name: p for p in self._profiles})
        self.synonyms: Mapping[str, Tuple[str, ...]] = MappingProxyType({
            canonical.lower().strip(): tuple(alt.lower().strip() for alt in alternates)
            for canonical, alternates in (synonyms or {}).items()
        })

    def __iter__(self) -> Iterator[DiseaseProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[DiseaseProfile]:
        return self._by_name.get(name)

    @property
    def names(self) -> List[str]:
        return [p.name for p in self._profiles]

    def specialists(self) -> List[str]:
        """Distinct specialists referenced by the profiles, sorted."""
        return sorted({p.specialist for p in self._profiles})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeBase":
        """Build from {"diseases": [...], "synonyms": {...}}."""
        profiles = [DiseaseProfile.from_dict(entry) for entry in data.get("diseases", [])]
        return cls(profiles, data.get("synonyms", {}))

    @classmethod
    def from_json(cls, path) -> "KnowledgeBase":
        with open(Path(path), 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)


def default_knowledge_base() -> KnowledgeBase:
    return KnowledgeBase.from_dict({"diseases": DISEASE_PROFILES, "synonyms": SYMPTOM_SYNONYMS})


@lru_cache(maxsize=None)
def load_knowledge_base(path: Optional[str] = None) -> KnowledgeBase:
    """
    Load the process-wide knowledge base.

    Uses `path`, then CARE_INSIGHTS_KB_PATH, then the built-in profiles.
    """
    path = path or config.KNOWLEDGE_BASE_PATH
    if path:
        kb = KnowledgeBase.from_json(path)
        logger.info(f"Loaded {len(kb)} diseases from {path}")
    else:
        kb = default_knowledge_base()
        logger.info(f"Loaded {len(kb)} built-in diseases, {len(kb.synonyms)} synonym groups")
    return kb
