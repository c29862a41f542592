# Knowledge Package
"""
Disease profiles and symptom synonyms used by the symptom engines.
"""

from .knowledge_base import DiseaseProfile, KnowledgeBase, default_knowledge_base, load_knowledge_base

__all__ = [
    "DiseaseProfile",
    "KnowledgeBase",
    "default_knowledge_base",
    "load_knowledge_base",
]
