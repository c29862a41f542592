"""
Symptom Matcher
===============

Lexical similarity between a patient-reported phrase and a disease keyword.

Scoring rules (first rule that fires wins):
- 1.0  substring containment in either direction
- 0.9  a synonym of a related canonical symptom matches the user phrase
- 0.7  two tokens longer than 3 characters overlap as substrings
- 0.0  otherwise
"""

from typing import Mapping, Sequence

DIRECT_MATCH = 1.0
SYNONYM_MATCH = 0.9
PARTIAL_MATCH = 0.7
NO_MATCH = 0.0

MIN_TOKEN_LENGTH = 3    # Tokens must be longer than this to partially match


def _normalize(text: str) -> str:
    return (text or "").lower().strip()


def direct_match(user_phrase: str, keyword: str) -> bool:
    """Substring containment either way, case-insensitive."""
    user = _normalize(user_phrase)
    key = _normalize(keyword)
    if not user or not key:
        return False
    return user in key or key in user


class SymptomMatcher:
    """Scores a user phrase against a disease keyword."""

    def __init__(self, synonyms: Mapping[str, Sequence[str]]):
        self.synonyms = synonyms

    def match(self, user_phrase: str, keyword: str) -> float:
        user = _normalize(user_phrase)
        key = _normalize(keyword)
        if not user or not key:
            return NO_MATCH

        if user in key or key in user:
            return DIRECT_MATCH

        for canonical, alternates in self.synonyms.items():
            if canonical in key or key in canonical:
                if any(alt in user or user in alt for alt in alternates):
                    return SYNONYM_MATCH

        for user_token in user.split():
            if len(user_token) <= MIN_TOKEN_LENGTH:
                continue
            for key_token in key.split():
                if len(key_token) <= MIN_TOKEN_LENGTH:
                    continue
                if user_token in key_token or key_token in user_token:
                    return PARTIAL_MATCH

        return NO_MATCH
