"""
Suggestions Context

Responsibilities:
- Requests bullet-point and skill suggestions from a provider
- Converts provider failures into fixed fallback values
- Merges suggestions into snapshots through the editing mutations
  (skills de-duplicated case-insensitively, bullets replaced wholesale)

Owns: Provider boundary, fallback values, merge policies
Never: Edits a snapshot in place or bypasses the mutation functions
"""

from vitae.contexts.suggestions.adapter import (
    BULLET_FAILURE_MESSAGE,
    FALLBACK_SKILLS,
    SuggestionAdapter,
)
from vitae.contexts.suggestions.providers import (
    OpenAISuggestionProvider,
    StaticSuggestionProvider,
    SuggestionProvider,
)

__all__ = [
    "SuggestionAdapter",
    "SuggestionProvider",
    "StaticSuggestionProvider",
    "OpenAISuggestionProvider",
    "BULLET_FAILURE_MESSAGE",
    "FALLBACK_SKILLS",
]
