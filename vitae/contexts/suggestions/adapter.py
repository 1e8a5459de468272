"""
Suggestion Adapter

Async boundary between the résumé model and a suggestion provider. Provider
failures become fixed fallback values here, so callers never need to catch
anything. Results re-enter the model through the ordinary mutation functions.
"""

from typing import Iterable, List, Sequence

from vitae.contexts.editing.mutations import add_entry, update_entry
from vitae.contexts.editing.resume_components_data_structures import DEFAULT_SKILL_LEVEL
from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.editing.session import EditingSession
from vitae.contexts.suggestions.logger import (
    _log_debug,
    log_request_failed,
    log_request_result,
    log_skills_merged,
)
from vitae.contexts.suggestions.providers import StaticSuggestionProvider, SuggestionProvider

BULLET_FAILURE_MESSAGE = "Failed to generate suggestions. Please try again."
FALLBACK_SKILLS = ("Communication", "Problem Solving", "Teamwork")


class SuggestionAdapter:
    """
    Requests suggestions from a provider and merges them into snapshots.

    Attributes:
        provider: The suggestion capability (default: StaticSuggestionProvider)
    """

    def __init__(self, provider: SuggestionProvider = None):
        self.provider = provider or StaticSuggestionProvider()

    # =========================================================================
    # PROVIDER REQUESTS
    # =========================================================================

    async def request_bullets(self, position: str, description: str) -> List[str]:
        """
        Ask the provider for bullet points.

        Returns:
            Suggested bullets, or [BULLET_FAILURE_MESSAGE] if the provider failed
        """
        try:
            response = await self.provider.generate_bullets(position, description)
            bullets = [str(bullet) for bullet in response]
        except Exception as e:
            log_request_failed("bullet", self.provider.name, e)
            return [BULLET_FAILURE_MESSAGE]

        log_request_result("bullet", self.provider.name, bullets)
        return bullets

    async def request_skill_suggestions(self, position: str) -> List[str]:
        """
        Ask the provider for skill names.

        Returns:
            Suggested skills, or FALLBACK_SKILLS if the provider failed
        """
        try:
            response = await self.provider.suggest_skills(position)
            skills = [str(skill) for skill in response]
        except Exception as e:
            log_request_failed("skill", self.provider.name, e)
            return list(FALLBACK_SKILLS)

        log_request_result("skill", self.provider.name, skills)
        return skills

    # =========================================================================
    # MERGE POLICIES
    # =========================================================================

    @staticmethod
    def merge_skill_suggestions(doc: ResumeDocument, names: Iterable[str]) -> ResumeDocument:
        """
        Add suggested skills that the document does not already have.

        A suggestion is skipped when its name matches an existing skill, or an
        earlier suggestion in the same batch, ignoring case and surrounding
        whitespace. Blank suggestions are skipped too.

        Args:
            doc: Current snapshot
            names: Suggested skill names, in order

        Returns:
            New snapshot with the remaining suggestions appended at Intermediate level
        """
        seen = {skill.name.strip().casefold() for skill in doc.skills}
        suggested = added = 0

        for name in names:
            suggested += 1
            name = name.strip()
            key = name.casefold()
            if not key or key in seen:
                continue
            seen.add(key)
            doc = add_entry(doc, "skills", name=name, level=DEFAULT_SKILL_LEVEL)
            added += 1

        log_skills_merged(suggested, added)
        return doc

    @staticmethod
    def apply_bullet_suggestions(
        doc: ResumeDocument, experience_id: str, bullets: Sequence[str]
    ) -> ResumeDocument:
        """
        Replace an experience entry's bullets with a new suggestion set.

        Bullets from an earlier generation are stale once regenerated, so this
        overwrites rather than appends. A removed entry makes this a no-op.
        """
        return update_entry(doc, "experience", experience_id, "bullets", list(bullets))

    @staticmethod
    def latest_position(doc: ResumeDocument) -> str:
        """Position of the first experience entry, the one skill suggestions are based on."""
        if not doc.experience:
            return ""
        return doc.experience[0].position.strip()

    # =========================================================================
    # SESSION WORKFLOWS
    # =========================================================================
    # Context is read from the snapshot current when the request starts; the
    # result is merged into the snapshot current when it resolves.

    async def generate_bullets(self, session: EditingSession, experience_id: str) -> List[str]:
        """
        Regenerate the bullets of one experience entry.

        Args:
            session: Editing session holding the current snapshot
            experience_id: Target experience entry

        Returns:
            The bullets that were applied ([] when the entry did not exist, or
            was removed while the request was in flight)
        """
        entry = session.document.find_entry("experience", experience_id)
        if entry is None:
            _log_debug(f"No experience entry '{experience_id}' to generate bullets for")
            return []

        bullets = await self.request_bullets(entry.position, entry.description)
        if session.document.find_entry("experience", experience_id) is None:
            _log_debug(f"Experience entry '{experience_id}' removed before bullets arrived")
            return []

        session.apply(self.apply_bullet_suggestions, experience_id, bullets)
        return bullets

    async def suggest_skills(self, session: EditingSession) -> List[str]:
        """
        Suggest skills for the first experience entry's position and merge them.

        Returns:
            The provider's suggestions before de-duplication ([] when there is
            no position to ask about)
        """
        position = self.latest_position(session.document)
        if not position:
            _log_debug("No experience position to base skill suggestions on")
            return []

        names = await self.request_skill_suggestions(position)
        session.apply(self.merge_skill_suggestions, names)
        return names
