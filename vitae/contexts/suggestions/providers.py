"""
Suggestion providers.

A provider is the external capability behind the suggestion adapter: given a
position (and a description, for bullets) it returns suggestion strings. The
adapter treats providers as unreliable and never lets their errors escape.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict, List, Sequence, TypeVar

from dotenv import load_dotenv

from vitae.contexts.suggestions.logger import _log_debug, _log_warning

load_dotenv()
SUGGESTION_MODEL = os.getenv("VITAE_SUGGESTION_MODEL", "gpt-3.5-turbo")

# Retry configuration
MAX_RETRIES = 5
BASE_DELAY = 1.0

NUM_BULLETS = 5
NUM_SKILLS = 5

T = TypeVar("T")


class SuggestionProvider(ABC):
    """Abstract base for suggestion providers."""

    name: str = "provider"

    @abstractmethod
    async def generate_bullets(self, position: str, description: str) -> List[str]:
        """Return résumé bullet points for a role."""

    @abstractmethod
    async def suggest_skills(self, position: str) -> List[str]:
        """Return skill names relevant to a role."""


# =========================================================================
# STATIC PROVIDER
# =========================================================================

BULLET_TEMPLATES = (
    "Led cross-functional team to deliver {position} projects on time and under budget",
    "Improved {position} processes resulting in 20% efficiency gain",
    "Collaborated with stakeholders to define requirements for {position} initiatives",
    "Mentored junior team members in {position} best practices",
    "Implemented innovative solutions to complex {position} challenges",
)

SKILLS_BY_POSITION: Dict[str, Sequence[str]] = {
    "Software Engineer": ("JavaScript", "React", "Node.js", "TypeScript", "Git"),
    "Data Scientist": ("Python", "Machine Learning", "SQL", "Data Visualization", "Statistics"),
    "Product Manager": (
        "Product Strategy",
        "User Research",
        "Agile",
        "Roadmapping",
        "Stakeholder Management",
    ),
    "Designer": ("UI/UX", "Figma", "Adobe Creative Suite", "Wireframing", "Prototyping"),
    "Marketing": ("Content Strategy", "SEO", "Social Media", "Analytics", "Email Marketing"),
}

DEFAULT_SKILLS = ("Communication", "Problem Solving", "Teamwork", "Time Management", "Adaptability")


class StaticSuggestionProvider(SuggestionProvider):
    """
    Table-driven provider that needs no network access.

    Bullets are fixed templates with the position substituted in. Skills come
    from the first role in SKILLS_BY_POSITION whose name appears in the
    position (case-insensitive), or DEFAULT_SKILLS when none does.
    """

    name = "static"

    async def generate_bullets(self, position: str, description: str) -> List[str]:
        return [template.format(position=position) for template in BULLET_TEMPLATES]

    async def suggest_skills(self, position: str) -> List[str]:
        position_lower = position.lower()
        for role, skills in SKILLS_BY_POSITION.items():
            if role.lower() in position_lower:
                return list(skills)
        return list(DEFAULT_SKILLS)


# =========================================================================
# OPENAI PROVIDER
# =========================================================================

BULLETS_SYSTEM_PROMPT = (
    "You are a professional resume writer. Generate 5 concise, impactful bullet points for a "
    "resume based on the job position and description provided. Focus on achievements, skills, "
    "and responsibilities. Use action verbs and quantify results where possible."
)

SKILLS_SYSTEM_PROMPT = (
    "You are a career advisor. Generate a list of 5 relevant skills for the given job position. "
    "Return only the skill names separated by commas."
)


async def _retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    retryable_exception: type,
    error_message: str,
) -> T:
    """
    Await operation with exponential backoff retry on a specific exception.

    Args:
        operation: Coroutine factory that performs the API request
        retryable_exception: Exception type that triggers retry
        error_message: Message prefix for retry logging (e.g., "Rate limited")
    """
    for attempt in range(MAX_RETRIES):
        try:
            return await operation()
        except retryable_exception:
            if attempt == MAX_RETRIES - 1:
                raise
            delay = BASE_DELAY * (2**attempt)
            _log_warning(
                f"{error_message}, retrying in {delay:.1f}s... (attempt {attempt + 1}/{MAX_RETRIES})"
            )
            await asyncio.sleep(delay)


def parse_bullet_lines(content: str) -> List[str]:
    """Split a completion into bullet strings, dropping blank lines and list markers."""
    bullets = []
    for line in content.splitlines():
        line = line.strip().lstrip("-*•").strip()
        # Numbered lists: "1. text" / "2) text"
        head, _, rest = line.partition(" ")
        if rest and head.rstrip(".)").isdigit():
            line = rest.strip()
        if line:
            bullets.append(line)
    return bullets


def parse_skill_list(content: str) -> List[str]:
    """Split a comma-separated completion into skill names."""
    return [skill.strip() for skill in content.split(",") if skill.strip()]


class OpenAISuggestionProvider(SuggestionProvider):
    """
    Provider backed by the OpenAI chat completions API.

    Attributes:
        model: Chat model name (default: VITAE_SUGGESTION_MODEL)
    """

    name = "openai"

    def __init__(self, model: str = SUGGESTION_MODEL, client=None):
        # Lazy import - openai SDK is heavy, only load if this provider is used
        import openai

        if client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError("OPENAI_API_KEY environment variable not set")
            client = openai.AsyncOpenAI(api_key=api_key)

        self.model = model
        self._client = client
        self._retryable_exception = openai.RateLimitError

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        async def request():
            return await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )

        completion = await _retry_with_backoff(request, self._retryable_exception, "Rate limited")
        content = completion.choices[0].message.content if completion.choices else None
        _log_debug(f"{self.model} completion: {len(content or '')} chars")
        return content or ""

    async def generate_bullets(self, position: str, description: str) -> List[str]:
        content = await self._complete(
            BULLETS_SYSTEM_PROMPT,
            f"Generate {NUM_BULLETS} professional resume bullet points for a {position} position "
            f"with this description: {description}",
        )
        return parse_bullet_lines(content)

    async def suggest_skills(self, position: str) -> List[str]:
        content = await self._complete(
            SKILLS_SYSTEM_PROMPT,
            f"What are {NUM_SKILLS} key skills for a {position} position?",
        )
        return parse_skill_list(content)
