"""
Resume Component Data Structures

Defines the records that make up a résumé document: the personal info block
and the four repeated-entry types. All records are frozen; edits produce new
records through dataclasses.replace.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SkillLevel(str, Enum):
    """Self-assessed proficiency for a skill entry."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    def __str__(self) -> str:
        return self.value


DEFAULT_SKILL_LEVEL = SkillLevel.INTERMEDIATE


@dataclass(frozen=True)
class PersonalInfo:
    """
    Singleton header block of a résumé.

    Attributes:
        name: Full name
        email: Contact email
        phone: Contact phone number
        location: City/region
        website: Personal site or profile URL
        summary: Professional summary paragraph
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""


@dataclass(frozen=True)
class EducationEntry:
    """
    One education entry.

    Attributes:
        id: Durable entry identity
        institution: School or university
        degree: Degree title (e.g., "BSc")
        field_of_study: Major or field
        start_date: ISO date or ""
        end_date: ISO date or ""
        description: Free-text details
    """

    id: str
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One work experience entry.

    Attributes:
        id: Durable entry identity
        company: Employer
        position: Job title
        start_date: ISO date or ""
        end_date: ISO date or "", always "" while current is True
        current: Whether this is an ongoing role
        description: Free-text role description
        bullets: Ordered achievement bullets (blank bullets allowed)
    """

    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SkillEntry:
    """
    One skill entry.

    Attributes:
        id: Durable entry identity
        name: Skill name
        level: Proficiency level
    """

    id: str
    name: str = ""
    level: SkillLevel = DEFAULT_SKILL_LEVEL


@dataclass(frozen=True)
class ProjectEntry:
    """
    One project entry.

    Attributes:
        id: Durable entry identity
        name: Project name
        description: What the project is
        technologies: Free-text technology list
        link: Project URL
    """

    id: str
    name: str = ""
    description: str = ""
    technologies: str = ""
    link: str = ""
