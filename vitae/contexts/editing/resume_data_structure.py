"""
Resume Document Structure

Defines the root snapshot of a résumé being edited. A ResumeDocument is never
edited in place; every mutation in vitae.contexts.editing.mutations returns a
new snapshot that shares unchanged records with the previous one.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple, Type

from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    SkillEntry,
)

# Collection name -> entry record type, in form order
COLLECTION_TYPES: Dict[str, Type] = {
    "education": EducationEntry,
    "experience": ExperienceEntry,
    "skills": SkillEntry,
    "projects": ProjectEntry,
}

COLLECTIONS = tuple(COLLECTION_TYPES)


@dataclass(frozen=True)
class ResumeDocument:
    """
    Immutable snapshot of a complete résumé.

    Attributes:
        personal_info: Header block
        education: Education entries in display order
        experience: Experience entries in display order
        skills: Skill entries in display order
        projects: Project entries in display order
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()

    def collection(self, name: str) -> tuple:
        """Return the entries of a named collection."""
        return getattr(self, name)

    def find_entry(self, name: str, entry_id: str):
        """Return the entry with the given id, or None if the snapshot has none."""
        for entry in self.collection(name):
            if entry.id == entry_id:
                return entry
        return None

    @property
    def is_empty(self) -> bool:
        """True when no section would render any content."""
        return not self.personal_info.summary and not any(
            self.collection(name) for name in COLLECTIONS
        )


def new_document() -> ResumeDocument:
    """Create the empty document a session starts from."""
    return ResumeDocument()


def document_to_dict(doc: ResumeDocument) -> Dict[str, Any]:
    """
    Convert a snapshot to plain Python containers.

    Skill levels become their string values and tuples become lists, so the
    result can be dumped as YAML or JSON for display.
    """
    data = asdict(doc)
    for skill in data["skills"]:
        skill["level"] = str(skill["level"])
    for experience in data["experience"]:
        experience["bullets"] = list(experience["bullets"])
    for name in COLLECTIONS:
        data[name] = list(data[name])
    return data
