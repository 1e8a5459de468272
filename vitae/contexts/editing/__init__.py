"""
Editing Context

Responsibilities:
- Owns the résumé document model (personal info + four entry collections)
- Produces new immutable snapshots for every edit
- Keeps entry ids unique and entry order stable
- Enforces the in-progress experience rule (current=True clears end_date)

Owns: ResumeDocument snapshots, mutation functions, the editing session
Never: Decides how a document looks
"""

from vitae.contexts.editing.drafts import document_from_dict, load_draft
from vitae.contexts.editing.mutations import (
    add_bullet,
    add_entry,
    remove_bullet_at,
    remove_entry,
    update_bullet_at,
    update_entry,
    update_personal_info,
)
from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    SkillEntry,
    SkillLevel,
)
from vitae.contexts.editing.resume_data_structure import (
    COLLECTIONS,
    ResumeDocument,
    document_to_dict,
    new_document,
)
from vitae.contexts.editing.session import EditingSession

__all__ = [
    # Snapshot model
    "ResumeDocument",
    "PersonalInfo",
    "EducationEntry",
    "ExperienceEntry",
    "SkillEntry",
    "ProjectEntry",
    "SkillLevel",
    "COLLECTIONS",
    "new_document",
    "document_to_dict",
    # Mutations
    "add_entry",
    "update_entry",
    "remove_entry",
    "update_personal_info",
    "add_bullet",
    "update_bullet_at",
    "remove_bullet_at",
    # Session and drafts
    "EditingSession",
    "document_from_dict",
    "load_draft",
]
