"""
Snapshot Mutations

Pure functions that take a ResumeDocument and return the next snapshot. The
input snapshot is never modified.

Stale ids (an entry removed by another edit while a caller still holds its id)
are not errors: the operation returns the input snapshot unchanged. Naming a
collection or field that does not exist is a programming error and raises.
"""

from dataclasses import fields, replace
from datetime import date
from typing import Any, Dict, Iterable

from vitae.contexts.editing.exceptions import (
    InvalidFieldValueError,
    UnknownCollectionError,
    UnknownFieldError,
)
from vitae.contexts.editing.logger import log_dropped_bullet_edit, log_stale_id
from vitae.contexts.editing.resume_components_data_structures import (
    ExperienceEntry,
    PersonalInfo,
    SkillLevel,
)
from vitae.contexts.editing.resume_data_structure import (
    COLLECTION_TYPES,
    ResumeDocument,
)
from vitae.utils.identifiers import new_id


def _entry_type(collection: str) -> type:
    if collection not in COLLECTION_TYPES:
        raise UnknownCollectionError(collection, COLLECTION_TYPES)
    return COLLECTION_TYPES[collection]


def _editable_fields(record_type: type) -> set:
    return {f.name for f in fields(record_type)} - {"id"}


def _coerce(field_name: str, value: Any) -> Any:
    """Convert a raw input value to the stored representation of a field."""
    if field_name == "bullets":
        if value is None:
            return ()
        if isinstance(value, str):
            raise InvalidFieldValueError(
                field_name, value, "bullets must be a sequence of strings, not a single string"
            )
        return tuple("" if bullet is None else str(bullet) for bullet in value)

    if field_name == "current":
        return bool(value)

    if field_name == "level":
        try:
            return SkillLevel(value)
        except ValueError as e:
            valid = ", ".join(level.value for level in SkillLevel)
            raise InvalidFieldValueError(
                field_name, value, f"Invalid skill level '{value}'. Valid levels: {valid}"
            ) from e

    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _validated_changes(record_type: type, values: Dict[str, Any]) -> Dict[str, Any]:
    editable = _editable_fields(record_type)
    changes = {}
    for field_name, value in values.items():
        if field_name == "id":
            raise UnknownFieldError(field_name, record_type.__name__, "Entry ids cannot be edited")
        if field_name not in editable:
            raise UnknownFieldError(field_name, record_type.__name__)
        changes[field_name] = _coerce(field_name, value)
    return changes


def _apply_changes(entry, changes: Dict[str, Any]):
    """
    Build the next version of an entry in a single replace.

    An in-progress experience never keeps an end date, so setting current=True
    and clearing end_date happen in the same transition.
    """
    if isinstance(entry, ExperienceEntry):
        is_current = changes.get("current", entry.current)
        if is_current:
            changes = {**changes, "end_date": ""}
    return replace(entry, **changes)


def _replace_collection(doc: ResumeDocument, collection: str, entries: Iterable) -> ResumeDocument:
    return replace(doc, **{collection: tuple(entries)})


# =========================================================================
# COLLECTION OPERATIONS
# =========================================================================


def add_entry(doc: ResumeDocument, collection: str, **values: Any) -> ResumeDocument:
    """
    Append a new entry with a fresh id to a collection.

    The entry starts from its type defaults (empty text, current=False,
    no bullets, Intermediate level); any values given override them.

    Args:
        doc: Current snapshot
        collection: One of "education", "experience", "skills", "projects"
        **values: Initial field values

    Returns:
        New snapshot with the entry appended

    Example:
        doc = add_entry(doc, "skills", name="Python", level="Expert")
        skill_id = doc.skills[-1].id
    """
    entry_type = _entry_type(collection)
    changes = _validated_changes(entry_type, values)
    entry = _apply_changes(entry_type(id=new_id()), changes)
    return _replace_collection(doc, collection, doc.collection(collection) + (entry,))


def update_entry(
    doc: ResumeDocument, collection: str, entry_id: str, field_name: str, value: Any
) -> ResumeDocument:
    """
    Replace one field of the entry with the given id.

    Args:
        doc: Current snapshot
        collection: Collection holding the entry
        entry_id: Id of the entry to edit
        field_name: Field to replace
        value: New value

    Returns:
        New snapshot, or doc itself when no entry has that id

    Raises:
        UnknownCollectionError: collection does not exist
        UnknownFieldError: field does not exist on the entry type, or is "id"
        InvalidFieldValueError: value cannot be stored in the field
    """
    entry_type = _entry_type(collection)
    changes = _validated_changes(entry_type, {field_name: value})

    entries = doc.collection(collection)
    for position, entry in enumerate(entries):
        if entry.id == entry_id:
            updated = _apply_changes(entry, changes)
            return _replace_collection(
                doc, collection, entries[:position] + (updated,) + entries[position + 1 :]
            )

    log_stale_id("update_entry", collection, entry_id)
    return doc


def remove_entry(doc: ResumeDocument, collection: str, entry_id: str) -> ResumeDocument:
    """
    Remove the entry with the given id, keeping the order of the rest.

    Returns doc itself when no entry has that id.
    """
    _entry_type(collection)
    entries = doc.collection(collection)
    remaining = tuple(entry for entry in entries if entry.id != entry_id)

    if len(remaining) == len(entries):
        log_stale_id("remove_entry", collection, entry_id)
        return doc
    return _replace_collection(doc, collection, remaining)


def update_personal_info(doc: ResumeDocument, field_name: str, value: Any) -> ResumeDocument:
    """Replace one field of the personal info block."""
    changes = _validated_changes(PersonalInfo, {field_name: value})
    return replace(doc, personal_info=replace(doc.personal_info, **changes))


# =========================================================================
# BULLET OPERATIONS
# =========================================================================
# Bullet edits are expressed as update_entry on the whole "bullets" tuple.
# Indices are re-checked against the snapshot being edited, since a removal
# may have landed after the caller read the index.


def add_bullet(doc: ResumeDocument, entry_id: str, text: str = "") -> ResumeDocument:
    """Append a bullet (blank by default) to an experience entry."""
    entry = doc.find_entry("experience", entry_id)
    if entry is None:
        log_stale_id("add_bullet", "experience", entry_id)
        return doc
    return update_entry(doc, "experience", entry_id, "bullets", entry.bullets + (text,))


def update_bullet_at(doc: ResumeDocument, entry_id: str, index: int, text: str) -> ResumeDocument:
    """Replace the bullet at index; out-of-range indices are dropped."""
    entry = doc.find_entry("experience", entry_id)
    if entry is None:
        log_stale_id("update_bullet_at", "experience", entry_id)
        return doc
    if not 0 <= index < len(entry.bullets):
        log_dropped_bullet_edit("update_bullet_at", entry_id, index, len(entry.bullets))
        return doc

    bullets = list(entry.bullets)
    bullets[index] = text
    return update_entry(doc, "experience", entry_id, "bullets", bullets)


def remove_bullet_at(doc: ResumeDocument, entry_id: str, index: int) -> ResumeDocument:
    """Remove the bullet at index; out-of-range indices are dropped."""
    entry = doc.find_entry("experience", entry_id)
    if entry is None:
        log_stale_id("remove_bullet_at", "experience", entry_id)
        return doc
    if not 0 <= index < len(entry.bullets):
        log_dropped_bullet_edit("remove_bullet_at", entry_id, index, len(entry.bullets))
        return doc

    bullets = entry.bullets[:index] + entry.bullets[index + 1 :]
    return update_entry(doc, "experience", entry_id, "bullets", bullets)
