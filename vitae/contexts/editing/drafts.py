"""
Draft documents.

Builds snapshots from plain mappings, such as a YAML draft handed to the CLI.
Everything goes through the regular mutation functions so drafts obey the same
invariants as interactive edits.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Union

from omegaconf import OmegaConf

from vitae.contexts.editing.exceptions import UnknownCollectionError
from vitae.contexts.editing.logger import _log_debug, _log_info
from vitae.contexts.editing.mutations import add_entry, update_personal_info
from vitae.contexts.editing.resume_data_structure import (
    COLLECTIONS,
    ResumeDocument,
    new_document,
)


def document_from_dict(data: Mapping[str, Any]) -> ResumeDocument:
    """
    Build a snapshot from a mapping shaped like document_to_dict output.

    Entry ids in the mapping are ignored; every entry gets a fresh id.

    Args:
        data: Mapping with optional "personal_info" and collection keys

    Returns:
        New snapshot

    Raises:
        UnknownCollectionError: mapping has a top-level key that is not a collection
        UnknownFieldError: an entry has a field its type does not define
    """
    doc = new_document()

    for key in data:
        if key != "personal_info" and key not in COLLECTIONS:
            raise UnknownCollectionError(key, ("personal_info",) + COLLECTIONS)

    for field_name, value in (data.get("personal_info") or {}).items():
        doc = update_personal_info(doc, field_name, value)

    for collection in COLLECTIONS:
        for entry in data.get(collection) or []:
            values = {key: value for key, value in entry.items() if key != "id"}
            doc = add_entry(doc, collection, **values)

    return doc


def load_draft(path: Union[str, Path]) -> ResumeDocument:
    """
    Load a YAML draft file into a snapshot.

    Args:
        path: Path to the YAML draft

    Returns:
        New snapshot

    Raises:
        FileNotFoundError: path does not exist
        ValueError: the file is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Draft file not found: {path}")

    _log_debug(f"Loading draft: {path}")
    raw: Dict[str, Any] = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid draft structure in {path}: expected a mapping at the top level")

    doc = document_from_dict(raw)
    counts = ", ".join(f"{len(doc.collection(name))} {name}" for name in COLLECTIONS)
    _log_info(f"Loaded draft {path.name} ({counts})")
    return doc
