"""Unit tests for snapshot mutations and the editing session."""

import pytest
from datetime import date

from vitae.contexts.editing import (
    EditingSession,
    ResumeDocument,
    SkillLevel,
    add_bullet,
    add_entry,
    document_to_dict,
    new_document,
    remove_bullet_at,
    remove_entry,
    update_bullet_at,
    update_entry,
    update_personal_info,
)
from vitae.contexts.editing.exceptions import (
    InvalidFieldValueError,
    UnknownCollectionError,
    UnknownFieldError,
)


@pytest.fixture
def doc_with_experience():
    doc = add_entry(new_document(), "experience", company="Acme", position="Engineer")
    return doc, doc.experience[0].id


# =========================================================================
# COLLECTION OPERATIONS
# =========================================================================


@pytest.mark.unit
def test_new_document_is_empty():
    """Test the starting snapshot of a session."""
    doc = new_document()

    assert doc == ResumeDocument()
    assert doc.is_empty
    assert doc.personal_info.name == ""


@pytest.mark.unit
@pytest.mark.parametrize("collection", ["education", "experience", "skills", "projects"])
def test_add_then_remove_round_trip(collection):
    """Test that removing a just-added entry restores the collection."""
    doc = add_entry(new_document(), collection)
    doc = add_entry(doc, collection)
    before = doc.collection(collection)

    added = add_entry(doc, collection)
    new_entry_id = added.collection(collection)[-1].id
    restored = remove_entry(added, collection, new_entry_id)

    assert restored.collection(collection) == before


@pytest.mark.unit
def test_add_entry_defaults():
    """Test the defaults of a freshly added entry of each type."""
    doc = new_document()
    doc = add_entry(doc, "experience")
    doc = add_entry(doc, "skills")

    experience = doc.experience[0]
    assert experience.current is False
    assert experience.bullets == ()
    assert experience.company == ""

    assert doc.skills[0].level is SkillLevel.INTERMEDIATE


@pytest.mark.unit
def test_add_entry_does_not_touch_input():
    """Test that mutations return a new snapshot and leave the old one alone."""
    doc = new_document()
    updated = add_entry(doc, "skills", name="Python")

    assert doc.skills == ()
    assert len(updated.skills) == 1
    assert updated is not doc


@pytest.mark.unit
def test_ids_unique_within_collection():
    """Test that entries added in a tight loop all get distinct ids."""
    doc = new_document()
    for _ in range(25):
        doc = add_entry(doc, "skills")

    ids = [skill.id for skill in doc.skills]
    assert len(set(ids)) == 25


@pytest.mark.unit
def test_remove_middle_entry_keeps_order():
    """Test three adds then removing the middle one."""
    doc = new_document()
    for institution in ("First", "Second", "Third"):
        doc = add_entry(doc, "education", institution=institution)
    first, second, third = doc.education

    doc = remove_entry(doc, "education", second.id)

    assert [entry.id for entry in doc.education] == [first.id, third.id]
    assert [entry.institution for entry in doc.education] == ["First", "Third"]


@pytest.mark.unit
def test_update_entry_changes_one_field(doc_with_experience):
    """Test that update_entry replaces only the named field."""
    doc, entry_id = doc_with_experience

    updated = update_entry(doc, "experience", entry_id, "company", "Globex")

    assert updated.experience[0].company == "Globex"
    assert updated.experience[0].position == "Engineer"
    assert updated.experience[0].id == entry_id
    assert doc.experience[0].company == "Acme"


@pytest.mark.unit
def test_update_with_stale_id_is_noop(doc_with_experience):
    """Test that an id removed by an earlier edit leaves the snapshot unchanged."""
    doc, entry_id = doc_with_experience
    removed = remove_entry(doc, "experience", entry_id)

    assert update_entry(removed, "experience", entry_id, "company", "Globex") is removed
    assert remove_entry(removed, "experience", entry_id) is removed


@pytest.mark.unit
def test_update_entry_converts_dates(doc_with_experience):
    """Test that date objects are stored as ISO strings."""
    doc, entry_id = doc_with_experience

    updated = update_entry(doc, "experience", entry_id, "start_date", date(2023, 3, 15))

    assert updated.experience[0].start_date == "2023-03-15"


# =========================================================================
# CURRENT ROLE RULE
# =========================================================================


@pytest.mark.unit
def test_setting_current_clears_end_date(doc_with_experience):
    """Test that current=True and end_date="" land in one snapshot."""
    doc, entry_id = doc_with_experience
    doc = update_entry(doc, "experience", entry_id, "end_date", "2024-01-01")

    updated = update_entry(doc, "experience", entry_id, "current", True)

    assert updated.experience[0].current is True
    assert updated.experience[0].end_date == ""


@pytest.mark.unit
def test_end_date_ignored_while_current(doc_with_experience):
    """Test that an in-progress role cannot pick up an end date."""
    doc, entry_id = doc_with_experience
    doc = update_entry(doc, "experience", entry_id, "current", True)

    updated = update_entry(doc, "experience", entry_id, "end_date", "2024-01-01")

    assert updated.experience[0].end_date == ""


@pytest.mark.unit
def test_unsetting_current_allows_end_date(doc_with_experience):
    """Test that a finished role keeps the end date it is given."""
    doc, entry_id = doc_with_experience
    doc = update_entry(doc, "experience", entry_id, "current", True)
    doc = update_entry(doc, "experience", entry_id, "current", False)

    updated = update_entry(doc, "experience", entry_id, "end_date", "2024-01-01")

    assert updated.experience[0].current is False
    assert updated.experience[0].end_date == "2024-01-01"


@pytest.mark.unit
def test_add_entry_current_drops_end_date():
    """Test the current rule on initial values."""
    doc = add_entry(new_document(), "experience", end_date="2024-01-01", current=True)

    assert doc.experience[0].end_date == ""


# =========================================================================
# PERSONAL INFO
# =========================================================================


@pytest.mark.unit
def test_update_personal_info():
    """Test editing one personal info field."""
    doc = update_personal_info(new_document(), "name", "Ada Lovelace")
    doc = update_personal_info(doc, "email", "ada@example.com")

    assert doc.personal_info.name == "Ada Lovelace"
    assert doc.personal_info.email == "ada@example.com"
    assert doc.personal_info.phone == ""


@pytest.mark.unit
def test_summary_alone_makes_document_non_empty():
    """Test that only section content counts toward is_empty."""
    doc = update_personal_info(new_document(), "name", "Ada")
    assert doc.is_empty

    doc = update_personal_info(doc, "summary", "Engineer")
    assert not doc.is_empty


# =========================================================================
# BULLETS
# =========================================================================


@pytest.mark.unit
def test_add_bullet_appends_blank(doc_with_experience):
    """Test that new bullets start blank and append at the end."""
    doc, entry_id = doc_with_experience

    doc = add_bullet(doc, entry_id, "Shipped it")
    doc = add_bullet(doc, entry_id)

    assert doc.experience[0].bullets == ("Shipped it", "")


@pytest.mark.unit
def test_update_and_remove_bullet(doc_with_experience):
    """Test editing and removing bullets by index."""
    doc, entry_id = doc_with_experience
    for text in ("a", "b", "c"):
        doc = add_bullet(doc, entry_id, text)

    doc = update_bullet_at(doc, entry_id, 1, "B")
    assert doc.experience[0].bullets == ("a", "B", "c")

    doc = remove_bullet_at(doc, entry_id, 0)
    assert doc.experience[0].bullets == ("B", "c")


@pytest.mark.unit
def test_out_of_range_bullet_edits_are_dropped(doc_with_experience):
    """Test that bullet indices are checked against the current snapshot."""
    doc, entry_id = doc_with_experience
    doc = add_bullet(doc, entry_id, "only")

    assert update_bullet_at(doc, entry_id, 3, "x") is doc
    assert remove_bullet_at(doc, entry_id, -1) is doc
    assert add_bullet(doc, "missing-id", "x") is doc


@pytest.mark.unit
def test_bullets_none_clears_list(doc_with_experience):
    """Test that None stores an empty bullet list, like other fields store ""."""
    doc, entry_id = doc_with_experience
    doc = add_bullet(doc, entry_id, "one")

    doc = update_entry(doc, "experience", entry_id, "bullets", None)

    assert doc.experience[0].bullets == ()


@pytest.mark.unit
def test_bullets_replaced_as_whole_list(doc_with_experience):
    """Test updating the whole bullets field."""
    doc, entry_id = doc_with_experience

    doc = update_entry(doc, "experience", entry_id, "bullets", ["one", "two"])

    assert doc.experience[0].bullets == ("one", "two")


# =========================================================================
# ERRORS
# =========================================================================


@pytest.mark.unit
def test_unknown_collection_raises():
    """Test that a misspelled collection is a programming error."""
    with pytest.raises(UnknownCollectionError):
        add_entry(new_document(), "hobbies")


@pytest.mark.unit
def test_unknown_field_raises(doc_with_experience):
    """Test that a field the entry type lacks is rejected."""
    doc, entry_id = doc_with_experience

    with pytest.raises(UnknownFieldError):
        update_entry(doc, "experience", entry_id, "salary", "lots")


@pytest.mark.unit
def test_id_field_is_not_editable(doc_with_experience):
    """Test that ids are durable."""
    doc, entry_id = doc_with_experience

    with pytest.raises(UnknownFieldError):
        update_entry(doc, "experience", entry_id, "id", "other")


@pytest.mark.unit
def test_invalid_skill_level_raises():
    """Test that levels outside the four known values are rejected."""
    doc = add_entry(new_document(), "skills", name="Python")

    with pytest.raises(InvalidFieldValueError):
        update_entry(doc, "skills", doc.skills[0].id, "level", "Guru")


@pytest.mark.unit
def test_bullets_must_not_be_string(doc_with_experience):
    """Test that a single string is not split into character bullets."""
    doc, entry_id = doc_with_experience

    with pytest.raises(InvalidFieldValueError):
        update_entry(doc, "experience", entry_id, "bullets", "one bullet")


# =========================================================================
# SESSION AND SERIALIZATION
# =========================================================================


@pytest.mark.unit
def test_session_apply_tracks_revisions():
    """Test that the session swaps snapshots only when a mutation changes something."""
    session = EditingSession()
    original = session.document

    session.apply(add_entry, "skills", name="Python")
    assert session.revision == 1
    assert session.document is not original
    assert original.skills == ()

    session.apply(remove_entry, "skills", "missing-id")
    assert session.revision == 1


@pytest.mark.unit
def test_document_to_dict_plain_values():
    """Test conversion to plain containers for display."""
    doc = add_entry(new_document(), "skills", name="Python", level="Expert")
    doc = add_entry(doc, "experience", bullets=["x"])

    data = document_to_dict(doc)

    assert data["skills"][0]["level"] == "Expert"
    assert data["experience"][0]["bullets"] == ["x"]
    assert isinstance(data["education"], list)
    assert data["personal_info"]["name"] == ""
