"""Unit tests for loading YAML drafts into snapshots."""

import pytest
from pathlib import Path

from vitae.contexts.editing import SkillLevel, document_from_dict, load_draft
from vitae.contexts.editing.exceptions import UnknownCollectionError, UnknownFieldError

SAMPLE_DRAFT = Path(__file__).parent.parent / "fixtures" / "sample_draft.yaml"


@pytest.mark.unit
def test_load_sample_draft():
    """Test loading the sample draft fixture."""
    doc = load_draft(SAMPLE_DRAFT)

    assert doc.personal_info.name == "Ada Lovelace"
    assert [entry.company for entry in doc.experience] == [
        "Analytical Engines Ltd",
        "Royal Society",
    ]
    assert doc.skills[0].level is SkillLevel.EXPERT
    assert doc.education[0].field_of_study == "Mathematics"
    assert doc.projects[0].link == "https://example.com/notes"


@pytest.mark.unit
def test_draft_obeys_current_rule():
    """Test that a current role in a draft loses its end date."""
    doc = load_draft(SAMPLE_DRAFT)

    current_role = doc.experience[0]
    assert current_role.current is True
    assert current_role.end_date == ""
    assert current_role.bullets[0].startswith("Wrote the first")


@pytest.mark.unit
def test_draft_ids_are_fresh():
    """Test that ids in the mapping are ignored in favour of generated ones."""
    doc = document_from_dict({"skills": [{"id": "1", "name": "A"}, {"id": "1", "name": "B"}]})

    assert doc.skills[0].id != doc.skills[1].id
    assert "1" not in {skill.id for skill in doc.skills}


@pytest.mark.unit
def test_draft_missing_sections():
    """Test that absent or null sections become empty collections."""
    doc = document_from_dict({"personal_info": None, "skills": None})

    assert doc.is_empty
    assert doc.skills == ()


@pytest.mark.unit
def test_draft_unknown_top_level_key():
    """Test that an unknown section name is rejected."""
    with pytest.raises(UnknownCollectionError):
        document_from_dict({"hobbies": [{"name": "Chess"}]})


@pytest.mark.unit
def test_draft_unknown_entry_field():
    """Test that an unknown entry field is rejected."""
    with pytest.raises(UnknownFieldError):
        document_from_dict({"projects": [{"name": "X", "stars": 10}]})


@pytest.mark.unit
def test_load_draft_missing_file(tmp_path):
    """Test error handling for a missing draft file."""
    with pytest.raises(FileNotFoundError):
        load_draft(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_load_draft_not_a_mapping(tmp_path):
    """Test error handling for a draft whose top level is a list."""
    draft = tmp_path / "list.yaml"
    draft.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        load_draft(draft)


@pytest.mark.unit
def test_draft_with_empty_bullets_key(tmp_path):
    """Test that a bare bullets: key loads as an entry with no bullets."""
    draft = tmp_path / "empty_bullets.yaml"
    draft.write_text("experience:\n  - position: Engineer\n    bullets:\n")

    doc = load_draft(draft)

    assert doc.experience[0].position == "Engineer"
    assert doc.experience[0].bullets == ()
