"""Unit tests for the export coordinator."""

import pytest

from vitae.contexts.editing import add_entry, new_document, update_personal_info
from vitae.contexts.rendering import ExportCoordinator, HTMLCapture, export_filename
from vitae.contexts.templating import (
    Variant,
    content_signature,
    section_names,
    template_content,
)


class RecordingCapture:
    """Capture capability that records its inputs instead of writing files."""

    def __init__(self):
        self.calls = []

    async def __call__(self, tree, filename):
        self.calls.append((tree, filename))
        return None


class BrokenCapture:
    async def __call__(self, tree, filename):
        raise RuntimeError("printer on fire")


def named_document(name="Ada Lovelace"):
    doc = update_personal_info(new_document(), "name", name)
    doc = add_entry(doc, "skills", name="Python")
    return add_entry(doc, "experience", position="Engineer", bullets=["Built it"])


# =========================================================================
# FILENAMES
# =========================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("Ada Lovelace", "Ada Lovelace.pdf"),
        ("", "resume.pdf"),
        ("   ", "resume.pdf"),
        ("  Ada  ", "Ada.pdf"),
        ("AC/DC", "AC-DC.pdf"),
        ("..\\evil", "..-evil.pdf"),
    ],
)
def test_export_filename(name, expected):
    """Test filename derivation from the résumé owner's name."""
    doc = update_personal_info(new_document(), "name", name)

    assert export_filename(doc) == expected


# =========================================================================
# TREES
# =========================================================================


@pytest.mark.unit
def test_preview_and_print_tree_show_same_content():
    """Test that the coordinator pairs a screen tree with an equivalent print tree."""
    coordinator = ExportCoordinator(capture=RecordingCapture())
    doc = named_document()

    screen = coordinator.preview(doc, Variant.MODERN)
    printed = coordinator.print_tree(doc, Variant.MODERN)

    assert screen.attr("data-mode") == "screen"
    assert printed.attr("data-mode") == "print"
    assert content_signature(template_content(printed)) == content_signature(
        template_content(screen)
    )


# =========================================================================
# EXPORT
# =========================================================================


@pytest.mark.unit
@pytest.mark.asyncio
async def test_export_captures_print_tree():
    """Test that export hands the print-mode tree and derived filename to the capture."""
    capture = RecordingCapture()
    coordinator = ExportCoordinator(capture=capture)
    doc = named_document()

    result = await coordinator.export(doc, "classic")

    assert result.success
    assert result.filename == "Ada Lovelace.pdf"
    assert result.variant is Variant.CLASSIC
    assert result.error is None

    tree, filename = capture.calls[0]
    assert filename == "Ada Lovelace.pdf"
    assert tree.attr("data-mode") == "print"
    assert result.sections == section_names(tree) == ["experience", "skills"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_repeated_exports_are_independent():
    """Test that two exports produce two captures from freshly built trees."""
    capture = RecordingCapture()
    coordinator = ExportCoordinator(capture=capture)
    doc = named_document()

    first = await coordinator.export(doc, Variant.MINIMAL)
    second = await coordinator.export(doc, Variant.MINIMAL)

    assert first.success and second.success
    assert len(capture.calls) == 2
    assert capture.calls[0][0] == capture.calls[1][0]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_export_reflects_latest_edit():
    """Test that an export after an edit captures the edited snapshot."""
    capture = RecordingCapture()
    coordinator = ExportCoordinator(capture=capture)
    doc = named_document()

    await coordinator.export(doc, Variant.MODERN)
    await coordinator.export(update_personal_info(doc, "name", "Grace Hopper"), Variant.MODERN)

    assert [filename for _, filename in capture.calls] == ["Ada Lovelace.pdf", "Grace Hopper.pdf"]
    assert "Grace Hopper" in capture.calls[1][0].texts()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_export_failure_is_reported():
    """Test that a failing capture yields an unsuccessful result instead of raising."""
    coordinator = ExportCoordinator(capture=BrokenCapture())

    result = await coordinator.export(named_document(), Variant.MODERN)

    assert result.success is False
    assert result.output_path is None
    assert "printer on fire" in result.error


@pytest.mark.unit
@pytest.mark.asyncio
async def test_html_capture_writes_file(tmp_path):
    """Test the HTML capture capability end to end."""
    coordinator = ExportCoordinator(capture=HTMLCapture(output_dir=tmp_path))

    result = await coordinator.export(named_document(), Variant.CLASSIC)

    assert result.success
    assert result.output_path == tmp_path / "Ada Lovelace.html"
    html = result.output_path.read_text(encoding="utf-8")
    assert 'data-variant="classic"' in html
    assert 'data-mode="print"' in html
    assert "Built it" in html
