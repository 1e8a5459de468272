"""Unit tests for HTML generation from visual trees."""

import pytest

from vitae.contexts.editing import add_entry, new_document, update_personal_info
from vitae.contexts.templating import HTMLGenerator, Variant, render, render_preview
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.visual_tree import el


@pytest.fixture
def generator():
    return HTMLGenerator()


@pytest.mark.unit
def test_generate_document_structure(generator):
    """Test the document shell: A4 page rule, inlined stylesheet and variant marker."""
    html = generator.generate_document(render(new_document(), "modern"), Variant.MODERN, title="Ada")

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Ada</title>" in html
    assert "size: A4" in html
    assert ".font-bold" in html
    assert 'data-variant="modern"' in html
    assert 'id="resume-content"' in html


@pytest.mark.unit
def test_generate_document_renders_text_and_classes(generator):
    """Test that node text, classes and attributes reach the HTML."""
    tree = el("div", el("h2", text="Skills", classes="text-xl font-bold"), data_section="skills")

    html = generator.generate_document(tree, "classic")

    assert '<div data-section="skills">' in html
    assert '<h2 class="text-xl font-bold">Skills</h2>' in html


@pytest.mark.unit
def test_generate_document_escapes_text(generator):
    """Test that résumé text is HTML-escaped."""
    doc = update_personal_info(new_document(), "name", "<script>alert(1)</script>")

    html = generator.generate_document(render(doc, "minimal"), "minimal")

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.unit
def test_modern_icons_become_glyphs(generator):
    """Test that icon nodes are written as glyph spans."""
    doc = update_personal_info(new_document(), "email", "ada@example.com")

    html = generator.generate_document(render(doc, "modern"), "modern")

    assert "<icon" not in html
    assert "✉" in html


@pytest.mark.unit
def test_generate_print_card(generator):
    """Test generating HTML for the print-mode card."""
    doc = add_entry(new_document(), "skills", name="Python")
    card = render_preview(doc, Variant.CLASSIC, print_mode=True)

    html = generator.generate_document(card, Variant.CLASSIC)

    assert 'data-mode="print"' in html
    assert "overflow-auto" not in html
    assert "Python" in html


@pytest.mark.unit
def test_stylesheet_loaded_once(generator):
    """Test that the stylesheet is read lazily and reused."""
    assert generator._stylesheet is None

    first = generator.stylesheet
    assert generator.stylesheet is first


@pytest.mark.unit
def test_template_error_wrapped(tmp_path):
    """Test that Jinja2 errors surface as TemplateRenderError."""
    structure = tmp_path / "structure"
    structure.mkdir()
    (structure / "resume.css").write_text("")
    (structure / "document.html.jinja").write_text("{{ missing_variable }}")

    generator = HTMLGenerator(template_registry=TemplateRegistry(templates_base_path=tmp_path))

    with pytest.raises(TemplateRenderError) as exc_info:
        generator.generate_document(el("div"), "modern")

    assert exc_info.value.template_name == "document"
    assert exc_info.value.template_path == tmp_path / "structure" / "document.html.jinja"
    assert exc_info.value.original_error is not None
