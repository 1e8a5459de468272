"""
HTML Generator

Turns a visual tree into a standalone HTML document through Jinja2 templates.
The same document feeds the on-disk preview and the PDF capture.
"""

from typing import Dict, Union

from jinja2 import TemplateError

from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.logger import log_html_failed, log_html_generated
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.visual_tree import Node, section_names

# Icon name -> glyph shown in place of the contact icons
ICON_GLYPHS: Dict[str, str] = {
    "mail": "✉",
    "phone": "☎",
    "map-pin": "⌖",
    "globe": "◎",
}

PAGE_SIZE = "A4"
PAGE_MARGIN = "12mm"


class HTMLGenerator:
    """Converts visual trees to HTML documents."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()
        self._stylesheet = None

    @property
    def stylesheet(self) -> str:
        if self._stylesheet is None:
            self._stylesheet = self.template_registry.read_asset("structure/resume.css")
        return self._stylesheet

    def generate_document(
        self,
        tree: Node,
        variant: Union[Variant, str],
        title: str = "Resume",
    ) -> str:
        """
        Generate a complete HTML document for a visual tree.

        Args:
            tree: Screen or print-mode visual tree
            variant: Variant the tree was rendered with
            title: Document title

        Returns:
            HTML string with A4 @page rules and the utility stylesheet inlined

        Raises:
            TemplateRenderError: Jinja2 failed while rendering the document template
        """
        variant = Variant.parse(variant)
        template = self.template_registry.get_template("document")

        try:
            html = template.render(
                tree=tree,
                icons=ICON_GLYPHS,
                title=title,
                variant=variant.value,
                page_size=PAGE_SIZE,
                page_margin=PAGE_MARGIN,
                stylesheet=self.stylesheet,
            )
        except TemplateError as e:
            template_path = self.template_registry.get_template_path("document")
            log_html_failed(variant.value, template_path, e)
            raise TemplateRenderError(
                "Failed to generate HTML from visual tree",
                template_name="document",
                template_path=template_path,
                original_error=e,
            ) from e

        log_html_generated(variant.value, section_names(tree), len(html))
        return html
