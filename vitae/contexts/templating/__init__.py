"""
Templating Context

Responsibilities:
- Renders résumé snapshots to visual trees with interchangeable variants
  (Modern, Classic, Minimal)
- Applies the shared rendering rules (section suppression, date formatting,
  "Present" for ongoing roles, collection order)
- Wraps trees in the on-screen preview card and derives the print-mode tree
- Generates HTML documents from visual trees

Owns: Variant strategies and style sheets, visual tree structure, HTML generation
Never: Mutates a snapshot or decides where an export goes
"""

from vitae.contexts.templating.html_generator import HTMLGenerator
from vitae.contexts.templating.registries import StyleRegistry, TemplateRegistry, VariantRegistry
from vitae.contexts.templating.renderer import (
    list_variants,
    render,
    render_preview,
    to_print_mode,
)
from vitae.contexts.templating.variant_types import StyleSheet, Variant, VariantInfo
from vitae.contexts.templating.visual_tree import (
    Node,
    content_signature,
    section_names,
    section_outline,
    template_content,
)

__all__ = [
    # Rendering entry points
    "render",
    "render_preview",
    "to_print_mode",
    "list_variants",
    "HTMLGenerator",
    # Variants and registries
    "Variant",
    "VariantInfo",
    "StyleSheet",
    "StyleRegistry",
    "VariantRegistry",
    "TemplateRegistry",
    # Visual tree
    "Node",
    "section_names",
    "section_outline",
    "content_signature",
    "template_content",
]
