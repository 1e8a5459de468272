"""
Template Rendering

Dispatches a snapshot to the strategy registered for a variant, and wraps the
result in the preview card used on screen. The print-mode tree is derived from
the screen tree by stripping interaction and scroll styling, so the exported
document shows exactly the sections and text of the preview.
"""

from dataclasses import replace
from functools import lru_cache
from typing import List, Optional, Union

from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.templating.registries import VariantRegistry
from vitae.contexts.templating.variant_types import Variant, VariantInfo
from vitae.contexts.templating.visual_tree import ROLE_ATTR, Node, el, map_tree

# Screen-only classes: scrolling, clipping and card chrome
SCROLL_CONTAINER_CLASSES = frozenset({"overflow-auto", "overflow-hidden", "max-h-[800px]", "shadow-md"})

# Class prefixes that only apply to pointer/keyboard interaction
INTERACTION_CLASS_PREFIXES = ("hover:", "focus:", "active:", "cursor-")

# Nodes that exist only on screen (the preview toolbar)
SCREEN_ONLY_ROLES = frozenset({"toolbar"})

SCREEN_ONLY_ATTRS = frozenset({"style"})


@lru_cache(maxsize=1)
def default_variant_registry() -> VariantRegistry:
    """Process-wide registry with the built-in variants."""
    return VariantRegistry()


def render(
    doc: ResumeDocument,
    variant: Union[Variant, str],
    registry: VariantRegistry = None,
) -> Node:
    """
    Render a snapshot with one template variant.

    Pure: the same (doc, variant) always gives an equal tree, and doc is not
    touched.

    Args:
        doc: Snapshot to render
        variant: Variant member or name ("modern", "classic", "minimal")
        registry: Variant registry (defaults to the built-in variants)

    Returns:
        Visual tree rooted at the résumé content node

    Raises:
        UnknownVariantError: variant is not registered
    """
    registry = registry or default_variant_registry()
    return registry.get(variant).render(doc)


def render_preview(
    doc: ResumeDocument,
    variant: Union[Variant, str],
    print_mode: bool = False,
    registry: VariantRegistry = None,
) -> Node:
    """
    Render a snapshot inside the preview card.

    Screen mode adds the toolbar strip and a scrollable viewport. Print mode is
    the same card passed through to_print_mode().

    Args:
        doc: Snapshot to render
        variant: Variant member or name
        print_mode: Build the off-screen tree used for export
        registry: Variant registry (defaults to the built-in variants)

    Returns:
        Visual tree rooted at the preview card
    """
    content = render(doc, variant, registry=registry)
    card = el(
        "div",
        el("div", classes="p-4 bg-gray-50 border-b", data_role="toolbar"),
        el(
            "div",
            content,
            classes="p-4 overflow-auto max-h-[800px]",
            style="min-height: 500px",
            data_role="viewport",
        ),
        classes="bg-white rounded-lg shadow-md overflow-hidden",
        data_role="preview-card",
        data_mode="screen",
    )
    if print_mode:
        return to_print_mode(card)
    return card


def _is_screen_only_class(name: str) -> bool:
    return name in SCROLL_CONTAINER_CLASSES or name.startswith(INTERACTION_CLASS_PREFIXES)


def _strip_screen_styling(node: Node) -> Optional[Node]:
    if node.attr(ROLE_ATTR) in SCREEN_ONLY_ROLES:
        return None

    attrs = tuple(
        (name, "print" if name == "data-mode" else value)
        for name, value in node.attrs
        if name not in SCREEN_ONLY_ATTRS
    )
    classes = tuple(name for name in node.classes if not _is_screen_only_class(name))
    return replace(node, attrs=attrs, classes=classes)


def to_print_mode(tree: Node) -> Node:
    """
    Strip screen-only affordances from a visual tree.

    Removes the toolbar, scroll/clip classes, inline viewport sizing and
    interaction classes (hover:, focus:, ...). Sections, entry order and text
    are left as they are.
    """
    stripped = map_tree(tree, _strip_screen_styling)
    if stripped is None:
        raise ValueError("Tree root is a screen-only node and has no print form")
    return stripped


def list_variants(registry: VariantRegistry = None) -> List[VariantInfo]:
    """Template picker metadata for every registered variant."""
    registry = registry or default_variant_registry()
    return registry.list_variants()
