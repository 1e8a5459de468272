"""
Visual Tree

Frozen node structure produced by the template variants and consumed by the
preview, the print pass and the HTML generator. Two renders of the same
snapshot compare equal with ==.
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional, Tuple

SECTION_ATTR = "data-section"
ROLE_ATTR = "data-role"
CONTENT_ROOT_ID = "resume-content"


@dataclass(frozen=True)
class Node:
    """
    One element of a visual tree.

    Attributes:
        tag: Element name ("div", "h2", "li", ... or "icon" for contact glyphs)
        text: Text shown before the children
        classes: Style classes, in order
        attrs: (name, value) attribute pairs, in order
        children: Child nodes, in order
    """

    tag: str
    text: str = ""
    classes: Tuple[str, ...] = ()
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = ()

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def section(self) -> Optional[str]:
        """Section name for section nodes, None otherwise."""
        return self.attr(SECTION_ATTR)

    def iter(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, predicate: Callable[["Node"], bool]) -> List["Node"]:
        return [node for node in self.iter() if predicate(node)]

    def find(self, predicate: Callable[["Node"], bool]) -> Optional["Node"]:
        return next((node for node in self.iter() if predicate(node)), None)

    def texts(self) -> List[str]:
        """All non-empty text values under this node, in document order."""
        return [node.text for node in self.iter() if node.text]


def el(tag: str, *children: Optional[Node], text: str = "", classes: str = "", **attrs: str) -> Node:
    """
    Build a Node, skipping None children.

    Keyword attributes use underscores for hyphens (data_section -> data-section)
    and a trailing underscore for reserved words (id_ -> id).

    Example:
        el("ul", *items, classes="list-disc mt-2", data_role="bullets")
    """
    attr_pairs = tuple(
        (name.rstrip("_").replace("_", "-"), str(value))
        for name, value in attrs.items()
        if value is not None
    )
    return Node(
        tag=tag,
        text=text,
        classes=tuple(classes.split()),
        attrs=attr_pairs,
        children=tuple(child for child in children if child is not None),
    )


# =========================================================================
# TREE QUERIES
# =========================================================================


def sections(tree: Node) -> List[Node]:
    """Section nodes in document order."""
    return tree.find_all(lambda node: node.section is not None)


def section_names(tree: Node) -> List[str]:
    return [node.section for node in sections(tree)]


def section_outline(tree: Node) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    """
    Ordered (section name, section texts) pairs.

    Two trees with the same outline show the same sections in the same order
    with the same text, whatever their styling.
    """
    return tuple((node.section, tuple(node.texts())) for node in sections(tree))


def content_signature(node: Node) -> tuple:
    """Nested (tag, text, children) structure with classes and attributes ignored."""
    return (node.tag, node.text, tuple(content_signature(child) for child in node.children))


def template_content(tree: Node) -> Optional[Node]:
    """The résumé itself inside a preview card (the node with id="resume-content")."""
    return tree.find(lambda node: node.attr("id") == CONTENT_ROOT_ID)


def map_tree(node: Node, transform: Callable[[Node], Optional[Node]]) -> Optional[Node]:
    """
    Rebuild a tree bottom-up through transform.

    transform receives each node with already-transformed children and returns
    the replacement node, or None to drop the node and its subtree.
    """
    children = tuple(
        mapped
        for mapped in (map_tree(child, transform) for child in node.children)
        if mapped is not None
    )
    return transform(replace(node, children=children))
