"""
Template Variant Base

Shared rendering rules every variant follows:
- A section with no backing data is left out entirely (no empty heading)
- An empty field drops only its own element, never the whole entry
- Dates render as "Mon YYYY"; an in-progress role ends in "Present"
- Entries keep collection order
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)
from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.templating.variant_types import StyleSheet, Variant
from vitae.contexts.templating.visual_tree import CONTENT_ROOT_ID, Node, el
from vitae.utils.timestamp import format_date_range

CONTACT_FIELDS = ("email", "phone", "location", "website")


class TemplateVariant(ABC):
    """
    One layout strategy: a pure function from ResumeDocument to a visual tree.

    Subclasses set the variant class attribute and implement render(). The
    helpers below return None for anything that should not appear, so that
    el() drops it.
    """

    variant: Variant

    def __init__(self, style: StyleSheet):
        self.style = style

    @abstractmethod
    def render(self, doc: ResumeDocument) -> Node:
        """Render a snapshot to a visual tree rooted at the résumé content node."""

    # =========================================================================
    # STYLE LOOKUPS
    # =========================================================================

    def cls(self, role: str) -> str:
        return self.style.classes[role]

    def heading_text(self, section: str) -> str:
        return self.style.headings[section]

    def label(self, name: str) -> str:
        return self.style.labels[name]

    # =========================================================================
    # SHARED BUILDING BLOCKS
    # =========================================================================

    def root(self, *children: Optional[Node]) -> Node:
        return el(
            "div",
            *children,
            classes=self.cls("root"),
            id_=CONTENT_ROOT_ID,
            data_variant=self.variant.value,
        )

    def display_name(self, info: PersonalInfo) -> str:
        return info.name or self.label("name_placeholder")

    def contact_values(self, info: PersonalInfo) -> List[tuple]:
        """(field, value) pairs for the contact fields that have a value, in display order."""
        return [(name, getattr(info, name)) for name in CONTACT_FIELDS if getattr(info, name)]

    def section(
        self,
        name: str,
        *children: Optional[Node],
        heading: bool = True,
        classes: str = None,
    ) -> Node:
        """A section node tagged with its name, with the variant's heading first."""
        heading_node = (
            el("h2", text=self.heading_text(name), classes=self.cls("heading")) if heading else None
        )
        return el(
            "section",
            heading_node,
            *children,
            classes=self.cls("section") if classes is None else classes,
            data_section=name,
        )

    def text_element(self, tag: str, text: str, role: str) -> Optional[Node]:
        """Element holding text, or None when the text is empty."""
        if not text:
            return None
        return el(tag, text=text, classes=self.cls(role))

    def date_range(
        self, start_date: str, end_date: str, current: bool = False, tag: str = "span"
    ) -> Optional[Node]:
        return self.text_element(tag, format_date_range(start_date, end_date, current), "entry_dates")

    def bullet_list(self, bullets: Sequence[str]) -> Optional[Node]:
        """
        Bullet list for an experience entry.

        Suppressed only when there are no bullets at all; blank bullets still
        render as (empty) list items.
        """
        if len(bullets) == 0:
            return None
        return el(
            "ul",
            *(el("li", text=bullet) for bullet in bullets),
            classes=self.cls("bullets"),
        )

    def entry(self, entry_id: str, *children: Optional[Node], role: str = "entry") -> Node:
        return el("div", *children, classes=self.cls(role), data_entry_id=entry_id)

    def entry_header(self, *children: Optional[Node]) -> Node:
        return el("div", *children, classes=self.cls("entry_header"))

    @staticmethod
    def degree_line(education: EducationEntry) -> str:
        """Degree and field of study joined by a comma, skipping empty parts."""
        return ", ".join(part for part in (education.degree, education.field_of_study) if part)

    def project_link(self, project: ProjectEntry) -> Optional[Node]:
        if not project.link:
            return None
        return el(
            "a",
            text=self.label("project_link"),
            classes=self.cls("project_link"),
            href=project.link,
            target="_blank",
            rel="noopener noreferrer",
        )

    # =========================================================================
    # SHARED SECTIONS
    # =========================================================================
    # Default section bodies; variants override where their layout differs.

    def experience_entry(
        self,
        experience: ExperienceEntry,
        show_description: bool = True,
        title_role: str = "entry_title",
    ) -> Node:
        return self.entry(
            experience.id,
            self.entry_header(
                self.text_element("h3", experience.position, title_role),
                self.date_range(experience.start_date, experience.end_date, experience.current),
            ),
            self.text_element("h4", experience.company, "entry_subtitle"),
            self.text_element("p", experience.description, "entry_description")
            if show_description
            else None,
            self.bullet_list(experience.bullets),
        )

    def project_entry(self, project: ProjectEntry, role: str = "entry") -> Node:
        return self.entry(
            project.id,
            self.entry_header(
                self.text_element("h3", project.name, "entry_title"),
                self.project_link(project),
            ),
            self.text_element("p", project.technologies, "project_technologies"),
            self.text_element("p", project.description, "entry_description"),
            role=role,
        )

    def collection_section(
        self, name: str, entries: Iterable, render_entry, **section_kwargs
    ) -> Optional[Node]:
        """Section over a collection, or None when the collection is empty."""
        entries = tuple(entries)
        if not entries:
            return None
        return self.section(name, *(render_entry(entry) for entry in entries), **section_kwargs)
