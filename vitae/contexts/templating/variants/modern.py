"""
Modern template.

Header with icon contact items and the summary paragraph, then a two-column
grid: experience and projects in the primary column, education and skills in
the secondary column.
"""

from typing import Optional

from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    PersonalInfo,
    SkillEntry,
)
from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.variants.base import TemplateVariant
from vitae.contexts.templating.visual_tree import Node, el


class ModernTemplate(TemplateVariant):
    variant = Variant.MODERN

    def render(self, doc: ResumeDocument) -> Node:
        primary = el(
            "div",
            self.collection_section("experience", doc.experience, self.experience_entry),
            self.collection_section("projects", doc.projects, self.project_entry),
            classes=self.cls("primary_column"),
        )
        secondary = el(
            "div",
            self.collection_section("education", doc.education, self.education_entry),
            self.skills_section(doc.skills),
            classes=self.cls("secondary_column"),
        )
        return self.root(
            self.header(doc.personal_info),
            el("div", primary, secondary, classes=self.cls("grid")),
        )

    def header(self, info: PersonalInfo) -> Node:
        contact_items = [
            el(
                "div",
                el("icon", classes=self.cls("contact_icon"), name=self.style.icons[field]),
                el("span", text=value),
                classes=self.cls("contact_item"),
                data_field=field,
            )
            for field, value in self.contact_values(info)
        ]
        summary = None
        if info.summary:
            summary = el("p", text=info.summary, classes=self.cls("summary"), data_section="summary")

        return el(
            "header",
            el("h1", text=self.display_name(info), classes=self.cls("name")),
            el("div", *contact_items, classes=self.cls("contact")),
            summary,
            classes=self.cls("header"),
        )

    def education_entry(self, education: EducationEntry) -> Node:
        return self.entry(
            education.id,
            self.text_element("h3", education.institution, "entry_title"),
            self.text_element("p", self.degree_line(education), "entry_subtitle"),
            self.date_range(education.start_date, education.end_date, tag="p"),
            self.text_element("p", education.description, "entry_description"),
        )

    def skills_section(self, skills: tuple) -> Optional[Node]:
        if not skills:
            return None
        return self.section(
            "skills",
            el("div", *(self.skill_row(skill) for skill in skills), classes=self.cls("skills")),
        )

    def skill_row(self, skill: SkillEntry) -> Node:
        return el(
            "div",
            self.text_element("span", skill.name, "skill_name"),
            el("span", text=skill.level.value, classes=self.cls("skill_level")),
            classes=self.cls("skill"),
            data_entry_id=skill.id,
        )
