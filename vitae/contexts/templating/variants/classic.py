"""
Classic template.

Single column with a centred serif header, a bullet-separated contact line
and bold ruled section headings. Sections run summary, experience, education,
skills, projects.
"""

from typing import Optional

from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    SkillEntry,
)
from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.variants.base import TemplateVariant
from vitae.contexts.templating.visual_tree import Node, el


class ClassicTemplate(TemplateVariant):
    variant = Variant.CLASSIC

    def render(self, doc: ResumeDocument) -> Node:
        info = doc.personal_info
        summary = None
        if info.summary:
            summary = self.section("summary", el("p", text=info.summary, classes=self.cls("summary")))

        return self.root(
            self.header(info),
            summary,
            self.collection_section("experience", doc.experience, self.experience_entry),
            self.collection_section("education", doc.education, self.education_entry),
            self.skills_section(doc.skills),
            self.collection_section("projects", doc.projects, self.project_entry),
        )

    def header(self, info: PersonalInfo) -> Node:
        # Separator goes between present items only, so a missing email leaves no leading bullet
        separator = self.label("contact_separator")
        contact_items = [
            el(
                "span",
                text=value if position == 0 else f"{separator}{value}",
                classes=self.cls("contact_item"),
                data_field=field,
            )
            for position, (field, value) in enumerate(self.contact_values(info))
        ]
        return el(
            "header",
            el("h1", text=self.display_name(info), classes=self.cls("name")),
            el("div", *contact_items, classes=self.cls("contact")),
            classes=self.cls("header"),
        )

    def experience_entry(self, experience: ExperienceEntry) -> Node:
        return super().experience_entry(experience, title_role="experience_title")

    def education_entry(self, education: EducationEntry) -> Node:
        return self.entry(
            education.id,
            self.entry_header(
                self.text_element("h3", education.institution, "entry_title"),
                self.date_range(education.start_date, education.end_date),
            ),
            self.text_element("p", self.degree_line(education), "entry_subtitle"),
            self.text_element("p", education.description, "entry_description"),
        )

    def skills_section(self, skills: tuple) -> Optional[Node]:
        if not skills:
            return None
        return self.section(
            "skills",
            el("div", *(self.skill_item(skill) for skill in skills), classes=self.cls("skills")),
        )

    def skill_item(self, skill: SkillEntry) -> Node:
        return el(
            "div",
            self.text_element("span", skill.name, "skill_name"),
            el("span", text=f"({skill.level.value})", classes=self.cls("skill_level")),
            classes=self.cls("skill"),
            data_entry_id=skill.id,
        )
