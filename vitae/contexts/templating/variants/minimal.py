"""
Minimal template.

Compact single column: plain contact line, summary without a heading,
experience without role descriptions, and a two-column sub-grid holding the
skill pills and the projects.
"""

from typing import Optional

from vitae.contexts.editing.resume_components_data_structures import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)
from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.variants.base import TemplateVariant
from vitae.contexts.templating.visual_tree import Node, el


class MinimalTemplate(TemplateVariant):
    variant = Variant.MINIMAL

    def render(self, doc: ResumeDocument) -> Node:
        info = doc.personal_info
        summary = None
        if info.summary:
            summary = self.section(
                "summary",
                el("p", text=info.summary, classes=self.cls("summary")),
                heading=False,
            )

        return self.root(
            self.header(info),
            summary,
            self.collection_section("experience", doc.experience, self.experience_entry),
            self.collection_section("education", doc.education, self.education_entry),
            self.sub_grid(doc),
        )

    def header(self, info: PersonalInfo) -> Node:
        contact_items = [
            el("span", text=value, classes=self.cls("contact_item"), data_field=field)
            for field, value in self.contact_values(info)
        ]
        return el(
            "header",
            el("h1", text=self.display_name(info), classes=self.cls("name")),
            el("div", *contact_items, classes=self.cls("contact")),
            classes=self.cls("header"),
        )

    def experience_entry(self, experience: ExperienceEntry) -> Node:
        return super().experience_entry(experience, show_description=False)

    def education_entry(self, education: EducationEntry) -> Node:
        return self.entry(
            education.id,
            self.entry_header(
                self.text_element("h3", education.institution, "entry_title"),
                self.date_range(education.start_date, education.end_date),
            ),
            self.text_element("p", self.degree_line(education), "entry_subtitle"),
            role="compact_entry",
        )

    def compact_project_entry(self, project: ProjectEntry) -> Node:
        return self.project_entry(project, role="compact_entry")

    def sub_grid(self, doc: ResumeDocument) -> Optional[Node]:
        if not doc.skills and not doc.projects:
            return None

        skills = None
        if doc.skills:
            pills = [
                el("span", text=skill.name, classes=self.cls("skill_pill"), data_entry_id=skill.id)
                for skill in doc.skills
            ]
            skills = self.section(
                "skills",
                el("div", *pills, classes=self.cls("skills")),
                classes=self.cls("grid_section"),
            )

        projects = self.collection_section(
            "projects",
            doc.projects,
            self.compact_project_entry,
            classes=self.cls("grid_section"),
        )
        return el("div", skills, projects, classes=self.cls("sub_grid"))
