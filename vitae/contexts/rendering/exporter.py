"""
Export Coordinator

Chooses which tree is shown and which is captured: the screen preview for
display, and a freshly built print-mode tree for export. The print tree has
the same sections, order and text as the preview, minus scroll and
interaction styling.
"""

import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Union

from vitae.contexts.editing.resume_data_structure import ResumeDocument
from vitae.contexts.rendering.logger import log_export_result, log_export_start
from vitae.contexts.rendering.pdf_capture import PDFCapture
from vitae.contexts.templating.registries import VariantRegistry
from vitae.contexts.templating.renderer import render_preview
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.visual_tree import Node, section_names

DEFAULT_EXPORT_NAME = "resume"
EXPORT_EXTENSION = ".pdf"

PATH_SEPARATORS = re.compile(r"[\\/]+")


class CaptureCapability(Protocol):
    """External capture: takes a render target and a filename, produces a document."""

    async def __call__(self, tree: Node, filename: str) -> Optional[Path]: ...


@dataclass
class ExportResult:
    """
    Result of one export.

    Attributes:
        success: Whether the capture completed
        filename: Filename handed to the capture capability
        variant: Template variant exported
        output_path: Where the capture wrote the document (None if failed or unknown)
        sections: Sections present in the captured tree, in order
        error: Error description when the capture failed
    """

    success: bool
    filename: str
    variant: Variant
    output_path: Optional[Path] = None
    sections: List[str] = field(default_factory=list)
    error: Optional[str] = None


def export_filename(doc: ResumeDocument) -> str:
    """
    Derive the export filename from the résumé owner's name.

    Returns:
        "<name>.pdf", or "resume.pdf" when the name is blank. Path separators
        in the name become "-".

    Examples:
        export_filename(doc)  # name "Ada Lovelace"
        # "Ada Lovelace.pdf"
    """
    name = PATH_SEPARATORS.sub("-", doc.personal_info.name.strip())
    return f"{name or DEFAULT_EXPORT_NAME}{EXPORT_EXTENSION}"


class ExportCoordinator:
    """
    Pairs the preview tree with its print-mode counterpart and drives captures.

    Attributes:
        capture: Export capability (default: PDFCapture)
        registry: Variant registry used for rendering (default: built-in variants)
    """

    def __init__(self, capture: CaptureCapability = None, registry: VariantRegistry = None):
        self.capture = capture or PDFCapture()
        self.registry = registry

    def preview(self, doc: ResumeDocument, variant: Union[Variant, str]) -> Node:
        """Screen tree for live preview."""
        return render_preview(doc, variant, print_mode=False, registry=self.registry)

    def print_tree(self, doc: ResumeDocument, variant: Union[Variant, str]) -> Node:
        """Off-screen print-mode tree used as capture input."""
        return render_preview(doc, variant, print_mode=True, registry=self.registry)

    async def export(self, doc: ResumeDocument, variant: Union[Variant, str]) -> ExportResult:
        """
        Capture the print-mode render of a snapshot.

        Every call builds its own tree and filename, so repeated exports are
        independent captures. A failing capture is reported in the result
        rather than raised.

        Args:
            doc: Snapshot to export
            variant: Template variant

        Returns:
            ExportResult describing the capture
        """
        variant = Variant.parse(variant)
        tree = self.print_tree(doc, variant)
        filename = export_filename(doc)
        sections = section_names(tree)

        log_export_start(filename, variant.value, sections)
        start_time = time.time()

        try:
            output_path = await self.capture(tree, filename)
        except Exception as e:
            result = ExportResult(
                success=False,
                filename=filename,
                variant=variant,
                sections=sections,
                error=f"{type(e).__name__}: {e}",
            )
        else:
            result = ExportResult(
                success=True,
                filename=filename,
                variant=variant,
                output_path=output_path,
                sections=sections,
            )

        log_export_result(result, time.time() - start_time)
        return result
