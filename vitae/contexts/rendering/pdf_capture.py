"""
PDF Capture

Export capability that writes a visual tree to an A4 PDF: the tree goes
through the HTML generator and WeasyPrint lays it out.
"""

import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv

from vitae.contexts.rendering.logger import _log_debug
from vitae.contexts.templating.html_generator import HTMLGenerator
from vitae.contexts.templating.variant_types import Variant
from vitae.contexts.templating.visual_tree import Node, template_content

load_dotenv()
EXPORTS_PATH = Path(os.getenv("VITAE_EXPORTS_PATH", "outs/exports"))


def write_pdf(html: str, pdf_path: Path) -> Path:
    """Render an HTML string into a PDF file using WeasyPrint."""
    from weasyprint import HTML

    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    HTML(string=html, base_url=str(pdf_path.parent)).write_pdf(str(pdf_path))
    return pdf_path


class PDFCapture:
    """
    Capture capability producing PDF files.

    Each call renders its own HTML and writes its own file; calls share no
    mutable state and may run concurrently.

    Attributes:
        output_dir: Directory PDFs are written to (default: VITAE_EXPORTS_PATH)
        html_generator: Visual tree to HTML converter
    """

    def __init__(self, output_dir: Path = None, html_generator: HTMLGenerator = None):
        self.output_dir = Path(output_dir) if output_dir is not None else EXPORTS_PATH
        self.html_generator = html_generator or HTMLGenerator()

    def build_html(self, tree: Node, filename: str) -> str:
        content = template_content(tree) or tree
        variant = content.attr("data-variant", Variant.MODERN.value)
        return self.html_generator.generate_document(tree, variant, title=Path(filename).stem)

    async def __call__(self, tree: Node, filename: str) -> Path:
        html = self.build_html(tree, filename)
        pdf_path = self.output_dir / filename
        _log_debug(f"Writing PDF: {pdf_path}")
        # WeasyPrint layout is CPU-bound and synchronous
        return await asyncio.to_thread(write_pdf, html, pdf_path)


class HTMLCapture(PDFCapture):
    """Capture capability writing the HTML document instead of a PDF."""

    async def __call__(self, tree: Node, filename: str) -> Path:
        html = self.build_html(tree, filename)
        html_path = self.output_dir / Path(filename).with_suffix(".html").name
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(html, encoding="utf-8")
        _log_debug(f"Wrote HTML: {html_path}")
        return html_path
