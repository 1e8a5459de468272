"""
Rendering Context

Responsibilities:
- Selects the screen tree for preview and the print-mode tree for export
- Derives export filenames
- Drives the capture capability (PDF via WeasyPrint by default)
- Reports export success or failure without aborting the session

Owns: Export coordination, PDF/HTML capture
Never: Modifies snapshots or template content
"""

from vitae.contexts.rendering.exporter import (
    CaptureCapability,
    ExportCoordinator,
    ExportResult,
    export_filename,
)
from vitae.contexts.rendering.pdf_capture import HTMLCapture, PDFCapture

__all__ = [
    "ExportCoordinator",
    "ExportResult",
    "CaptureCapability",
    "export_filename",
    "PDFCapture",
    "HTMLCapture",
]
