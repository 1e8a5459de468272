"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownVariantError(ValueError):
    """Raised when a template variant name does not match any registered variant."""

    def __init__(self, variant: str, valid: Iterable[str]):
        self.variant = variant
        self.valid = tuple(valid)
        super().__init__(f"Unknown template variant '{variant}'. Valid variants: {', '.join(self.valid)}")


class TemplateRenderError(Exception):
    """
    Exception raised when HTML generation from a visual tree fails.

    Attributes:
        message: Error description
        template_name: Name of the Jinja2 template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
