"""
Variant Types

The closed set of template variants and the style sheet each one reads its
headings, labels and classes from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

from vitae.contexts.templating.exceptions import UnknownVariantError


class Variant(str, Enum):
    """Template variant discriminant."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Variant", str]) -> "Variant":
        """
        Resolve a Variant from a member or a case-insensitive name.

        Raises:
            UnknownVariantError: value names no variant
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise UnknownVariantError(str(value), (v.value for v in cls)) from e


@dataclass(frozen=True)
class VariantInfo:
    """Template picker metadata for one variant."""

    id: Variant
    name: str
    description: str


@dataclass(frozen=True)
class StyleSheet:
    """
    Per-variant presentation settings loaded from template/styles/<variant>.yaml.

    Attributes:
        variant: Variant the sheet belongs to
        display_name: Name shown in the template picker
        description: One-line description for the template picker
        labels: Fixed text (placeholders, link labels, separators)
        headings: Section name -> heading text
        icons: Contact field -> icon name
        classes: Element role -> space-separated class list
    """

    variant: Variant
    display_name: str
    description: str
    labels: Dict[str, str] = field(default_factory=dict)
    headings: Dict[str, str] = field(default_factory=dict)
    icons: Dict[str, str] = field(default_factory=dict)
    classes: Dict[str, str] = field(default_factory=dict)

    @property
    def info(self) -> VariantInfo:
        return VariantInfo(id=self.variant, name=self.display_name, description=self.description)
