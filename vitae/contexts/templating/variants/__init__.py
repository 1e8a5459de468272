"""Template variant strategies, one module per variant."""

from vitae.contexts.templating.variants.base import TemplateVariant
from vitae.contexts.templating.variants.classic import ClassicTemplate
from vitae.contexts.templating.variants.minimal import MinimalTemplate
from vitae.contexts.templating.variants.modern import ModernTemplate

# Registration order is template picker order
DEFAULT_VARIANT_CLASSES = (ModernTemplate, ClassicTemplate, MinimalTemplate)

__all__ = [
    "TemplateVariant",
    "ModernTemplate",
    "ClassicTemplate",
    "MinimalTemplate",
    "DEFAULT_VARIANT_CLASSES",
]
