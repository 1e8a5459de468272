"""
Templating Registries

Centralized registries for variant strategies, variant style sheets and the
Jinja2 templates used for HTML generation.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Type, Union

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)
from omegaconf import OmegaConf

from vitae.contexts.templating.exceptions import UnknownVariantError
from vitae.contexts.templating.logger import log_style_loaded
from vitae.contexts.templating.variant_types import StyleSheet, Variant, VariantInfo
from vitae.contexts.templating.variants import DEFAULT_VARIANT_CLASSES
from vitae.contexts.templating.variants.base import TemplateVariant

load_dotenv()
TEMPLATE_PATH = Path(os.getenv("VITAE_TEMPLATE_PATH", Path(__file__).parent / "template"))


class StyleRegistry:
    """
    Registry for loading and caching variant style sheets.

    Style sheets are stored in template/styles/{variant}.yaml.
    """

    def __init__(self, styles_base_path: Path = None):
        if styles_base_path is None:
            styles_base_path = TEMPLATE_PATH / "styles"

        self.styles_base_path = Path(styles_base_path)
        self._cache: Dict[Variant, StyleSheet] = {}

    def get_style_path(self, variant: Union[Variant, str]) -> Path:
        return self.styles_base_path / f"{Variant.parse(variant).value}.yaml"

    def get_style(self, variant: Union[Variant, str]) -> StyleSheet:
        """
        Get a style sheet by variant, loading and caching it if necessary.

        Raises:
            UnknownVariantError: variant names no variant
            FileNotFoundError: style file is missing
        """
        variant = Variant.parse(variant)
        if variant in self._cache:
            return self._cache[variant]

        style_path = self.get_style_path(variant)
        if not style_path.exists():
            raise FileNotFoundError(f"Style sheet not found for variant '{variant}' at {style_path}")

        raw = OmegaConf.to_container(OmegaConf.load(style_path), resolve=True)
        style = StyleSheet(
            variant=variant,
            display_name=raw["display_name"],
            description=raw.get("description", ""),
            labels={key: str(value) for key, value in (raw.get("labels") or {}).items()},
            headings={key: str(value) for key, value in (raw.get("headings") or {}).items()},
            icons={key: str(value) for key, value in (raw.get("icons") or {}).items()},
            classes={key: value or "" for key, value in (raw.get("classes") or {}).items()},
        )
        log_style_loaded(variant.value, style_path)

        self._cache[variant] = style
        return style

    def clear_cache(self):
        """Clear the style cache."""
        self._cache.clear()

    def is_cached(self, variant: Union[Variant, str]) -> bool:
        return Variant.parse(variant) in self._cache


class VariantRegistry:
    """
    Registry mapping each Variant to the strategy that renders it.

    Adding a template means registering one more TemplateVariant subclass;
    nothing else in the pipeline changes.
    """

    def __init__(
        self,
        variant_classes: Iterable[Type[TemplateVariant]] = DEFAULT_VARIANT_CLASSES,
        style_registry: StyleRegistry = None,
    ):
        self.style_registry = style_registry or StyleRegistry()
        self._classes: Dict[Variant, Type[TemplateVariant]] = {}
        self._instances: Dict[Variant, TemplateVariant] = {}
        for variant_cls in variant_classes:
            self.register(variant_cls)

    def register(self, variant_cls: Type[TemplateVariant]) -> None:
        self._classes[variant_cls.variant] = variant_cls
        self._instances.pop(variant_cls.variant, None)

    def get(self, variant: Union[Variant, str]) -> TemplateVariant:
        """
        Get the strategy for a variant.

        Raises:
            UnknownVariantError: no strategy is registered for the variant
        """
        variant = Variant.parse(variant)
        if variant not in self._classes:
            raise UnknownVariantError(variant.value, (v.value for v in self._classes))

        if variant not in self._instances:
            style = self.style_registry.get_style(variant)
            self._instances[variant] = self._classes[variant](style)
        return self._instances[variant]

    def variants(self) -> List[Variant]:
        return list(self._classes)

    def list_variants(self) -> List[VariantInfo]:
        """Template picker metadata, in registration order."""
        return [self.style_registry.get_style(variant).info for variant in self._classes]


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored in template/structure/{name}.html.jinja.
    """

    def __init__(self, templates_base_path: Path = None):
        if templates_base_path is None:
            templates_base_path = TEMPLATE_PATH

        self.templates_base_path = Path(templates_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name (e.g., 'document')

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"structure/{name}.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_base_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_base_path / "structure" / f"{name}.html.jinja"

    def read_asset(self, relative_path: str) -> str:
        """Read a static asset (e.g. a stylesheet) stored next to the templates."""
        return (self.templates_base_path / relative_path).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
