"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, variant: str) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        variant: Template variant being rendered

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Template": variant},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_style_loaded(variant: str, style_path: Path) -> None:
    _log_debug(f"Loaded {variant} style sheet from {style_path}")


def log_html_generated(variant: str, section_names: list, num_chars: int) -> None:
    """Log result of turning a visual tree into HTML."""
    shown = ", ".join(section_names) if section_names else "no sections"
    _log_info(f"Generated {variant} HTML ({num_chars} chars): {shown}")


def log_html_failed(variant: str, template_path: Path, error: Exception) -> None:
    """Log a Jinja2 failure while generating HTML."""
    _log_error(f"Failed to generate {variant} HTML from {template_path}: {error}")
