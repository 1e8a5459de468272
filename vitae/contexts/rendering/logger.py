"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, variant: str) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this export session
        variant: Template variant being exported

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": variant, "Page format": "A4"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(filename: str, variant: str, section_names: list) -> None:
    """Log start of an export with context."""
    _log_info(f"Starting export: {filename}")
    _log_debug(f"  Template: {variant}")
    _log_debug(f"  Sections: {', '.join(section_names) if section_names else 'none'}")


def log_export_result(result, elapsed_time: float) -> None:
    """
    Log export result.

    Args:
        result: ExportResult from ExportCoordinator.export()
        elapsed_time: Time taken by the capture
    """
    if result.success:
        _log_success(f"{result.filename}: exported ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_debug(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to export {result.filename} ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
