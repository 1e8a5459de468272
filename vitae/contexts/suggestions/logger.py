"""
Suggestions context logger.

Provides logging interface for suggestions context with automatic [suggest] prefix.
All suggestions modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[suggest]"


def _log_info(message: str) -> None:
    """Log info message with [suggest] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [suggest] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [suggest] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_request_failed(kind: str, provider_name: str, error: Exception) -> None:
    """Log a provider failure that was replaced by the fallback value."""
    logger.opt(exception=error).error(
        f"{CONTEXT_PREFIX} {kind} request to {provider_name} failed, using fallback: {error}"
    )


def log_request_result(kind: str, provider_name: str, suggestions: list) -> None:
    _log_info(f"{provider_name} returned {len(suggestions)} {kind} suggestions")


def log_skills_merged(suggested: int, added: int) -> None:
    skipped = suggested - added
    _log_info(f"Merged skill suggestions: {added} added, {skipped} skipped as duplicates or blank")
