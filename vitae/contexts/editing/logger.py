"""
Editing context logger.

Provides logging interface for editing context with automatic [edit] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[edit]"


def _log_info(message: str) -> None:
    """Log info message with [edit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [edit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_stale_id(operation: str, collection: str, entry_id: str) -> None:
    """Log a mutation that targeted an id no longer present in the snapshot."""
    _log_debug(f"{operation}: no {collection} entry with id '{entry_id}', snapshot unchanged")


def log_dropped_bullet_edit(operation: str, entry_id: str, index: int, size: int) -> None:
    """Log a bullet edit whose index fell outside the current bullet list."""
    _log_debug(
        f"{operation}: bullet index {index} out of range for experience '{entry_id}' "
        f"({size} bullets), dropped"
    )
