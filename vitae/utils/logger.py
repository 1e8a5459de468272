"""
Loguru sinks for VITAE command-line sessions.

Library modules only emit records through their context logger
(vitae/contexts/<context>/logger.py). A CLI command calls setup_logger once,
which sends everything to a per-session log file and INFO and above to the
terminal, then stamps the file with how the session was started.
"""

import sys
from pathlib import Path

from loguru import logger

# Terminal colours; levels not listed keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Replace loguru's default sink with a session log file and a terminal sink.

    Args:
        context_name: Context the session belongs to; names the log file
            ("render" -> render.log)
        log_dir: Session directory, created if missing
        extra_provenance: Session details for the header (template, page format, ...)
        level_colors: Per-level colour overrides merged over LEVEL_COLORS

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/export_20261019_123456"),
            extra_provenance={"Template": "classic", "Page format": "A4"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write the session header: how VITAE was invoked, from where, on which Python.

    Args:
        extra_context: Session details appended after the standard lines
    """
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(rule)
