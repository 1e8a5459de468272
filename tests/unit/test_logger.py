"""Unit tests for CLI session logging setup."""

import pytest
from loguru import logger

from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_loguru():
    yield
    logger.remove()


@pytest.mark.unit
def test_setup_logger_writes_session_file(tmp_path):
    """Test that the session file is created under the log directory and gets the header."""
    log_dir = tmp_path / "export_20261019_120000"

    log_file = setup_logger("render", log_dir, extra_provenance={"Template": "classic"})
    logger.debug("[render] debug detail")
    logger.remove()

    assert log_file == log_dir / "render.log"
    content = log_file.read_text()
    assert "Working directory:" in content
    assert "Template: classic" in content
    assert "[render] debug detail" in content


@pytest.mark.unit
def test_context_setup_adds_provenance(tmp_path):
    """Test the rendering context wrapper around setup_logger."""
    log_file = setup_rendering_logger(tmp_path, "minimal")
    logger.remove()

    content = log_file.read_text()
    assert log_file.name == "render.log"
    assert "Template: minimal" in content
    assert "Page format: A4" in content
