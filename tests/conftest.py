"""Shared fixtures for bookstage tests."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore loguru's default stderr sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages emitted during a test."""
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    try:
        logger.remove(sink_id)
    except ValueError:
        # Already removed by a setup_logger() call
        pass


@pytest.fixture
def book_dir(tmp_path, monkeypatch):
    """Empty book project used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_html(root: Path, build_type: str = "pdf") -> Path:
    html = root / "build" / build_type / "index.html"
    html.parent.mkdir(parents=True, exist_ok=True)
    html.write_text("<html><body><h1>Chapter 1</h1></body></html>", encoding="utf-8")
    return html


@pytest.fixture
def rendered_book(book_dir):
    """Book project with build/pdf/index.html already rendered."""
    _write_html(book_dir)
    return book_dir


@pytest.fixture
def write_html(book_dir):
    """Render build/<build_type>/index.html into the book project."""
    return lambda build_type="pdf": _write_html(book_dir, build_type)


@pytest.fixture
def fake_prince(monkeypatch):
    """Replace subprocess.run in the stage with a mock that exits 0."""
    mock_run = MagicMock(
        side_effect=lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 0)
    )
    monkeypatch.setattr("bookstage.contexts.pdf.stage.subprocess.run", mock_run)
    return mock_run
