"""
PDF context logger.

Provides logging interface for the PDF context with automatic [pdf] prefix.
All PDF modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from bookstage.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[pdf]"


def setup_pdf_logger(log_dir: Path, pdf_command: str, verbose: bool = False) -> Path:
    """
    Setup logger for the PDF context.

    Args:
        log_dir: Directory for this build session
        pdf_command: Executable that will typeset the PDF
        verbose: Show DEBUG messages on the console too

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="pdf",
        log_dir=log_dir,
        extra_provenance={"PDF command": pdf_command},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [pdf] prefix


def _log_info(message: str) -> None:
    """Log info message with [pdf] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [pdf] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [pdf] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [pdf] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level PDF-specific logging helpers


def log_missing_input(input_path: Path) -> None:
    """Log the HTML path that was expected but not found."""
    _log_error(f"Could not find HTML file at {input_path}")


def log_generation_start(build_type: str, command: str) -> None:
    """Log start of PDF generation and echo the command line."""
    _log_info("Starting PDF generation with PrinceXML...")
    _log_debug(f"  Build type: {build_type}")
    _log_info(f"> {command}")


def log_generation_success(
    display_path: str, page_count: Optional[int], elapsed_time: float
) -> None:
    """Log the generated PDF location relative to the working directory."""
    _log_success(f"PDF successfully created at: {display_path}")
    if page_count is not None:
        _log_debug(f"  Pages: {page_count} ({elapsed_time:.2f}s)")
    else:
        _log_debug(f"  Elapsed: {elapsed_time:.2f}s")


def log_generation_failure(error: Exception) -> None:
    """Log a failed tool run with whatever detail the runtime provided."""
    _log_error("Error generating PDF with PrinceXML:")
    _log_error(f"  {error}")
