"""
Integration tests for the PDF stage - runs the real prince-books.
"""

import shutil

import pytest

from bookstage.contexts.pdf import PdfGenerationError, run, run_stage
from bookstage.contexts.pdf.stage import PDF_COMMAND

PRINCE_AVAILABLE = shutil.which(PDF_COMMAND) is not None
skip_if_no_prince = pytest.mark.skipif(
    not PRINCE_AVAILABLE,
    reason=f"{PDF_COMMAND} not installed - install PrinceXML (prince-books edition)",
)


@pytest.mark.integration
@skip_if_no_prince
def test_generates_pdf(rendered_book):
    """Rendered HTML becomes a non-empty build/pdf/book.pdf."""
    manuscript = {"buildType": "pdf"}

    result = run_stage(manuscript, stage_config={"config": {"media": "A5"}})

    assert result.manuscript is manuscript
    assert result.output_path.exists()
    assert result.output_path.stat().st_size > 0
    assert result.page_count is None or result.page_count >= 1


@pytest.mark.integration
@skip_if_no_prince
def test_rerun_overwrites_pdf(rendered_book):
    run({})
    pdf_path = rendered_book / "build" / "pdf" / "book.pdf"
    first_size = pdf_path.stat().st_size

    run({})

    assert pdf_path.exists()
    assert pdf_path.stat().st_size > 0
    assert first_size > 0


@pytest.mark.integration
@skip_if_no_prince
def test_unknown_option_fails(rendered_book):
    """prince-books rejects options it does not know, and the stage reports it."""
    with pytest.raises(PdfGenerationError) as exc_info:
        run({}, stage_config={"config": {"definitely-not-an-option": "yes"}})

    assert exc_info.value.returncode != 0
