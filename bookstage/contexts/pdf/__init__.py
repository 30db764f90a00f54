"""
PDF Context

Responsibilities:
- Locates the HTML rendered by earlier stages
- Translates stage config options into prince-books flags
- Runs PrinceXML and reports the generated PDF

Owns: PDF generation for build/<build_type>/book.pdf
Never: Generates HTML or parses/merges config files
"""

from bookstage.contexts.pdf.data_structures import (
    GlobalConfig,
    Manuscript,
    PdfStageResult,
    StageConfig,
    StageContext,
)
from bookstage.contexts.pdf.exceptions import (
    MissingInputError,
    PdfGenerationError,
    PdfStageError,
)
from bookstage.contexts.pdf.stage import build_pdf_options, run, run_stage

__all__ = [
    "GlobalConfig",
    "Manuscript",
    "MissingInputError",
    "PdfGenerationError",
    "PdfStageError",
    "PdfStageResult",
    "StageConfig",
    "StageContext",
    "build_pdf_options",
    "run",
    "run_stage",
]
