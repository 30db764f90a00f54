"""
Data structures passed into and out of the PDF stage.

The pipeline driver may hand the stage either these dataclasses or plain
mappings loaded from book.config.yml; the stage accepts both.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class Manuscript:
    """
    Work-in-progress document shared between pipeline stages.

    Attributes:
        build_type: Build profile selecting the build/<build_type>/ directory
        data: Anything earlier stages attached (content, metadata, ...)
    """

    build_type: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StageConfig:
    """
    Stage-specific configuration.

    Attributes:
        config: Option name -> primitive value, in command-line order
        meta: Stage metadata (unused by the PDF stage)
    """

    config: Optional[Dict[str, Any]] = None
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GlobalConfig:
    """Pipeline-wide configuration. Accepted by every stage, read by none here."""

    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StageContext:
    """Configuration handed to a stage alongside the manuscript."""

    stage_config: Optional[StageConfig] = None
    global_config: Optional[GlobalConfig] = None


@dataclass
class PdfStageResult:
    """
    Outcome of a successful PDF stage run.

    Attributes:
        manuscript: The manuscript passed in, unchanged
        build_type: Resolved build type
        input_path: HTML file that was typeset
        output_path: PDF file written by the tool
        command: Command line that was executed
        page_count: Pages in the generated PDF (None if not readable)
        elapsed_time: Seconds spent waiting on the tool
    """

    manuscript: Any
    build_type: str
    input_path: Path
    output_path: Path
    command: str
    page_count: Optional[int] = None
    elapsed_time: float = 0.0
