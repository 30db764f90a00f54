"""
PDF Stage

Typesets the HTML written by the writeHtml stage into a PDF with PrinceXML.

Reads:  build/<build_type>/index.html
Writes: build/<build_type>/book.pdf

Options from the stage config are passed through to prince-books as
--<key>=<value> flags, in the order they appear. For example, a pipeline
configured with

    global:
      stages:
        - name: pdf
          config:
            landscape: true
            media: A4

runs: prince-books --landscape=true --media=A4 "<input>" -o "<output>"
"""

import os
import subprocess
import time
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from dotenv import load_dotenv

from bookstage.contexts.pdf.data_structures import PdfStageResult
from bookstage.contexts.pdf.exceptions import MissingInputError, PdfGenerationError
from bookstage.contexts.pdf.logger import (
    log_generation_failure,
    log_generation_start,
    log_generation_success,
    log_missing_input,
)
from bookstage.utils.pdf_processing import page_count

load_dotenv()

PDF_COMMAND = os.getenv("PDF_COMMAND", "prince-books")

DEFAULT_BUILD_TYPE = "pdf"
BUILD_DIR = "build"
INPUT_HTML_NAME = "index.html"
OUTPUT_PDF_NAME = "book.pdf"


def resolve_build_type(manuscript: Any) -> str:
    """
    Get the build type of a manuscript, defaulting to "pdf".

    Accepts mappings (buildType or build_type key) and objects with a
    build_type attribute. Empty or None build types fall back to the default.
    """
    if isinstance(manuscript, Mapping):
        build_type = manuscript.get("buildType") or manuscript.get("build_type")
    else:
        build_type = getattr(manuscript, "build_type", None)

    return build_type or DEFAULT_BUILD_TYPE


def input_html_path(build_type: str, cwd: Optional[Path] = None) -> Path:
    """Path of the rendered HTML for a build: <cwd>/build/<build_type>/index.html."""
    base = Path.cwd() if cwd is None else Path(cwd)
    return base / BUILD_DIR / build_type / INPUT_HTML_NAME


def output_pdf_path(build_type: str, cwd: Optional[Path] = None) -> Path:
    """Path of the generated PDF for a build: <cwd>/build/<build_type>/book.pdf."""
    base = Path.cwd() if cwd is None else Path(cwd)
    return base / BUILD_DIR / build_type / OUTPUT_PDF_NAME


def _stage_options(stage_config: Any) -> Optional[Mapping[str, Any]]:
    """Pull the option mapping out of a StageConfig or a plain mapping."""
    if stage_config is None:
        return None
    if isinstance(stage_config, Mapping):
        return stage_config.get("config")
    return getattr(stage_config, "config", None)


def _context_entry(context: Mapping[str, Any], snake_key: str, camel_key: str) -> Any:
    if snake_key in context:
        return context[snake_key]
    return context.get(camel_key)


def unpack_context(context: Any) -> Tuple[Any, Any]:
    """
    Split a stage context into (stage_config, global_config).

    Accepts a StageContext, a mapping with stageConfig/globalConfig (or
    stage_config/global_config) keys, or None.
    """
    if context is None:
        return None, None
    if isinstance(context, Mapping):
        return (
            _context_entry(context, "stage_config", "stageConfig"),
            _context_entry(context, "global_config", "globalConfig"),
        )
    return getattr(context, "stage_config", None), getattr(context, "global_config", None)


def format_option_value(value: Any) -> str:
    """
    Render a config value the way it appears in the pipeline's YAML.

    Booleans are lowercase, None is "null" and integral floats drop the ".0".
    Everything else goes through str() untouched.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_pdf_options(stage_config: Any) -> List[str]:
    """
    Convert stage config options into prince-books flags.

    Args:
        stage_config: StageConfig, mapping with a "config" key, or None

    Returns:
        List of "--<key>=<value>" flags in config order (empty if no config)

    Example:
        >>> build_pdf_options({"config": {"landscape": True, "media": "A4"}})
        ['--landscape=true', '--media=A4']
    """
    options = _stage_options(stage_config)
    if not options:
        return []

    return [f"--{key}={format_option_value(value)}" for key, value in options.items()]


def build_command(
    options: List[str],
    input_path: Path,
    output_path: Path,
    executable: str = PDF_COMMAND,
) -> str:
    """Assemble the shell command line: <executable> <flags> "<input>" -o "<output>"."""
    parts = [executable, *options, f'"{input_path}"', "-o", f'"{output_path}"']
    return " ".join(parts)


def run_stage(
    manuscript: Any,
    context: Any = None,
    *,
    stage_config: Any = None,
    global_config: Any = None,
) -> PdfStageResult:
    """
    Run the PDF stage and report what was produced.

    Blocks until prince-books exits. Its stdin/stdout/stderr are inherited so
    the tool's own progress output shows up live.

    Args:
        manuscript: Manuscript descriptor (only its build type is read)
        context: StageContext or mapping with stageConfig/stage_config and
            globalConfig/global_config entries
        stage_config: Stage-specific configuration with a "config" option mapping
            (overrides the one in context)
        global_config: Pipeline-wide configuration (accepted, not used)

    Returns:
        PdfStageResult holding the unchanged manuscript and run details

    Raises:
        MissingInputError: build/<build_type>/index.html does not exist
        PdfGenerationError: prince-books exited non-zero or could not be started
    """
    context_stage_config, context_global_config = unpack_context(context)
    if stage_config is None:
        stage_config = context_stage_config
    if global_config is None:
        global_config = context_global_config

    build_type = resolve_build_type(manuscript)

    input_path = input_html_path(build_type)
    if not input_path.exists():
        log_missing_input(input_path)
        raise MissingInputError(input_path, build_type)

    output_path = output_pdf_path(build_type)
    options = build_pdf_options(stage_config)
    command = build_command(options, input_path, output_path)

    log_generation_start(build_type, command)
    start_time = time.time()

    try:
        subprocess.run(command, shell=True, check=True)
    except subprocess.CalledProcessError as e:
        error = PdfGenerationError(
            "PrinceXML exited with an error",
            command=command,
            returncode=e.returncode,
            original_error=e,
        )
        log_generation_failure(error)
        raise error from e
    except OSError as e:
        error = PdfGenerationError(
            "PrinceXML could not be started",
            command=command,
            original_error=e,
        )
        log_generation_failure(error)
        raise error from e

    elapsed_time = time.time() - start_time

    pages = page_count(output_path) if output_path.exists() else None
    log_generation_success(os.path.relpath(output_path, Path.cwd()), pages, elapsed_time)

    return PdfStageResult(
        manuscript=manuscript,
        build_type=build_type,
        input_path=input_path,
        output_path=output_path,
        command=command,
        page_count=pages,
        elapsed_time=elapsed_time,
    )


def run(
    manuscript: Any,
    context: Any = None,
    *,
    stage_config: Any = None,
    global_config: Any = None,
) -> Any:
    """
    Pipeline entry point: typeset build/<build_type>/index.html into book.pdf.

    Called by the pipeline driver as run(manuscript, {"stageConfig": ..., "globalConfig": ...}).
    Returns the manuscript object unchanged. See run_stage() for errors.
    """
    result = run_stage(
        manuscript, context, stage_config=stage_config, global_config=global_config
    )
    return result.manuscript
