#!/usr/bin/env python3
"""
PDF Build CLI

Typesets build/<build_type>/index.html into build/<build_type>/book.pdf with PrinceXML.
Run from the book project root (where build/ lives).

Commands:
    build    - Run the PDF stage for a build type
    command  - Show the prince-books command line without running it

Examples:\n

    build_pdf.py build                                    # build/pdf/index.html -> book.pdf

    build_pdf.py build --build-type print                 # build/print/...

    build_pdf.py build -s media=A4 -s landscape=true      # Pass options to prince-books

    build_pdf.py command -s media=A4                      # Dry run
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from bookstage.contexts.pdf import (
    GlobalConfig,
    Manuscript,
    PdfStageError,
    StageConfig,
    StageContext,
    build_pdf_options,
    run_stage,
)
from bookstage.contexts.pdf.logger import setup_pdf_logger
from bookstage.contexts.pdf.stage import (
    DEFAULT_BUILD_TYPE,
    PDF_COMMAND,
    build_command,
    input_html_path,
    output_pdf_path,
)
from bookstage.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def parse_options(pairs: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse key=value pairs into a stage option mapping.

    Values are kept as the raw text after the first "=", in the order given.
    """
    options = {}
    for pair in pairs or []:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise typer.BadParameter(f"Expected key=value, got: {pair}", param_hint="--set")
        options[key] = value

    return options


app = typer.Typer(
    help="Typeset rendered book HTML into PDF with PrinceXML",
    add_completion=False,
    invoke_without_command=True,
)

BuildTypeOption = Annotated[
    str,
    typer.Option(
        "--build-type",
        "-b",
        help="Build type (selects build/<build-type>/)",
    ),
]

SetOption = Annotated[
    Optional[List[str]],
    typer.Option(
        "--set",
        "-s",
        help="prince-books option as key=value (repeatable, passed as --key=value)",
    ),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_cmd(
    build_type: BuildTypeOption = DEFAULT_BUILD_TYPE,
    options: SetOption = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output (build type, page count, timing)",
        ),
    ] = False,
):
    """
    Generate build/<build-type>/book.pdf from build/<build-type>/index.html.

    Examples:\n

        $ build_pdf.py build                                  # Default pdf build

        $ build_pdf.py build -b print -s media=A4             # Print build, A4 pages
    """
    stage_config = StageConfig(config=parse_options(options))

    log_dir = LOGS_PATH / f"pdf_{now()}"
    log_file = setup_pdf_logger(log_dir, PDF_COMMAND, verbose=verbose)

    typer.secho(f"\nBuilding PDF: {build_type}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        result = run_stage(
            Manuscript(build_type=build_type),
            StageContext(stage_config=stage_config, global_config=GlobalConfig()),
        )
    except PdfStageError as e:
        typer.echo("")
        typer.secho("✗ PDF generation failed", fg=typer.colors.RED, bold=True, err=True)
        typer.secho(f"  {e}", fg=typer.colors.RED, err=True)
        typer.echo(f"  Log: {display_path(log_file)}")
        typer.echo("")
        raise typer.Exit(code=1)

    typer.echo("")
    typer.secho("✓ PDF generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {display_path(result.output_path)}")
    if result.page_count is not None:
        typer.echo(f"  Pages: {result.page_count}")
    typer.echo(f"  Time: {result.elapsed_time:.2f}s")
    typer.echo(f"  Log: {display_path(log_file)}")
    typer.echo("")

    raise typer.Exit(code=0)


@app.command("command")
def command_cmd(
    build_type: BuildTypeOption = DEFAULT_BUILD_TYPE,
    options: SetOption = None,
):
    """
    Print the prince-books command line the build command would run.

    Does not check that the HTML exists and does not run anything.
    """
    stage_config = StageConfig(config=parse_options(options))
    typer.echo(
        build_command(
            build_pdf_options(stage_config),
            input_html_path(build_type),
            output_pdf_path(build_type),
        )
    )


if __name__ == "__main__":
    app()
