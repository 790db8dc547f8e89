#!/usr/bin/env python3
"""Command line interface for samtofastq using Typer."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from samtofastq.core.exceptions import SamToFastqError
from samtofastq.core.logging_config import add_file_handler, get_log_path, get_logger, setup_logging
from samtofastq.version import __version__

app = typer.Typer(
    name="samtofastq",
    help="Extract reads from SAM/BAM files into single-end or paired FASTQ files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger("cli")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold green]samtofastq[/bold green] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose output (DEBUG level)."),
    ] = False,
) -> None:
    """samtofastq - Convert aligned reads back to FASTQ."""
    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level)  # type: ignore


@app.command()
def convert(
    input_file: Annotated[Path, typer.Option("-i", "--input", help="Input SAM/BAM/CRAM file to extract reads from.")],
    fastq: Annotated[
        Optional[Path],
        typer.Option("-f", "--fastq", help="Output FASTQ file (single-end, or first end of the pair)."),
    ] = None,
    second_end_fastq: Annotated[
        Optional[Path],
        typer.Option("-f2", "--second-end-fastq", help="Output FASTQ file for the second end of the pair."),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("-o", "--output-dir", help="Write FASTQ files named after the input into this directory."),
    ] = None,
    paired: Annotated[
        bool, typer.Option("--paired", help="Write paired output when using --output-dir.")
    ] = False,
    re_reverse: Annotated[
        bool,
        typer.Option(
            "--re-reverse/--no-re-reverse",
            "-rc/-RC",
            help="Re-reverse bases and qualities of reads aligned to the negative strand.",
        ),
    ] = True,
    keep_partial: Annotated[
        bool, typer.Option("--keep-partial", help="Keep partially written FASTQ files when conversion fails.")
    ] = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option(
            "--log-file", help="Also write a DEBUG log to this file. With -o, defaults to a log in the output directory."
        ),
    ] = None,
) -> None:
    """Extract read sequences and qualities into Sanger FASTQ.

    Reads aligned to the reverse strand are reverse-complemented (qualities
    reversed) to restore the original sequencer orientation, unless
    --no-re-reverse is given. With a second-end FASTQ, mates are matched by
    read name and written to the two files in the same order, suffixed /1 and /2.

    Examples:

        # Single-end
        samtofastq convert -i sample.bam -f sample.fastq.gz

        # Paired-end
        samtofastq convert -i sample.bam -f sample_R1.fastq -f2 sample_R2.fastq

        # Paired-end, names derived from the input
        samtofastq convert -i sample.sorted.bam -o fastq/ --paired
    """
    from samtofastq.models.models import SamToFastqConfig
    from samtofastq.sam_to_fastq import run_sam_to_fastq

    if log_file is None and output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        log_file = get_log_path(output_dir)
    if log_file is not None:
        add_file_handler(log_file)
        logger.info(f"Logging to {log_file}")

    try:
        config = SamToFastqConfig(
            input_file=input_file,
            fastq=fastq,
            second_end_fastq=second_end_fastq,
            output_dir=output_dir,
            paired=paired,
            re_reverse=re_reverse,
            keep_partial=keep_partial,
        )
    except ValidationError as e:
        for error in e.errors():
            console.print(f"[red]Error:[/red] {error['msg']}")
        raise typer.Exit(1) from None

    console.print(f"  Input: {config.input_file}")
    console.print(f"  Mode: {config.mode}-end")
    console.print(f"  FASTQ: {config.fastq}")
    if config.mode == "paired":
        console.print(f"  Second-end FASTQ: {config.second_end_fastq}")
    console.print(f"  Re-reverse: {'enabled' if config.re_reverse else 'disabled'}")
    console.print()

    try:
        result = run_sam_to_fastq(config)
    except (SamToFastqError, OSError, ValueError) as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    logger.info(f"Conversion complete! Wrote {result.records_written} FASTQ records.")


def main_cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main_cli()
