#!/usr/bin/env python3
"""Path helpers shared by the CLI and the configuration model."""

from pathlib import Path

from samtofastq.core.constants import FASTQ_SUFFIX


def check_output_directory(outdir: str) -> str:
    """Check if outdir exists, otherwise create it.

    Args:
        outdir: Path to the output directory.

    Returns:
        The output directory path as a string.
    """
    outdir_path = Path(outdir)
    if not outdir_path.is_dir():
        outdir_path.mkdir(parents=True, exist_ok=True)
    return outdir


def get_sample_name(filename: str) -> str:
    """Get the sample name as the basename of an alignment file.

    ``sample.sorted.bam`` and ``sample.bam`` both give ``sample``.
    """
    sample_name = Path(filename).name
    if ".sorted" in sample_name:
        sample_name = sample_name.replace(".sorted", "")
    for suffix in (".bam", ".sam", ".cram"):
        sample_name = sample_name.removesuffix(suffix)
    return sample_name


def derive_fastq_paths(input_file: str, output_dir: str, paired: bool) -> tuple[Path, Path | None]:
    """Build output FASTQ paths in ``output_dir`` from the input file name.

    Args:
        input_file: SAM/BAM/CRAM file being converted.
        output_dir: Directory the FASTQ files are written to.
        paired: Whether to return a second-end path as well.

    Returns:
        ``(fastq, second_end_fastq)``; the second path is None for single-end output.
    """
    sample_name = get_sample_name(input_file)
    outdir = Path(output_dir)
    if paired:
        return outdir / f"{sample_name}_R1{FASTQ_SUFFIX}", outdir / f"{sample_name}_R2{FASTQ_SUFFIX}"
    return outdir / f"{sample_name}{FASTQ_SUFFIX}", None
