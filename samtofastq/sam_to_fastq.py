#!/usr/bin/env python3
"""
samtofastq, sam_to_fastq.py - Convert aligned reads back to FASTQ.
==================================================================

Purpose
-------

Extract read sequences and qualities from a SAM/BAM/CRAM file and write them
as Sanger FASTQ. Two modes are supported:

1. Single-end: every record becomes one entry in one FASTQ file, named by its
   read name.
2. Paired: records are matched by read name and written in lockstep to two
   FASTQ files with ``/1`` and ``/2`` name suffixes.

With re-reversal enabled (the default), reads aligned to the negative strand
are reverse-complemented (qualities reversed) so the FASTQ holds the bases in
the order the sequencer produced them.

If the conversion fails after output files were opened, the partial files are
deleted unless ``keep_partial`` is set.
"""

from collections.abc import Iterator
from contextlib import ExitStack
from pathlib import Path

from samtofastq.core.check_args import assert_file_is_readable, assert_file_is_writable
from samtofastq.core.constants import MATE_SEPARATOR, MateNumber
from samtofastq.core.exceptions import SamToFastqError
from samtofastq.core.fastq_writer import FastqRecord, FastqWriter
from samtofastq.core.logging_config import get_logger
from samtofastq.core.mate_matcher import MateMatcher
from samtofastq.core.read_alignment_records import AlignmentReader, AlignmentRecord
from samtofastq.core.strand import StrandNormalizer
from samtofastq.models.models import ConversionResult, SamToFastqConfig

logger = get_logger(__name__)


def build_fastq_record(
    record: AlignmentRecord, mate_number: MateNumber | None, normalizer: StrandNormalizer
) -> FastqRecord:
    """Build the FASTQ entry for one alignment record.

    Args:
        record: Alignment record to emit.
        mate_number: 1 or 2 in paired mode, None for single-end output.
        normalizer: Decides whether bases and qualities are flipped back.

    Returns:
        FastqRecord with an empty comment.
    """
    read_id = record.read_name if mate_number is None else f"{record.read_name}{MATE_SEPARATOR}{mate_number}"
    sequence, quality = normalizer.normalize(record)
    return FastqRecord(read_id=read_id, sequence=sequence, quality=quality)


def _counted(records: Iterator[AlignmentRecord], result: ConversionResult) -> Iterator[AlignmentRecord]:
    for record in records:
        result.records_read += 1
        yield record


def _write(
    record: AlignmentRecord,
    mate_number: MateNumber | None,
    writer: FastqWriter,
    normalizer: StrandNormalizer,
    result: ConversionResult,
) -> None:
    if normalizer.should_reverse(record):
        result.reversed_records += 1
    writer.write(build_fastq_record(record, mate_number, normalizer))
    result.records_written += 1


def convert_unpaired(
    reader: AlignmentReader, writer: FastqWriter, normalizer: StrandNormalizer, result: ConversionResult
) -> None:
    """Write every record as one unsuffixed FASTQ entry."""
    for record in _counted(reader, result):
        _write(record, None, writer, normalizer, result)


def convert_paired(
    reader: AlignmentReader,
    writer1: FastqWriter,
    writer2: FastqWriter,
    normalizer: StrandNormalizer,
    result: ConversionResult,
) -> None:
    """Match mates and write each pair to the two writers in lockstep.

    Raises:
        PairingError: Two records with the same name are not a valid pair.
        UnpairedMatesError: Records are left without a mate at end of input.
    """
    matcher = MateMatcher()
    try:
        for mate1, mate2 in matcher.pairs(_counted(reader, result)):
            _write(mate1, 1, writer1, normalizer, result)
            _write(mate2, 2, writer2, normalizer, result)
            result.pairs_written += 1
    finally:
        result.max_pending = matcher.max_pending


def _remove_partial_output(paths: list[Path]) -> None:
    for path in paths:
        if path.exists():
            logger.warning(f"Removing partial output {path}")
            path.unlink()


def run_sam_to_fastq(config: SamToFastqConfig) -> ConversionResult:
    """Convert the configured alignment file to one or two FASTQ files.

    Args:
        config: Validated SamToFastqConfig.

    Returns:
        ConversionResult with record counts and output paths.

    Raises:
        ResourceError: Input unreadable or an output not writable. Raised
            before any output file is created.
        PairingError: Invalid mate combination in paired mode.
        UnpairedMatesError: Unmatched records at end of input in paired mode.
    """
    outputs = [config.fastq] if config.mode == "single" else [config.fastq, config.second_end_fastq]

    assert_file_is_readable(config.input_file)
    for path in outputs:
        assert_file_is_writable(path)

    normalizer = StrandNormalizer(re_reverse=config.re_reverse)
    result = ConversionResult(fastq1=config.fastq, fastq2=config.second_end_fastq)

    logger.info(f"Converting {config.input_file} to {config.mode}-end FASTQ")
    logger.debug(f"Re-reverse negative strand reads: {config.re_reverse}")

    # Only files this run opened (and so truncated) are removed on failure
    writers: list[FastqWriter] = []
    try:
        with ExitStack() as stack:
            reader = stack.enter_context(AlignmentReader(config.input_file))
            for path in outputs:
                writers.append(stack.enter_context(FastqWriter(path)))
            if config.mode == "single":
                convert_unpaired(reader, writers[0], normalizer, result)
            else:
                convert_paired(reader, writers[0], writers[1], normalizer, result)
    except (SamToFastqError, OSError, ValueError):
        if not config.keep_partial:
            _remove_partial_output([writer.path for writer in writers])
        raise

    logger.info(
        f"Read {result.records_read} records, wrote {result.records_written} FASTQ entries "
        f"({result.reversed_records} re-reversed)"
    )
    if config.mode == "paired":
        logger.info(f"Wrote {result.pairs_written} pairs, peak pending mates: {result.max_pending}")
    return result
