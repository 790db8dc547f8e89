#!/usr/bin/env python3
"""Read alignment records from SAM, BAM and CRAM files with pysam."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pysam

from samtofastq.core.constants import MISSING_QUALITY_CHAR, PHRED_OFFSET, READ_MODES, AlignedRead


@dataclass(frozen=True)
class AlignmentRecord:
    """The parts of an alignment needed to write it back out as FASTQ."""

    read_name: str
    sequence: str
    quality: str
    is_unmapped: bool = False
    is_reverse: bool = False
    is_read1: bool = False
    is_read2: bool = False

    @classmethod
    def from_segment(cls, segment: AlignedRead) -> AlignmentRecord:
        """Copy name, bases, qualities and flags out of a pysam segment.

        A missing sequence becomes an empty string. Missing qualities become
        Phred 0 so the quality string always matches the sequence length.
        """
        sequence = segment.query_sequence or ""
        qualities = segment.query_qualities
        if qualities is None:
            quality = MISSING_QUALITY_CHAR * len(sequence)
        else:
            quality = "".join(chr(q + PHRED_OFFSET) for q in qualities)
        return cls(
            read_name=segment.query_name,
            sequence=sequence,
            quality=quality,
            is_unmapped=segment.is_unmapped,
            is_reverse=segment.is_reverse,
            is_read1=segment.is_read1,
            is_read2=segment.is_read2,
        )


def get_read_mode(path: Path | str) -> str:
    """Return the pysam open mode for an alignment file, based on its suffix."""
    return READ_MODES.get(Path(path).suffix.lower(), "r")


class AlignmentReader:
    """Single-pass iterator over the records of a SAM, BAM or CRAM file.

    Use as a context manager so the underlying file is closed on every exit
    path::

        with AlignmentReader(path) as reader:
            for record in reader:
                ...
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._file: pysam.AlignmentFile | None = None
        self._segments: Iterator[AlignedRead] | None = None

    def open(self) -> AlignmentReader:
        # check_sq=False so unaligned files without @SQ lines are accepted
        self._file = pysam.AlignmentFile(str(self.path), get_read_mode(self.path), check_sq=False)
        self._segments = iter(self._file)
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._segments = None

    def __enter__(self) -> AlignmentReader:
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __iter__(self) -> AlignmentReader:
        return self

    def __next__(self) -> AlignmentRecord:
        if self._segments is None:
            raise ValueError(f"Alignment file {self.path} is not open")
        return AlignmentRecord.from_segment(next(self._segments))
