"""Shared pytest fixtures for samtofastq tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from samtofastq.core.read_alignment_records import AlignmentRecord

SAM_HEADER = "@HD\tVN:1.6\tSO:unsorted\n@SQ\tSN:chr1\tLN:1000\n"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for test outputs."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def make_record():
    """Factory for AlignmentRecord values with sensible defaults."""

    def _make(
        name="r1",
        sequence="ACGT",
        quality="ABCD",
        unmapped=False,
        reverse=False,
        read1=False,
        read2=False,
    ):
        return AlignmentRecord(
            read_name=name,
            sequence=sequence,
            quality=quality,
            is_unmapped=unmapped,
            is_reverse=reverse,
            is_read1=read1,
            is_read2=read2,
        )

    return _make


@pytest.fixture
def write_sam(temp_output_dir):
    """Write SAM body lines (tab-separated fields) below a one-contig header."""

    def _write(lines, name="input.sam"):
        path = temp_output_dir / name
        body = "".join("\t".join(str(field) for field in fields) + "\n" for fields in lines)
        path.write_text(SAM_HEADER + body)
        return path

    return _write


@pytest.fixture
def paired_sam_lines():
    """Three read pairs in coordinate order, so mates are not adjacent.

    At most two read names are waiting for their mate at any point.

    - pairA: R1 forward, R2 reverse
    - pairB: R1 reverse, R2 forward
    - pairC: both unmapped, R2 arrives first
    """
    return [
        ("pairA", 99, "chr1", 100, 60, "4M", "=", 300, 204, "AACG", "ABCD"),
        ("pairB", 83, "chr1", 150, 60, "4M", "=", 120, -34, "GGTA", "EFGH"),
        ("pairB", 163, "chr1", 120, 60, "4M", "=", 150, 34, "CCCA", "IJKL"),
        ("pairC", 141, "*", 0, 0, "*", "*", 0, 0, "TTGC", "MNOP"),
        ("pairA", 147, "chr1", 300, 60, "4M", "=", 100, -204, "GATT", "QRST"),
        ("pairC", 77, "*", 0, 0, "*", "*", 0, 0, "ACCA", "UVWX"),
    ]


@pytest.fixture
def single_sam_lines():
    """Single-end reads: forward, reverse and unmapped."""
    return [
        ("fwd", 0, "chr1", 10, 60, "4M", "*", 0, 0, "AACG", "ABCD"),
        ("rev", 16, "chr1", 20, 60, "5M", "*", 0, 0, "AACGN", "ABCDE"),
        ("unm", 4, "*", 0, 0, "*", "*", 0, 0, "GGGT", "FGHI"),
    ]


@pytest.fixture
def read_fastq_file():
    """Return the FASTQ entries of a plain-text file as (id, seq, plus, qual) tuples."""

    def _read(path):
        lines = Path(path).read_text().splitlines()
        return [tuple(lines[i : i + 4]) for i in range(0, len(lines), 4)]

    return _read
