#!/usr/bin/env python3
"""Restore sequencer orientation for reads aligned to the reverse strand."""

from samtofastq.core.constants import COMPLEMENT_TABLE, DEFAULT_RE_REVERSE
from samtofastq.core.read_alignment_records import AlignmentRecord


def reverse_complement(sequence: str) -> str:
    """Reverse a nucleotide sequence and complement each base.

    A/T and C/G are swapped in either case; any other symbol (N, IUPAC
    ambiguity codes, gaps) is kept as is.

    Example: reverse_complement("AACGN") -> "NCGTT"
    """
    return sequence.translate(COMPLEMENT_TABLE)[::-1]


def reverse_quality(quality: str) -> str:
    """Reverse a quality string position by position without changing any value."""
    return quality[::-1]


class StrandNormalizer:
    """Decide per record whether bases and qualities must be flipped back.

    Args:
        re_reverse: When False, records are always passed through unchanged.
    """

    def __init__(self, re_reverse: bool = DEFAULT_RE_REVERSE) -> None:
        self.re_reverse = re_reverse

    def should_reverse(self, record: AlignmentRecord) -> bool:
        return not record.is_unmapped and self.re_reverse and record.is_reverse

    def normalize(self, record: AlignmentRecord) -> tuple[str, str]:
        """Return the (sequence, quality) to write for ``record``."""
        if self.should_reverse(record):
            return reverse_complement(record.sequence), reverse_quality(record.quality)
        return record.sequence, record.quality
