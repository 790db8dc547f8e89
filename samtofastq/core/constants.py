#!/usr/bin/env python3
"""Constants and type aliases used throughout the samtofastq package."""

from typing import Literal, TypeAlias

import pysam

# =============================================================================
# Type Aliases
# =============================================================================
MateNumber: TypeAlias = Literal[1, 2]
AlignedRead: TypeAlias = pysam.AlignedSegment

# =============================================================================
# Sequence Constants
# =============================================================================
COMPLEMENT_TABLE = str.maketrans("ACGTacgt", "TGCAtgca")
"""Watson-Crick complement for A/C/G/T in both cases. Other symbols map to themselves."""

MISSING_QUALITY_CHAR = "!"
"""Phred+33 character for quality 0, used when a record stores no qualities."""

PHRED_OFFSET = 33
"""ASCII offset of Sanger / Illumina 1.8+ quality strings."""

# =============================================================================
# Defaults
# =============================================================================
DEFAULT_RE_REVERSE = True
"""Re-reverse reads aligned to the negative strand unless told otherwise."""

MATE_SEPARATOR = "/"
"""Separator between read name and mate number in paired output identifiers."""

# =============================================================================
# File Suffixes
# =============================================================================
FASTQ_SUFFIX = ".fastq.gz"
"""Suffix for FASTQ files derived from the input name."""

GZIP_SUFFIXES = (".gz", ".gzip")
"""Output paths ending in one of these are written gzip-compressed."""

READ_MODES = {".bam": "rb", ".cram": "rc"}
"""pysam open mode by input suffix. Anything else is opened as SAM text."""
