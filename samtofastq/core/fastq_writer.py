#!/usr/bin/env python3
"""Write FASTQ entries to plain or gzip-compressed files."""

from __future__ import annotations

import gzip
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from samtofastq.core.constants import GZIP_SUFFIXES


@dataclass(frozen=True)
class FastqRecord:
    """One FASTQ entry, ready to be written."""

    read_id: str
    sequence: str
    quality: str
    comment: str = ""

    def to_fastq(self) -> str:
        """Render the four FASTQ lines, including the trailing newline."""
        return f"@{self.read_id}\n{self.sequence}\n+{self.comment}\n{self.quality}\n"


def open_fastq_for_writing(path: Path) -> TextIO:
    """Open ``path`` for text writing, gzip-compressed when the suffix asks for it."""
    if path.suffix.lower() in GZIP_SUFFIXES:
        return gzip.open(path, "wt")
    return path.open("w")


class FastqWriter:
    """Append FastqRecords to a file in call order."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._handle: TextIO | None = None

    def open(self) -> FastqWriter:
        self._handle = open_fastq_for_writing(self.path)
        return self

    def write(self, record: FastqRecord) -> None:
        if self._handle is None:
            raise ValueError(f"FASTQ file {self.path} is not open for writing")
        self._handle.write(record.to_fastq())

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> FastqWriter:
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
