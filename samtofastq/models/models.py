from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from samtofastq.core.constants import DEFAULT_RE_REVERSE
from samtofastq.core.utils import check_output_directory, derive_fastq_paths


@dataclass
class ConversionResult:
    """Counts and output paths of a finished conversion."""

    fastq1: Path
    fastq2: Path | None = None
    records_read: int = 0
    records_written: int = 0
    pairs_written: int = 0
    reversed_records: int = 0
    max_pending: int = 0


class SamToFastqConfig(BaseModel):
    """Configuration for converting one alignment file to FASTQ.

    Output paths are either given explicitly (``fastq`` and optionally
    ``second_end_fastq``) or derived from the input name inside
    ``output_dir``. Setting ``second_end_fastq`` (or ``paired`` together with
    ``output_dir``) selects paired mode.
    """

    input_file: Path
    fastq: Path | None = None
    second_end_fastq: Path | None = None
    output_dir: Path | None = None
    paired: bool = False
    re_reverse: bool = DEFAULT_RE_REVERSE
    keep_partial: bool = False

    # Derived fields
    mode: Literal["single", "paired"] = "single"

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_and_configure(self) -> SamToFastqConfig:
        if self.fastq is None:
            if self.output_dir is None:
                raise ValueError("Either an output FASTQ file or an output directory must be given.")
            if self.second_end_fastq is not None:
                raise ValueError("A second-end FASTQ file requires the first-end FASTQ file to be given as well.")
            self.output_dir = Path(check_output_directory(str(self.output_dir)))
            self.fastq, self.second_end_fastq = derive_fastq_paths(
                str(self.input_file), str(self.output_dir), self.paired
            )

        if self.second_end_fastq is not None:
            self.mode = "paired"
        elif self.paired:
            raise ValueError("Paired output requested but no second-end FASTQ file was given.")
        else:
            self.mode = "single"

        outputs = [self.fastq] if self.second_end_fastq is None else [self.fastq, self.second_end_fastq]
        if self.input_file.resolve() in {p.resolve() for p in outputs}:
            raise ValueError(f"Output FASTQ file must differ from the input file: {self.input_file}")
        if self.mode == "paired" and self.fastq.resolve() == self.second_end_fastq.resolve():
            raise ValueError("First-end and second-end FASTQ files must be different.")

        return self
