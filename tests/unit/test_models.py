"""Unit tests for samtofastq.models.models module."""

import pytest
from pydantic import ValidationError

from samtofastq.models.models import SamToFastqConfig


class TestSamToFastqConfig:
    """Tests for SamToFastqConfig validation and derived fields."""

    def test_single_mode(self, temp_output_dir):
        config = SamToFastqConfig(input_file=temp_output_dir / "in.bam", fastq=temp_output_dir / "out.fastq")
        assert config.mode == "single"
        assert config.second_end_fastq is None
        assert config.re_reverse is True
        assert config.keep_partial is False

    def test_paired_mode(self, temp_output_dir):
        config = SamToFastqConfig(
            input_file=temp_output_dir / "in.bam",
            fastq=temp_output_dir / "r1.fastq",
            second_end_fastq=temp_output_dir / "r2.fastq",
        )
        assert config.mode == "paired"

    def test_paths_derived_from_output_dir(self, temp_output_dir):
        outdir = temp_output_dir / "fastq"
        config = SamToFastqConfig(input_file=temp_output_dir / "sample.sorted.bam", output_dir=outdir, paired=True)

        assert outdir.is_dir()
        assert config.mode == "paired"
        assert config.fastq == outdir / "sample_R1.fastq.gz"
        assert config.second_end_fastq == outdir / "sample_R2.fastq.gz"

    def test_single_path_derived_from_output_dir(self, temp_output_dir):
        config = SamToFastqConfig(input_file=temp_output_dir / "sample.sam", output_dir=temp_output_dir)
        assert config.mode == "single"
        assert config.fastq == temp_output_dir / "sample.fastq.gz"

    def test_no_output_given(self, temp_output_dir):
        with pytest.raises(ValidationError, match="output FASTQ file or an output directory"):
            SamToFastqConfig(input_file=temp_output_dir / "in.bam")

    def test_second_end_without_first(self, temp_output_dir):
        with pytest.raises(ValidationError, match="requires the first-end"):
            SamToFastqConfig(
                input_file=temp_output_dir / "in.bam",
                second_end_fastq=temp_output_dir / "r2.fastq",
                output_dir=temp_output_dir,
            )

    def test_paired_without_second_end(self, temp_output_dir):
        with pytest.raises(ValidationError, match="no second-end FASTQ"):
            SamToFastqConfig(input_file=temp_output_dir / "in.bam", fastq=temp_output_dir / "r1.fastq", paired=True)

    def test_same_mate_outputs(self, temp_output_dir):
        with pytest.raises(ValidationError, match="must be different"):
            SamToFastqConfig(
                input_file=temp_output_dir / "in.bam",
                fastq=temp_output_dir / "out.fastq",
                second_end_fastq=temp_output_dir / "out.fastq",
            )

    def test_output_overwrites_input(self, temp_output_dir):
        with pytest.raises(ValidationError, match="differ from the input"):
            SamToFastqConfig(input_file=temp_output_dir / "in.sam", fastq=temp_output_dir / "in.sam")
