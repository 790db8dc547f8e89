"""Unit tests for samtofastq.core.utils module."""

from samtofastq.core.utils import check_output_directory, derive_fastq_paths, get_sample_name


class TestCheckOutputDirectory:
    """Tests for check_output_directory function."""

    def test_existing_directory(self, temp_output_dir):
        assert check_output_directory(str(temp_output_dir)) == str(temp_output_dir)

    def test_create_new_directory(self, temp_output_dir):
        new_dir = temp_output_dir / "new_subdir"
        assert not new_dir.exists()

        assert check_output_directory(str(new_dir)) == str(new_dir)
        assert new_dir.is_dir()


class TestGetSampleName:
    """Tests for get_sample_name function."""

    def test_sorted_bam(self):
        assert get_sample_name("/path/to/sample.sorted.bam") == "sample"

    def test_plain_bam(self):
        assert get_sample_name("/path/to/sample.bam") == "sample"

    def test_sam_and_cram(self):
        assert get_sample_name("sample.sam") == "sample"
        assert get_sample_name("sample.cram") == "sample"


def test_derive_fastq_paths(temp_output_dir):
    fastq1, fastq2 = derive_fastq_paths("/data/s1.bam", str(temp_output_dir), paired=True)
    assert fastq1 == temp_output_dir / "s1_R1.fastq.gz"
    assert fastq2 == temp_output_dir / "s1_R2.fastq.gz"

    fastq, none = derive_fastq_paths("/data/s1.bam", str(temp_output_dir), paired=False)
    assert fastq == temp_output_dir / "s1.fastq.gz"
    assert none is None
