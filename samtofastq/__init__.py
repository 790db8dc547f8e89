"""Convert aligned SAM/BAM reads back to FASTQ."""

from samtofastq.version import __version__

__all__ = ["__version__"]
