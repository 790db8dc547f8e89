#!/usr/bin/env python3
"""Exceptions raised while converting alignments to FASTQ."""


class SamToFastqError(Exception):
    """Base class for all fatal conversion errors."""


class ResourceError(SamToFastqError):
    """Input file cannot be read or an output file cannot be written."""


class PairingError(SamToFastqError):
    """Two records share a read name but are not a first/second-of-pair combination."""

    def __init__(self, read_name: str) -> None:
        self.read_name = read_name
        super().__init__(f"Illegal mate state for read {read_name}: expected one first-of-pair and one second-of-pair")


class UnpairedMatesError(SamToFastqError):
    """Records are still waiting for their mate when the input is exhausted."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Found {count} unpaired mates")
