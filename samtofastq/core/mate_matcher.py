#!/usr/bin/env python3
"""
Pair mate records by read name in a single forward pass.

Input does not need to be name-sorted or mate-adjacent. The first record
seen for a read name is held until its mate arrives, so memory grows with
the number of read names whose mate has not been seen yet, i.e. with the
distance between mates in the stream. A coordinate-sorted file with long
inserts or many discordant pairs keeps more records pending than a
name-sorted one.
"""

from collections.abc import Iterable, Iterator

from samtofastq.core.exceptions import PairingError, UnpairedMatesError
from samtofastq.core.logging_config import get_logger
from samtofastq.core.read_alignment_records import AlignmentRecord

logger = get_logger(__name__)

MatePair = tuple[AlignmentRecord, AlignmentRecord]


def assert_paired_mates(record1: AlignmentRecord, record2: AlignmentRecord) -> None:
    """Raise PairingError unless exactly one record is first-of-pair and the other second-of-pair.

    Records flagged both first- and second-of-pair (middle segments of longer
    templates) satisfy both orderings and are rejected.
    """
    if (record1.is_read1 and record2.is_read2) == (record2.is_read1 and record1.is_read2):
        raise PairingError(record1.read_name)


class MateMatcher:
    """Match first-of-pair and second-of-pair records sharing a read name."""

    def __init__(self) -> None:
        self._pending: dict[str, AlignmentRecord] = {}
        self.max_pending = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def observe(self, record: AlignmentRecord) -> MatePair | None:
        """Add a record to the matcher.

        Returns:
            None if this is the first record seen for its read name, otherwise
            ``(mate1, mate2)`` ordered by the first/second-of-pair flags, not by
            arrival order.

        Raises:
            PairingError: The two records do not form a valid pair.
        """
        first_record = self._pending.pop(record.read_name, None)
        if first_record is None:
            self._pending[record.read_name] = record
            if len(self._pending) > self.max_pending:
                self.max_pending = len(self._pending)
            return None

        assert_paired_mates(first_record, record)
        if record.is_read1:
            return record, first_record
        return first_record, record

    def finish(self) -> None:
        """Check that every record found its mate.

        Raises:
            UnpairedMatesError: Records are still pending at end of input.
        """
        if self._pending:
            raise UnpairedMatesError(len(self._pending))

    def pairs(self, records: Iterable[AlignmentRecord]) -> Iterator[MatePair]:
        """Yield matched pairs in the arrival order of each pair's second record.

        The pending check runs once ``records`` is exhausted.
        """
        for record in records:
            pair = self.observe(record)
            if pair is not None:
                yield pair
        logger.debug(f"Input exhausted, peak number of pending mates was {self.max_pending}")
        self.finish()
