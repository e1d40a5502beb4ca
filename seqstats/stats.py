from collections import Counter, namedtuple
from types import MappingProxyType
from typing import Mapping

from seqstats.errors import ZeroLengthReadError
from seqstats.reads import Read


def gcPercent(gcCount: int, length: int) -> int:
    """
    Compute a GC percentage, rounded to the nearest integer with ties
    rounding up (so 12.5% gives 13). Integer arithmetic is used so the
    result does not depend on floating point representation.

    @param gcCount: The C{int} number of G and C bases.
    @param length: The C{int} sequence length.
    @raise ZeroLengthReadError: If C{length} is zero.
    @return: An C{int} percentage between 0 and 100.
    """
    if length == 0:
        raise ZeroLengthReadError("Cannot compute the GC percentage of an empty sequence.")

    return (200 * gcCount + length) // (2 * length)


def _sortedByKey(counts: Mapping[int, int]) -> dict[str, int]:
    return {str(key): counts[key] for key in sorted(counts)}


class RunSummary(
    namedtuple("RunSummary", ("totalRecords", "lengthDistribution", "gcDistribution"))
):
    """
    The final, read-only result of a statistics run.

    @param totalRecords: The C{int} number of reads counted.
    @param lengthDistribution: A read-only mapping from C{int} sequence length
        to the C{int} number of reads with that length.
    @param gcDistribution: A read-only mapping from C{int} GC percentage to the
        C{int} number of reads with that percentage.
    """

    __slots__ = ()

    def toDict(self) -> dict:
        """
        Get the summary in the form it is serialized in. Distribution keys are
        decimal strings, in increasing numerical order.

        @return: A C{dict} with 'total_records', 'gc_distrib', and
            'len_distrib' keys.
        """
        return {
            "total_records": self.totalRecords,
            "gc_distrib": _sortedByKey(self.gcDistribution),
            "len_distrib": _sortedByKey(self.lengthDistribution),
        }


class ReadStats:
    """
    Accumulate read length and GC percentage distributions over a stream of
    reads.
    """

    def __init__(self) -> None:
        self.totalRecords = 0
        self.lengthDistribution: Counter[int] = Counter()
        self.gcDistribution: Counter[int] = Counter()

    def observe(self, read: Read) -> None:
        """
        Add a read to the statistics.

        @param read: A L{seqstats.reads.Read} instance.
        @raise ZeroLengthReadError: If the read has no sequence. The
            statistics are not changed.
        """
        length = len(read)
        percent = gcPercent(read.gcCount(), length)
        self.lengthDistribution[length] += 1
        self.gcDistribution[percent] += 1
        self.totalRecords += 1

    def merge(self, other: "ReadStats") -> None:
        """
        Add the counts from another instance (e.g., one that processed a
        different input) to ours.

        @param other: Another L{ReadStats} instance. It is not changed.
        """
        self.totalRecords += other.totalRecords
        self.lengthDistribution.update(other.lengthDistribution)
        self.gcDistribution.update(other.gcDistribution)

    def summary(self) -> RunSummary:
        """
        Finalize the statistics.

        @return: A L{RunSummary} holding copies of the current counts, which
            later calls to C{observe} or C{merge} will not change.
        """
        return RunSummary(
            self.totalRecords,
            MappingProxyType(dict(self.lengthDistribution)),
            MappingProxyType(dict(self.gcDistribution)),
        )
