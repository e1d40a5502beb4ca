class SeqStatsError(Exception):
    """Base class for errors that abort a read statistics run."""


class MalformedRecordError(SeqStatsError):
    """
    A FASTQ record could not be parsed.

    @param reason: A C{str} description of what was wrong with the record.
    @param lineNumber: The C{int} 1-based number of the input line at which
        the problem was detected.
    @param source: The C{str} name of the input the record was read from.
    """

    def __init__(self, reason: str, lineNumber: int, source: str = "<unknown>"):
        self.reason = reason
        self.lineNumber = lineNumber
        self.source = source
        super().__init__(reason, lineNumber, source)

    def __str__(self) -> str:
        return "Malformed FASTQ record in %s at line %d: %s." % (
            self.source,
            self.lineNumber,
            self.reason,
        )


class ZeroLengthReadError(SeqStatsError):
    """A read with an empty sequence was passed for GC content calculation."""
