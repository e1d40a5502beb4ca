from typing import BinaryIO, Iterator, Optional

from seqstats import File
from seqstats.errors import MalformedRecordError
from seqstats.reads import ENCODING, Read
from seqstats.utils import STDIN_SENTINEL, handleName, openMaybeGzipped

HEADER_MARKER = "@"
SEPARATOR_MARKER = "+"


class FastqReader:
    """
    Read FASTQ records, four lines at a time, from a binary stream.

    A record is a header line (starting with '@'), a sequence line, a
    separator line (starting with '+', anything after it is ignored), and a
    quality line of the same length as the sequence.

    @param source: An object with a C{readline} method returning C{bytes}
        (e.g., a L{seqstats.utils.ByteSource} or a file opened in binary mode).
    @param name: The C{str} name of the input, for use in error messages. If
        C{None}, the name of C{source} is used.
    """

    def __init__(self, source, name: Optional[str] = None) -> None:
        self._source = source
        self.name = handleName(source) if name is None else name
        self.lineNumber = 0
        self._finished = False

    def __iter__(self) -> Iterator[Read]:
        while True:
            read = self.readNext()
            if read is None:
                return
            yield read

    def _readLine(self) -> Optional[str]:
        """
        Read a line and remove its terminator ('\\n' or '\\r\\n').

        @return: The C{str} line, or C{None} if the input is exhausted.
        """
        line = self._source.readline()
        if not line:
            return None

        self.lineNumber += 1

        if line.endswith(b"\n"):
            line = line[:-1]
            if line.endswith(b"\r"):
                line = line[:-1]

        return line.decode(ENCODING)

    def _error(self, reason: str) -> MalformedRecordError:
        return MalformedRecordError(reason, self.lineNumber, self.name)

    def _finish(self) -> None:
        self._finished = True

    def _skipTrailingBlankLines(self) -> None:
        """
        Consume the rest of the input, which must contain only blank lines.

        @raise MalformedRecordError: If a non-blank line is found.
        """
        while (line := self._readLine()) is not None:
            if line.strip():
                raise self._error("content after blank line")

    def readNext(self) -> Optional[Read]:
        """
        Read the next record.

        @raise MalformedRecordError: If the input ends part way through a
            record, a header or separator line lacks its marker, or the quality
            and sequence lengths differ.
        @return: A L{Read} instance, or C{None} when the input has ended. An
            empty sequence line, or blank lines where a header is expected,
            also end the input.
        """
        if self._finished:
            return None

        header = self._readLine()

        if header is None:
            self._finish()
            return None

        if not header.strip():
            self._finish()
            self._skipTrailingBlankLines()
            return None

        if not header.startswith(HEADER_MARKER):
            raise self._error("missing header marker %r" % HEADER_MARKER)

        sequence = self._readLine()

        if sequence is None:
            raise self._error("incomplete record")

        if not sequence:
            # Some producers add trailing blank lines. Treat an empty sequence
            # as the end of the input.
            self._finish()
            return None

        separator = self._readLine()

        if separator is None:
            raise self._error("incomplete record")

        if not separator.startswith(SEPARATOR_MARKER):
            raise self._error("missing separator marker %r" % SEPARATOR_MARKER)

        quality = self._readLine()

        if quality is None:
            raise self._error("incomplete record")

        if len(quality) != len(sequence):
            raise self._error("length mismatch")

        return Read(header[1:], sequence, quality)


class FastqReads:
    """
    Iterate over the reads in a plain or gzip-compressed FASTQ input.

    @param fileNameOrHandle: Either C{STDIN_SENTINEL} for standard input,
        a C{str} or C{Path} file name, or an open binary file handle.
    """

    def __init__(self, fileNameOrHandle: File = STDIN_SENTINEL) -> None:
        self.fileNameOrHandle = fileNameOrHandle

    def __iter__(self) -> Iterator[Read]:
        with openMaybeGzipped(self.fileNameOrHandle) as source:
            yield from FastqReader(source, source.name)


class FastqWriter:
    """
    Write reads to a binary output in FASTQ format, reproducing the bytes
    they were read from (apart from any text after the '+' separator).

    @param fp: An open binary file-like object.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self.fp = fp

    def write(self, read: Read) -> None:
        """
        Write a read.

        @param read: A L{Read} instance.
        @raise OSError: If the write fails.
        """
        self.fp.write(read.toString("fastq").encode(ENCODING))
