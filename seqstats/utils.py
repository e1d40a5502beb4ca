import gzip
import io
import sys
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from seqstats import File

# The file names that mean "read standard input" and "write standard output".
STDIN_SENTINEL = "-"
STDOUT_SENTINEL = "-"
STDIN_NAME = "<stdin>"

GZIP_MAGIC = b"\x1f\x8b"


class ByteSource:
    """
    A readable binary input stream, either plain or gzip-decompressed.

    Instances are made by L{openMaybeGzipped}, which decides (once) which of
    the two kinds of stream is needed.

    @param name: A C{str} name for the input, for use in messages.
    @param fp: An open binary file-like object with a C{readline} method.
    @param compressed: If C{True}, C{fp} decompresses gzip data.
    """

    def __init__(self, name: str, fp: BinaryIO, compressed: bool) -> None:
        self.name = name
        self.compressed = compressed
        self._fp = fp

    def __repr__(self) -> str:
        return "<%s %r %s>" % (
            self.__class__.__name__,
            self.name,
            "gzip" if self.compressed else "plain",
        )

    def readline(self) -> bytes:
        """
        Read one line, including its terminator.

        @raise gzip.BadGzipFile: If compressed input is corrupt or truncated.
            The message names the input.
        @return: The C{bytes} of the line, or C{b""} at the end of the input.
        """
        try:
            return self._fp.readline()
        except (zlib.error, EOFError, gzip.BadGzipFile) as e:
            if self.compressed:
                raise gzip.BadGzipFile(
                    "Could not decompress %s: %s" % (self.name, e)
                ) from e
            raise


def handleName(fp) -> str:
    """
    Get a printable name for an open file handle.

    @param fp: A file-like object.
    @return: A C{str} name.
    """
    name = getattr(fp, "name", None)
    return name if isinstance(name, str) else "<stream>"


@contextmanager
def openMaybeGzipped(fileNameOrHandle: File = STDIN_SENTINEL) -> Iterator[ByteSource]:
    """
    Open an input that may or may not be gzip compressed. Whether it is
    compressed is decided by looking at its first two bytes (without
    consuming them), not by the file name.

    @param fileNameOrHandle: Either C{STDIN_SENTINEL} (to read standard input),
        a C{str} or C{Path} file name, or an open binary file handle. Handles
        (including standard input) are not closed on exit.
    @raise FileNotFoundError: If a named file does not exist.
    @raise PermissionError: If a named file cannot be read.
    @return: A generator that can be turned into a context manager via
        L{contextlib.contextmanager}. It yields a L{ByteSource}.
    """
    opened = wrapper = None

    if isinstance(fileNameOrHandle, str) and fileNameOrHandle == STDIN_SENTINEL:
        name = STDIN_NAME
        fp = sys.stdin.buffer
    elif isinstance(fileNameOrHandle, (str, Path)):
        name = str(fileNameOrHandle)
        fp = opened = open(name, "rb")
    else:
        name = handleName(fileNameOrHandle)
        fp = fileNameOrHandle

    try:
        # We need to be able to look at the first two bytes without removing
        # them from the stream.
        if not hasattr(fp, "peek"):
            fp = wrapper = io.BufferedReader(fp)

        if fp.peek(2)[:2] == GZIP_MAGIC:
            with gzip.GzipFile(fileobj=fp, mode="rb") as gz:
                yield ByteSource(name, gz, True)
        else:
            yield ByteSource(name, fp, False)
    finally:
        if wrapper is not None:
            # Don't let the wrapper close a handle we were given.
            wrapper.detach()
        if opened is not None:
            opened.close()
