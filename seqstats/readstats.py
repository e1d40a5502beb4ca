import sys
from collections import namedtuple
from contextlib import ExitStack
from json import dump
from typing import Optional, TextIO

from seqstats import File
from seqstats.fastq import FastqReads, FastqWriter
from seqstats.progress import maybeProgressBar
from seqstats.stats import ReadStats, RunSummary
from seqstats.utils import STDIN_NAME, STDIN_SENTINEL, STDOUT_SENTINEL

StatsOptions = namedtuple(
    "StatsOptions",
    ("inputSeq", "outputSeq", "outStats", "seqsToStdout", "text", "progress", "quiet"),
)


def inputName(fileNameOrHandle: File) -> str:
    """
    Get a printable name for an input.

    @param fileNameOrHandle: Either C{STDIN_SENTINEL}, a C{str} or C{Path}
        file name, or an open file handle.
    @return: A C{str} name.
    """
    if isinstance(fileNameOrHandle, str) and fileNameOrHandle == STDIN_SENTINEL:
        return STDIN_NAME
    return str(getattr(fileNameOrHandle, "name", fileNameOrHandle))


def calculateReadStats(
    inputFile: File = STDIN_SENTINEL,
    writer: Optional[FastqWriter] = None,
    progress: bool = False,
) -> RunSummary:
    """
    Read FASTQ (plain or gzip compressed) and compute the read length and GC
    percentage distributions.

    @param inputFile: Either C{STDIN_SENTINEL}, a C{str} or C{Path} file name,
        or an open binary file handle.
    @param writer: If not C{None}, a L{seqstats.fastq.FastqWriter} that each
        read is passed to, in input order, after it has been counted.
    @param progress: If C{True}, show a progress bar on standard error.
    @raise MalformedRecordError: If the input contains a bad record. No
        summary is returned in this case.
    @raise OSError: If the input cannot be opened or read, or the writer
        fails.
    @return: A L{seqstats.stats.RunSummary}.
    """
    stats = ReadStats()

    with maybeProgressBar(progress, "Reads: ") as bar:
        for read in FastqReads(inputFile):
            stats.observe(read)
            if writer is not None:
                writer.write(read)
            bar.update(stats.totalRecords)

    return stats.summary()


def writeSummary(summary: RunSummary, fp: TextIO) -> None:
    """
    Write a summary as pretty-printed JSON.

    @param summary: A L{seqstats.stats.RunSummary}.
    @param fp: An open text file.
    """
    dump(summary.toDict(), fp, indent=2)
    fp.write("\n")


def formatSummary(summary: RunSummary) -> str:
    """
    Make a human-readable text version of a summary.

    @param summary: A L{seqstats.stats.RunSummary}.
    @return: A C{str} with one distribution bucket per line, in increasing
        order.
    """
    result = ["Total records: %d" % summary.totalRecords, "Length distribution:"]

    for length in sorted(summary.lengthDistribution):
        result.append("  %d\t%d" % (length, summary.lengthDistribution[length]))

    result.append("GC distribution (%):")

    for percent in sorted(summary.gcDistribution):
        result.append("  %d\t%d" % (percent, summary.gcDistribution[percent]))

    return "\n".join(result) + "\n"


def addStatsCommandLineOptions(parser):
    """
    Add the read statistics command-line options to an argparse parser.

    @param parser: An C{argparse.ArgumentParser} instance.
    """
    parser.add_argument(
        "inputSeq",
        nargs="?",
        default=STDIN_SENTINEL,
        metavar="INPUT",
        help=(
            "The FASTQ input file, which may be gzip compressed. Standard "
            "input will be read if no file name (or %r) is given." % STDIN_SENTINEL
        ),
    )

    parser.add_argument(
        "outputSeq",
        nargs="?",
        default=STDOUT_SENTINEL,
        metavar="OUTPUT",
        help=(
            "The file to write reads to if --seqsToStdout is used. Standard "
            "output will be written if no file name (or %r) is given."
            % STDOUT_SENTINEL
        ),
    )

    parser.add_argument(
        "--outStats",
        metavar="FILENAME",
        help=(
            "The file to write the JSON statistics summary to. Use %r for "
            "standard output." % STDOUT_SENTINEL
        ),
    )

    parser.add_argument(
        "--seqsToStdout",
        action="store_true",
        help=(
            "Write the input reads, unchanged, to OUTPUT (standard output by "
            "default) as they are processed."
        ),
    )

    parser.add_argument(
        "--text",
        action="store_true",
        help=(
            "Print a text summary. This goes to standard error if reads are "
            "being written to standard output, else to standard output."
        ),
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar (if standard error is a terminal).",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the starting and finishing messages.",
    )


def parseStatsCommandLineOptions(args) -> StatsOptions:
    """
    Examine parsed command-line options and return the run options.

    @param args: An argparse namespace, as returned by the argparse
        C{parse_args} function.
    @raise ValueError: If no summary output (--outStats or --text) is asked for,
        or if the JSON summary and the reads would both go to standard output.
    @return: A C{StatsOptions} instance.
    """
    if args.outStats is None and not args.text:
        raise ValueError("At least one of --outStats or --text must be given.")

    if (
        args.outStats == STDOUT_SENTINEL
        and args.seqsToStdout
        and args.outputSeq == STDOUT_SENTINEL
    ):
        raise ValueError(
            "The JSON summary cannot be written to standard output when "
            "--seqsToStdout writes reads there. Give --outStats a file name "
            "or give an OUTPUT file for the reads."
        )

    return StatsOptions(
        inputSeq=args.inputSeq,
        outputSeq=args.outputSeq,
        outStats=args.outStats,
        seqsToStdout=args.seqsToStdout,
        text=args.text,
        progress=args.progress,
        quiet=args.quiet,
    )


def runStats(
    options: StatsOptions,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> RunSummary:
    """
    Compute read statistics and write the requested outputs.

    The summary outputs are only written once all the input has been read
    successfully.

    @param options: A C{StatsOptions} instance.
    @param stdout: The text file to use as standard output. Reads written to
        standard output go to its C{buffer} attribute. If C{None},
        C{sys.stdout} is used.
    @param stderr: The text file to use for messages. If C{None},
        C{sys.stderr} is used.
    @raise MalformedRecordError: If the input contains a bad record.
    @raise OSError: If an input or output file cannot be used.
    @return: The L{seqstats.stats.RunSummary}.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    readsToStdout = options.seqsToStdout and options.outputSeq == STDOUT_SENTINEL

    if not options.quiet:
        print(
            "Calculating read stats for file: %s" % inputName(options.inputSeq),
            file=stderr,
        )

    with ExitStack() as stack:
        if options.seqsToStdout:
            if readsToStdout:
                seqFp = stdout.buffer
            else:
                seqFp = stack.enter_context(open(options.outputSeq, "wb"))
            writer = FastqWriter(seqFp)
        else:
            writer = None

        summary = calculateReadStats(options.inputSeq, writer, options.progress)

        if writer is not None:
            writer.fp.flush()

    if options.outStats is not None:
        if options.outStats == STDOUT_SENTINEL:
            writeSummary(summary, stdout)
        else:
            with open(options.outStats, "w") as fp:
                writeSummary(summary, fp)

    if options.text:
        print(formatSummary(summary), end="", file=stderr if readsToStdout else stdout)

    stdout.flush()

    if not options.quiet:
        print("Processed %d records." % summary.totalRecords, file=stderr)

    return summary
