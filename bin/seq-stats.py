#!/usr/bin/env python

"""
Read FASTQ (plain or gzip compressed, from a file or stdin), and write a JSON
summary of the distributions of read lengths and GC percentages. Reads can
also be passed through, unchanged, to an output file or stdout.
"""

import argparse
import sys

from seqstats import __version__
from seqstats.errors import SeqStatsError
from seqstats.readstats import (
    addStatsCommandLineOptions,
    parseStatsCommandLineOptions,
    runStats,
)


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description=(
            "Calculate the GC content and length distributions of the "
            "sequences in a FASTQ file."
        ),
    )

    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )

    addStatsCommandLineOptions(parser)
    args = parser.parse_args()

    try:
        options = parseStatsCommandLineOptions(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        runStats(options)
    except (SeqStatsError, OSError) as e:
        print("seq-stats: error: %s" % e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
