import os
from contextlib import contextmanager

import progressbar  # type: ignore


@contextmanager
def maybeProgressBar(show, prefix):
    """
    A context manager to maybe show a progress bar for a task of unknown
    size (such as reading a stream of reads).

    The bar has no maximum value because the number of reads in a stream is
    not known until it has all been read (and standard input cannot be read
    twice). It shows a running count and the elapsed time instead of a
    percentage and an ETA.

    @param show: If C{True} and standard error is a terminal, yield a progress
        bar, else a class with an C{update} method that does nothing.
    @param prefix: A C{str} prefix, to appear at the start of the progress bar.
    """
    if show and os.isatty(2):
        widgets = [
            progressbar.Counter(format="%(value)d reads"),
            " ",
            progressbar.AnimatedMarker(),
            " ",
            progressbar.Timer(format="Elapsed: %(elapsed)s"),
        ]
        with progressbar.ProgressBar(
            max_value=progressbar.UnknownLength, widgets=widgets, prefix=prefix
        ) as bar:
            yield bar
    else:

        class Bar:
            update = staticmethod(lambda _: None)

        yield Bar
