# Input bytes are decoded with this encoding. Every byte maps to exactly one
# character, so encoding a read again gives back the original bytes.
ENCODING = "latin-1"

GC_BASES = "GCgc"


class Read:
    """
    Hold information about a single FASTQ read.

    @param id: A C{str} with the full text of the read's header line
        (without the leading '@'). This is the read identifier followed by
        any description, exactly as it appeared in the input.
    @param sequence: A C{str} of nucleotides, in any case.
    @param quality: A C{str} of quality characters. It must be the same
        length as C{sequence}.
    @raise ValueError: if the length of the quality string does not match the
        length of the sequence.
    """

    def __init__(self, id: str, sequence: str, quality: str) -> None:
        if len(quality) != len(sequence):
            raise ValueError(
                "Invalid read: sequence length (%d) != quality length (%d)"
                % (len(sequence), len(quality))
            )

        self.id = id
        self.sequence = sequence
        self.quality = quality

    def __eq__(self, other):
        return (
            self.id == other.id
            and self.sequence == other.sequence
            and self.quality == other.quality
        )

    def __len__(self):
        return len(self.sequence)

    def __hash__(self):
        return hash((self.id, self.sequence, self.quality))

    def __repr__(self):
        return "%s(%r, %r, %r)" % (
            self.__class__.__name__,
            self.id,
            self.sequence,
            self.quality,
        )

    def gcCount(self) -> int:
        """
        Count the G and C bases (of either case) in the sequence. Ambiguous
        bases such as N are not counted.

        @return: The C{int} number of G and C bases.
        """
        return sum(self.sequence.count(base) for base in GC_BASES)

    def toString(self, format_: str = "fastq") -> str:
        """
        Convert the read to a string format.

        @param format_: Must be 'fastq'.
        @raise ValueError: if an unknown format is requested.
        @return: A C{str} representing the read in the requested format. The
            separator line holds just a '+', the id is not repeated.
        """
        if format_ == "fastq":
            return "@%s\n%s\n+\n%s\n" % (self.id, self.sequence, self.quality)
        else:
            raise ValueError("Format must be 'fastq'.")

