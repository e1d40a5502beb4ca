from unittest import TestCase

from seqstats.errors import ZeroLengthReadError
from seqstats.reads import Read
from seqstats.stats import ReadStats, RunSummary, gcPercent


def makeRead(sequence, id="id"):
    return Read(id, sequence, "!" * len(sequence))


class TestGCPercent(TestCase):
    """
    Test the gcPercent function.
    """

    def testAllGC(self):
        """
        A sequence that is all G and C has a GC percentage of 100.
        """
        self.assertEqual(100, gcPercent(4, 4))

    def testNoGC(self):
        """
        A sequence with no G or C has a GC percentage of 0.
        """
        self.assertEqual(0, gcPercent(0, 4))

    def testOneThird(self):
        """
        One GC base in three must round down to 33.
        """
        self.assertEqual(33, gcPercent(1, 3))

    def testTwoThirds(self):
        """
        Two GC bases in three must round up to 67.
        """
        self.assertEqual(67, gcPercent(2, 3))

    def testExactHalf(self):
        """
        One GC base in two is exactly 50.
        """
        self.assertEqual(50, gcPercent(1, 2))

    def testTieRoundsUp(self):
        """
        One GC base in eight (12.5%) must round up to 13.
        """
        self.assertEqual(13, gcPercent(1, 8))

    def testTieRoundsUpFromEven(self):
        """
        Three GC bases in eight (37.5%) must round up to 38, and one in two
        hundred (0.5%) must round up to 1 (i.e., ties are not rounded to
        even).
        """
        self.assertEqual(38, gcPercent(3, 8))
        self.assertEqual(1, gcPercent(1, 200))

    def testZeroLength(self):
        """
        A zero length must raise ZeroLengthReadError.
        """
        self.assertRaises(ZeroLengthReadError, gcPercent, 0, 0)


class TestReadStats(TestCase):
    """
    Test the ReadStats class.
    """

    def testInitiallyEmpty(self):
        """
        A new ReadStats instance must have no counts.
        """
        summary = ReadStats().summary()
        self.assertEqual(0, summary.totalRecords)
        self.assertEqual({}, dict(summary.lengthDistribution))
        self.assertEqual({}, dict(summary.gcDistribution))

    def testOneRead(self):
        """
        Observing a single read must count its length and GC percentage.
        """
        stats = ReadStats()
        stats.observe(makeRead("GGCC"))
        self.assertEqual(1, stats.totalRecords)
        self.assertEqual({4: 1}, stats.lengthDistribution)
        self.assertEqual({100: 1}, stats.gcDistribution)

    def testLowerCase(self):
        """
        Lower case G and C must be counted.
        """
        stats = ReadStats()
        stats.observe(makeRead("gcat"))
        self.assertEqual({50: 1}, stats.gcDistribution)

    def testSeveralReads(self):
        """
        Observing several reads must count each of them, and both
        distributions must sum to the number of reads.
        """
        stats = ReadStats()
        for sequence in "ACGT", "AAAA", "GGG", "ACG", "NNNNNNNC":
            stats.observe(makeRead(sequence))
        self.assertEqual(5, stats.totalRecords)
        self.assertEqual({4: 2, 3: 2, 8: 1}, stats.lengthDistribution)
        self.assertEqual({50: 1, 0: 1, 100: 1, 67: 1, 13: 1}, stats.gcDistribution)
        self.assertEqual(5, sum(stats.lengthDistribution.values()))
        self.assertEqual(5, sum(stats.gcDistribution.values()))

    def testZeroLengthRead(self):
        """
        Observing a zero length read must raise ZeroLengthReadError and not
        change the counts.
        """
        stats = ReadStats()
        stats.observe(makeRead("ACGT"))
        self.assertRaises(ZeroLengthReadError, stats.observe, makeRead(""))
        self.assertEqual(1, stats.totalRecords)
        self.assertEqual({4: 1}, stats.lengthDistribution)
        self.assertEqual({50: 1}, stats.gcDistribution)

    def testMerge(self):
        """
        Merging two instances must add their counts.
        """
        stats1 = ReadStats()
        stats1.observe(makeRead("ACGT"))
        stats1.observe(makeRead("GG"))
        stats2 = ReadStats()
        stats2.observe(makeRead("AT"))
        stats2.observe(makeRead("CG"))
        stats1.merge(stats2)
        self.assertEqual(4, stats1.totalRecords)
        self.assertEqual({4: 1, 2: 3}, stats1.lengthDistribution)
        self.assertEqual({50: 1, 100: 2, 0: 1}, stats1.gcDistribution)
        # The merged-in instance is unchanged.
        self.assertEqual(2, stats2.totalRecords)
        self.assertEqual({2: 2}, stats2.lengthDistribution)


class TestRunSummary(TestCase):
    """
    Test the RunSummary class.
    """

    def testSummaryIsACopy(self):
        """
        Observing more reads after making a summary must not change the
        summary.
        """
        stats = ReadStats()
        stats.observe(makeRead("ACGT"))
        summary = stats.summary()
        stats.observe(makeRead("ACGT"))
        self.assertEqual(1, summary.totalRecords)
        self.assertEqual({4: 1}, dict(summary.lengthDistribution))

    def testSummaryIsReadOnly(self):
        """
        The distributions in a summary must not be changeable.
        """
        stats = ReadStats()
        stats.observe(makeRead("ACGT"))
        summary = stats.summary()
        with self.assertRaises(TypeError):
            summary.lengthDistribution[4] = 10
        with self.assertRaises(AttributeError):
            summary.totalRecords = 10

    def testToDict(self):
        """
        The dictionary form of a summary must have the expected keys, with
        distribution keys as strings in increasing numerical order.
        """
        summary = RunSummary(3, {100: 1, 9: 2}, {50: 2, 0: 1})
        d = summary.toDict()
        self.assertEqual(
            {
                "total_records": 3,
                "gc_distrib": {"0": 1, "50": 2},
                "len_distrib": {"9": 2, "100": 1},
            },
            d,
        )
        self.assertEqual(["9", "100"], list(d["len_distrib"]))
        self.assertEqual(["0", "50"], list(d["gc_distrib"]))
