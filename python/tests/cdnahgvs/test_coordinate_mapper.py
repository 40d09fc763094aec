'''
Created on Feb 8, 2026
'''
import unittest

from cdnahgvs.cdna_coord import CdnaCoord, Landmark
from cdnahgvs.coordinate_mapper import genomic_to_cdna_coord, cdna_position, get_cds_start, get_zone, Zone
from cdnahgvs.exceptions import CoordinateOutOfRangeError
from transcript_fixtures import plus_coding_transcript, minus_coding_transcript, non_coding_transcript

START = Landmark.CDNA_START_CODON
STOP = Landmark.CDNA_STOP_CODON
TX_START = Landmark.TRANSCRIPT_START


class TestCdnaPosition(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls._plus = plus_coding_transcript()
        cls._minus = minus_coding_transcript()

    def test_positive_strand(self):
        self.assertEqual(cdna_position(self._plus, 100), 1, "First base of the transcript")
        self.assertEqual(cdna_position(self._plus, 199), 100)
        self.assertEqual(cdna_position(self._plus, 300), 101, "Exon lengths before the position are added")
        self.assertEqual(cdna_position(self._plus, 350), 151)
        self.assertEqual(cdna_position(self._plus, 799), 400)

    def test_negative_strand(self):
        self.assertEqual(cdna_position(self._minus, 799), 1, "Negative strand starts at the last exon")
        self.assertEqual(cdna_position(self._minus, 750), 50)
        self.assertEqual(cdna_position(self._minus, 599), 101)
        self.assertEqual(cdna_position(self._minus, 350), 250)
        self.assertEqual(cdna_position(self._minus, 100), 400)

    def test_outside_exons(self):
        with self.assertRaises(CoordinateOutOfRangeError):
            cdna_position(self._plus, 250)
        with self.assertRaises(CoordinateOutOfRangeError):
            cdna_position(self._minus, 900)


class TestPositiveStrandCodingTranscript(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls._transcript = plus_coding_transcript()

    def _coord(self, genomic_position):
        return genomic_to_cdna_coord(self._transcript, genomic_position)

    def test_coding_exonic(self):
        self.assertEqual(self._coord(350), CdnaCoord(1, 0, START), "A of the ATG is c.1")
        self.assertEqual(self._coord(360), CdnaCoord(11, 0, START))
        self.assertEqual(self._coord(500), CdnaCoord(51, 0, START))
        self.assertEqual(self._coord(750), CdnaCoord(201, 0, START), "Last base of the stop codon")

    def test_five_prime_utr_exonic(self):
        self.assertEqual(self._coord(349), CdnaCoord(0, -1, START))
        self.assertEqual(self._coord(100), CdnaCoord(0, -150, START))

    def test_five_prime_utr_intronic(self):
        self.assertEqual(self._coord(210), CdnaCoord(-51, 11, START), "Nearest edge is the end of exon 1")
        self.assertEqual(self._coord(290), CdnaCoord(-50, -10, START), "Nearest edge is the start of exon 2")
        self.assertEqual(self._coord(90), CdnaCoord(-150, -10, START), "Upstream of the transcript")

    def test_coding_intronic(self):
        self.assertEqual(self._coord(405), CdnaCoord(50, 6, START))
        self.assertEqual(self._coord(495), CdnaCoord(51, -5, START))
        self.assertEqual(self._coord(610), CdnaCoord(150, 11, START))
        self.assertEqual(self._coord(690), CdnaCoord(151, -10, START))

    def test_three_prime_utr_exonic(self):
        self.assertEqual(self._coord(751), CdnaCoord(0, 1, STOP))
        self.assertEqual(self._coord(760), CdnaCoord(0, 10, STOP))

    def test_three_prime_utr_intronic(self):
        self.assertEqual(self._coord(810), CdnaCoord(49, 11, STOP), "Downstream of the transcript")

    def test_nearest_exon(self):
        self.assertEqual(self._coord(449), CdnaCoord(50, 50, START), "Closer to the end of exon 2")
        self.assertEqual(self._coord(450), CdnaCoord(51, -50, START), "Closer to the start of exon 3")

    def test_coding_positions_increase(self):
        previous = 0
        for genomic_position in list(range(350, 400)) + list(range(500, 600)) + list(range(700, 751)):
            coord = self._coord(genomic_position)
            self.assertEqual(coord.offset, 0)
            self.assertEqual(coord.landmark, START)
            self.assertEqual(coord.reference_position, previous + 1, f"Gap at {genomic_position}")
            previous = coord.reference_position


class TestNegativeStrandCodingTranscript(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls._transcript = minus_coding_transcript()

    def _coord(self, genomic_position):
        return genomic_to_cdna_coord(self._transcript, genomic_position)

    def test_coding_exonic(self):
        self.assertEqual(self._coord(750), CdnaCoord(1, 0, START))
        self.assertEqual(self._coord(740), CdnaCoord(11, 0, START))
        self.assertEqual(self._coord(599), CdnaCoord(52, 0, START))
        self.assertEqual(self._coord(350), CdnaCoord(201, 0, START))

    def test_five_prime_utr(self):
        self.assertEqual(self._coord(760), CdnaCoord(0, -10, START))
        self.assertEqual(self._coord(810), CdnaCoord(-49, -11, START), "Upstream of the transcript")

    def test_coding_intronic(self):
        self.assertEqual(self._coord(690), CdnaCoord(51, 10, START), "Below exon 4 is downstream on this strand")
        self.assertEqual(self._coord(610), CdnaCoord(52, -11, START), "Above exon 3 is upstream on this strand")
        self.assertEqual(self._coord(405), CdnaCoord(152, -6, START))

    def test_three_prime_utr(self):
        self.assertEqual(self._coord(340), CdnaCoord(0, 10, STOP))
        self.assertEqual(self._coord(290), CdnaCoord(50, 10, STOP))
        self.assertEqual(self._coord(210), CdnaCoord(51, -11, STOP))

    def test_coding_positions_increase(self):
        previous = 0
        for genomic_position in list(range(750, 699, -1)) + list(range(599, 499, -1)) + list(range(399, 349, -1)):
            coord = self._coord(genomic_position)
            self.assertEqual(coord.offset, 0)
            self.assertEqual(coord.reference_position, previous + 1, f"Gap at {genomic_position}")
            previous = coord.reference_position


class TestNonCodingTranscript(unittest.TestCase):

    def test_positive_strand(self):
        transcript = non_coding_transcript('+')
        self.assertEqual(genomic_to_cdna_coord(transcript, 150), CdnaCoord(51, 0, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 310), CdnaCoord(110, 0, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 90), CdnaCoord(1, -10, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 410), CdnaCoord(200, 10, TX_START))

    def test_negative_strand(self):
        transcript = non_coding_transcript('-')
        self.assertEqual(genomic_to_cdna_coord(transcript, 150), CdnaCoord(150, 0, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 410), CdnaCoord(1, -10, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 90), CdnaCoord(200, 10, TX_START))

    def test_tie_picks_first_exon(self):
        self.assertEqual(genomic_to_cdna_coord(non_coding_transcript('+'), 250), CdnaCoord(100, 51, TX_START))
        self.assertEqual(genomic_to_cdna_coord(non_coding_transcript('-'), 250), CdnaCoord(101, -51, TX_START))

    def test_exon_edges(self):
        transcript = non_coding_transcript('+')
        self.assertEqual(genomic_to_cdna_coord(transcript, 199), CdnaCoord(100, 0, TX_START))
        self.assertEqual(genomic_to_cdna_coord(transcript, 301), CdnaCoord(101, 0, TX_START))


class TestCodingHelpers(unittest.TestCase):

    def test_get_zone(self):
        plus = plus_coding_transcript()
        minus = minus_coding_transcript()
        self.assertEqual(get_zone(plus, 349), Zone.FIVE_PRIME_UTR)
        self.assertEqual(get_zone(plus, 350), Zone.CODING)
        self.assertEqual(get_zone(plus, 751), Zone.THREE_PRIME_UTR)
        self.assertEqual(get_zone(minus, 349), Zone.THREE_PRIME_UTR)
        self.assertEqual(get_zone(minus, 751), Zone.FIVE_PRIME_UTR)

    def test_get_cds_start(self):
        self.assertEqual(get_cds_start(plus_coding_transcript(), 510), 61)
        self.assertEqual(get_cds_start(minus_coding_transcript(), 599), 53, "Negative strand is shifted by one")

    def test_intron_next_to_coding_start(self):
        # Exon 2 starting with the ATG makes the intron before it c.1-N rather than a 5' UTR position
        transcript = plus_coding_transcript()
        transcript.exons[1].start = 350
        transcript.cdna_coding_start = 101
        transcript.cdna_coding_end = 301
        self.assertEqual(genomic_to_cdna_coord(transcript, 345), CdnaCoord(1, -5, START))


if __name__ == "__main__":
    unittest.main()
