'''
Convert genomic positions to cDNA coordinates.

Exons are ordered by ascending genomic position on both strands. On the negative strand the transcript
is read from the last exon to the first, so the genomic side of an exon that is upstream (5') of it flips.

A position is always described relative to the exon with the nearest edge:
  * inside the exon the position is its own anchor and the offset is 0
  * outside the exon the anchor is the nearest exon edge and the offset is the distance to it,
    negative when the position is 5' of the exon and positive when it is 3'

Coding transcripts additionally split the anchor into 5' UTR, coding sequence and 3' UTR zones,
see _CODING_RULES.

Created on Feb 3, 2026
'''
from enum import Enum

from cdnahgvs.cdna_coord import CdnaCoord, Landmark
from cdnahgvs.exceptions import CoordinateOutOfRangeError
from cdnahgvs.gene_model import Exon, Transcript
from cdnahgvs.transcript_classifier import is_coding


class Zone(Enum):
    FIVE_PRIME_UTR = 'five_prime_utr'
    CODING = 'coding'
    THREE_PRIME_UTR = 'three_prime_utr'


def genomic_to_cdna_coord(transcript: Transcript, genomic_position: int) -> CdnaCoord:
    """
    Return the cDNA coordinate of a genomic position on the transcript
    """
    if is_coding(transcript):
        return _get_coding_cdna_coord(transcript, genomic_position)
    else:
        return _get_non_coding_cdna_coord(transcript, genomic_position)


def cdna_position(transcript: Transcript, genomic_position: int) -> int:
    """
    Return the 1-based position in the transcribed sequence of an exonic genomic position.
    Exons are walked 5' to 3' adding up the length of every exon that comes before the position.
    """
    exons = transcript.exons if transcript.is_positive_strand() else reversed(transcript.exons)

    position = 0
    for exon in exons:
        if exon.contains(genomic_position):
            if transcript.is_positive_strand():
                return position + genomic_position - exon.start + 1
            return position + exon.end - genomic_position + 1
        position += exon.length()

    raise CoordinateOutOfRangeError(f"Position {genomic_position} is not in an exon of transcript {transcript}")


def get_cds_start(transcript: Transcript, genomic_start: int) -> int:
    """
    Return the CDS position of a genomic start coordinate. The negative strand needs +1 because an insertion
    start is the base after the insertion point in genomic orientation, which is the base before it on the
    transcript.
    """
    reference_position = genomic_to_cdna_coord(transcript, genomic_start).reference_position
    if transcript.is_positive_strand():
        return reference_position
    return reference_position + 1


def get_zone(transcript: Transcript, genomic_position: int) -> Zone:
    """
    Return the part of a coding transcript a genomic position belongs to
    """
    if genomic_position < transcript.genomic_coding_start:
        return Zone.FIVE_PRIME_UTR if transcript.is_positive_strand() else Zone.THREE_PRIME_UTR
    if genomic_position > transcript.genomic_coding_end:
        return Zone.THREE_PRIME_UTR if transcript.is_positive_strand() else Zone.FIVE_PRIME_UTR
    return Zone.CODING


def _get_anchor(transcript: Transcript, exon: Exon, genomic_position: int) -> tuple[int, int]:
    """
    Return the genomic anchor of the position and the signed offset from it
    """
    if genomic_position < exon.start:
        anchor = exon.start
    elif genomic_position > exon.end:
        anchor = exon.end
    else:
        return genomic_position, 0

    if transcript.is_positive_strand():
        return anchor, genomic_position - anchor
    return anchor, anchor - genomic_position


def _get_non_coding_cdna_coord(transcript: Transcript, genomic_position: int) -> CdnaCoord:
    exon = transcript.nearest_exon(genomic_position)
    anchor, offset = _get_anchor(transcript, exon, genomic_position)
    return CdnaCoord(cdna_position(transcript, anchor), offset, Landmark.TRANSCRIPT_START)


def _get_coding_cdna_coord(transcript: Transcript, genomic_position: int) -> CdnaCoord:
    exon = transcript.nearest_exon(genomic_position)
    anchor, offset = _get_anchor(transcript, exon, genomic_position)

    # Intronic positions take the zone of the exon edge they are measured from
    zone = get_zone(transcript, anchor)
    rule = _CODING_RULES[(zone, exon.contains(genomic_position))]
    return rule(transcript, exon, anchor, offset)


def _five_prime_utr_exonic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    # c.-14: distance to the start codon is carried in the offset
    return CdnaCoord(0, cdna_position(transcript, anchor) - transcript.cdna_coding_start, Landmark.CDNA_START_CODON)


def _five_prime_utr_intronic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    # c.-14+5
    return CdnaCoord(cdna_position(transcript, anchor) - transcript.cdna_coding_start, offset,
                     Landmark.CDNA_START_CODON)


def _three_prime_utr_exonic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    # c.*20
    return CdnaCoord(0, cdna_position(transcript, anchor) - transcript.cdna_coding_end, Landmark.CDNA_STOP_CODON)


def _three_prime_utr_intronic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    # c.*20-3
    return CdnaCoord(cdna_position(transcript, anchor) - transcript.cdna_coding_end, offset,
                     Landmark.CDNA_STOP_CODON)


def _coding_exonic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    if transcript.is_positive_strand():
        reference_position = exon.cds_start + (anchor - exon.genomic_coding_start)
    else:
        reference_position = exon.cds_start + (exon.genomic_coding_end - anchor)
    return CdnaCoord(reference_position, 0, Landmark.CDNA_START_CODON)


def _coding_intronic(transcript: Transcript, exon: Exon, anchor: int, offset: int) -> CdnaCoord:
    # A negative offset is in the intron 5' of the exon, so it is measured from the first coding base of the exon
    reference_position = exon.cds_start if offset < 0 else exon.cds_end
    return CdnaCoord(reference_position, offset, Landmark.CDNA_START_CODON)


# (zone, position is inside the nearest exon) -> rule
_CODING_RULES = {
    (Zone.FIVE_PRIME_UTR, True): _five_prime_utr_exonic,
    (Zone.FIVE_PRIME_UTR, False): _five_prime_utr_intronic,
    (Zone.CODING, True): _coding_exonic,
    (Zone.CODING, False): _coding_intronic,
    (Zone.THREE_PRIME_UTR, True): _three_prime_utr_exonic,
    (Zone.THREE_PRIME_UTR, False): _three_prime_utr_intronic,
}
