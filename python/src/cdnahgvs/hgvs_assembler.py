'''
Write transcript HGVS strings from BuildingComponents.

Some examples of what is produced:
  ENST00000357654(BRCA1):c.2207A>C
  ENST00000357654(BRCA1):c.-14_-12delAGG
  ENST00000357654(BRCA1):c.5152+3_5152+4insTT
  ENST00000461221(BRCA1):n.112dupA
  ENST00000357654(BRCA1):c.*12del23

Created on Feb 4, 2026
'''
import logging

from cdnahgvs.cdna_coord import BuildingComponents, CdnaCoord, Kind, Landmark, MutationType
from cdnahgvs.coordinate_mapper import genomic_to_cdna_coord
from cdnahgvs.exceptions import UnsupportedNotationKind
from cdnahgvs.gene_model import Transcript

CODING_TRANSCRIPT_CHAR = 'c.'
NON_CODING_TRANSCRIPT_CHAR = 'n.'
STOP_CODON_CHAR = '*'

# If an allele is longer than this its length is used instead
MAX_ALLELE_LENGTH = 4

COMPLEMENTARY_NT = {
    'A': 'T', 'C': 'G', 'G': 'C', 'T': 'A', 'N': 'N',
    'a': 't', 'c': 'g', 'g': 'c', 't': 'a', 'n': 'n'
}

_logger = logging.getLogger(__name__)


def reverse_complement(sequence: str) -> str:
    """
    Return the reverse complement of sequence, or None when it has a base without a complement
    (eg alternate "TBS" found in ClinVar)
    """
    complement = []
    for nt in reversed(sequence):
        if nt not in COMPLEMENTARY_NT:
            return None
        complement.append(COMPLEMENTARY_NT[nt])

    return ''.join(complement)


def _get_allele(allele: str, reverse: bool) -> str:
    if len(allele) > MAX_ALLELE_LENGTH:
        return str(len(allele))
    if reverse:
        return reverse_complement(allele)
    return allele


def set_range_coords_and_alleles(genomic_start: int, genomic_end: int, genomic_reference: str,
                                 genomic_alternate: str, transcript: Transcript,
                                 components: BuildingComponents) -> bool:
    """
    Fill in the cDNA coordinates and alleles in transcript orientation. On the negative strand the genomic end
    is the cDNA start and the alleles are reverse complemented.
    Returns False when an allele can't be reverse complemented.
    """
    if transcript.is_positive_strand():
        start = genomic_start
        end = genomic_end
        reference = _get_allele(genomic_reference, False)
        alternate = _get_allele(genomic_alternate, False)
    else:
        start = genomic_end
        end = genomic_start
        reference = _get_allele(genomic_reference, True)
        alternate = _get_allele(genomic_alternate, True)

    if reference is None or alternate is None:
        _logger.debug(f"Unable to reverse complement {genomic_reference}/{genomic_alternate} for {transcript.id}")
        return False

    components.reference = reference
    components.alternate = alternate
    components.cdna_start = genomic_to_cdna_coord(transcript, start)
    components.cdna_end = genomic_to_cdna_coord(transcript, end)
    return True


def format_cdna_coord(coord: CdnaCoord) -> str:
    """
    Write a single coordinate, eg 123, 123+5, -14, -14-2, *20, *20+1
    """
    if coord.landmark == Landmark.CDNA_STOP_CODON:
        if coord.reference_position == 0:
            return f"{STOP_CODON_CHAR}{coord.offset}"
        return f"{STOP_CODON_CHAR}{coord.reference_position}{_format_offset(coord.offset)}"

    if coord.landmark == Landmark.CDNA_START_CODON and coord.reference_position == 0:
        # Exonic 5' UTR positions carry the distance to the start codon as the offset
        return str(coord.offset)

    return f"{coord.reference_position}{_format_offset(coord.offset)}"


def _format_offset(offset: int) -> str:
    if offset == 0:
        return ''
    return f"{offset:+d}"


def format_cdna_coords(components: BuildingComponents) -> str:
    """
    Write the position or range of the variant. Insertions are written as the two bases that flank them,
    which the transcript calculator passes as cdna_start (after) and cdna_end (before).
    """
    start = format_cdna_coord(components.cdna_start)
    end = format_cdna_coord(components.cdna_end)

    if components.mutation_type == MutationType.INSERTION:
        return f"{end}_{start}"
    if start == end:
        return start
    return f"{start}_{end}"


def format_dna_allele(components: BuildingComponents) -> str:
    mutation_type = components.mutation_type

    if mutation_type == MutationType.SUBSTITUTION:
        return f"{components.reference}>{components.alternate}"
    elif mutation_type == MutationType.DELETION:
        return f"del{components.reference}"
    elif mutation_type == MutationType.INSERTION:
        return f"ins{components.alternate}"
    elif mutation_type == MutationType.DUPLICATION:
        return f"dup{components.alternate}"
    elif mutation_type == MutationType.DELINS:
        return f"delins{components.alternate}"

    raise UnsupportedNotationKind(f"HGVS allele not implemented for mutation type {mutation_type}")


def format_prefix(components: BuildingComponents) -> str:
    """
    Transcript and gene prefix, eg NM_007294.3(BRCA1)
    """
    return f"{components.transcript_id}({components.gene_id})"


def format_transcript_string(components: BuildingComponents) -> str:
    """
    Generate a transcript HGVS string
    """
    if components.kind == Kind.CODING:
        transcript_char = CODING_TRANSCRIPT_CHAR
    elif components.kind == Kind.NON_CODING:
        transcript_char = NON_CODING_TRANSCRIPT_CHAR
    else:
        raise UnsupportedNotationKind(f"HGVS calculation not implemented for variant "
                                      f"{components.chromosome}:{components.start}:{components.reference}:"
                                      f"{components.alternate}; kind: {components.kind}; "
                                      f"cdna start: {components.cdna_start}; cdna end: {components.cdna_end}")

    return (f"{format_prefix(components)}:{transcript_char}"
            f"{format_cdna_coords(components)}{format_dna_allele(components)}")
