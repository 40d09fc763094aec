'''
Decide how a transcript is described (c. or n.) and convert CDS positions to codons.

Created on Feb 3, 2026
'''
from cdnahgvs.cdna_coord import BuildingComponents
from cdnahgvs.gene_model import Transcript
from cdnahgvs.variant import Variant

UNKNOWN_AMINOACID = 'X'


def is_coding(transcript: Transcript) -> bool:
    # A cdna coding end of 0 means the transcript has no coding sequence
    return transcript.cdna_coding_end != 0


def only_spans_coding_sequence(variant: Variant, transcript: Transcript, components: BuildingComponents) -> bool:
    """
    True when both ends of the variant are in exon bodies and the variant does not cross an exon boundary
    """
    if components.cdna_start.offset == 0 and components.cdna_end.offset == 0:
        nearest_exon = transcript.nearest_exon(variant.start)
        return nearest_exon.contains(variant.end)

    return False


def get_first_coding_exon_phase(transcript: Transcript) -> int:
    """
    Return the phase of the first exon (list order) with coding sequence, or -1 when there is none
    """
    for exon in transcript.exons:
        if exon.phase != -1:
            return exon.phase

    return -1


def _has_uncertain_start(transcript: Transcript) -> bool:
    # Some transcripts are not flagged as unconfirmed but their protein starts with X anyway (eg ENST00000618610)
    return transcript.unconfirmed_start or (transcript.protein_sequence is not None
                                            and transcript.protein_sequence.startswith(UNKNOWN_AMINOACID))


def _get_adjusted_cds_position(cds_position: int, transcript: Transcript) -> int:
    """
    Shift the position by the phase of the first coding exon when the transcript starts with a partial codon.
    Phase is 0 when the first base starts a codon, 1 or 2 when one or two bases of the codon are missing.
    """
    if _has_uncertain_start(transcript):
        first_coding_exon_phase = get_first_coding_exon_phase(transcript)
        if first_coding_exon_phase != -1:
            return cds_position - first_coding_exon_phase

    return cds_position


def get_amino_acid_position(cds_position: int, transcript: Transcript) -> int:
    """
    Convert a 1-based CDS position to the 1-based position of its codon. Positions in a partial leading
    codon are truncated onto the first amino acid.
    """
    adjusted_cds_position = _get_adjusted_cds_position(cds_position, transcript)
    return int((adjusted_cds_position - 1) / 3) + 1


def get_phase_shift(cds_position: int, transcript: Transcript) -> int:
    """
    Return which base (0, 1 or 2) of its codon the CDS position is
    """
    adjusted_cds_position = _get_adjusted_cds_position(cds_position, transcript)
    return (adjusted_cds_position - 1) % 3


def get_cdna_coding_start(transcript: Transcript) -> int:
    """
    cDNA coding start moved to the first complete codon for transcripts with an unconfirmed start
    """
    cdna_coding_start = transcript.cdna_coding_start
    if transcript.unconfirmed_start:
        first_coding_exon_phase = get_first_coding_exon_phase(transcript)
        if first_coding_exon_phase != -1:
            cdna_coding_start += first_coding_exon_phase

    return cdna_coding_start
