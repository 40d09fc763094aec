'''
Created on Feb 2, 2026
'''
from dataclasses import dataclass
from enum import Enum


class Landmark(Enum):
    TRANSCRIPT_START = 'transcript_start'
    CDNA_START_CODON = 'cdna_start_codon'
    CDNA_STOP_CODON = 'cdna_stop_codon'


@dataclass(frozen=True, slots=True)
class CdnaCoord:
    '''
    A transcript-relative position: an anchor landmark, the position relative to that landmark and a signed
    offset. Negative offsets are upstream (5') of the reference position, positive ones downstream.
    '''
    reference_position: int = 0
    offset: int = 0
    landmark: Landmark = Landmark.TRANSCRIPT_START


class Kind(Enum):
    CODING = 'coding'
    NON_CODING = 'non_coding'


class MutationType(Enum):
    SUBSTITUTION = 'substitution'
    DELETION = 'deletion'
    INSERTION = 'insertion'
    DUPLICATION = 'duplication'
    DELINS = 'delins'


@dataclass(slots=True)
class BuildingComponents:
    '''
    Everything needed to write the HGVS string of one variant on one transcript
    '''
    transcript_id: str
    gene_id: str
    kind: Kind | None = None
    mutation_type: MutationType | None = None
    cdna_start: CdnaCoord | None = None
    cdna_end: CdnaCoord | None = None
    reference: str = ''
    alternate: str = ''

    # Only used to describe the variant in error messages
    chromosome: str | None = None
    start: int | None = None
