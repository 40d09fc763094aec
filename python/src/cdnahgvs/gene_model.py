'''
Gene, transcript and exon records. These are built by a loader and treated as validated, read-only input.

Created on Feb 2, 2026
'''
from dataclasses import dataclass, field

from cdnahgvs.exceptions import CoordinateOutOfRangeError

POSITIVE = '+'
NEGATIVE = '-'


@dataclass(slots=True)
class Exon:
    start: int
    end: int

    # Genomic span of the coding part of the exon, 0 when the exon has no coding sequence
    genomic_coding_start: int = 0
    genomic_coding_end: int = 0

    # CDS-relative positions of the coding part
    cds_start: int = 0
    cds_end: int = 0

    # Reading frame of the first coding base, -1 if the exon has no coding sequence
    phase: int = -1
    id: str | None = None

    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, genomic_position: int) -> bool:
        return self.start <= genomic_position <= self.end


@dataclass(slots=True)
class Transcript:
    id: str
    chromosome: str
    strand: str
    start: int
    end: int

    # Ordered by ascending genomic position regardless of strand
    exons: list[Exon] = field(default_factory=list)

    genomic_coding_start: int = 0
    genomic_coding_end: int = 0
    cdna_coding_start: int = 0
    cdna_coding_end: int = 0

    protein_sequence: str | None = None
    unconfirmed_start: bool = False
    name: str | None = None
    biotype: str | None = None

    def is_positive_strand(self) -> bool:
        return self.strand == POSITIVE

    def nearest_exon(self, genomic_position: int) -> Exon:
        """
        Return the exon whose start or end is closest to the position. The first exon in list order wins a tie.
        """
        if not self.exons:
            raise CoordinateOutOfRangeError(f"Transcript {self.id} has no exons")
        return min(self.exons, key=lambda exon: min(abs(genomic_position - exon.start),
                                                    abs(genomic_position - exon.end)))

    def __str__(self):
        return f"{self.id} {self.chromosome}:{self.start}-{self.end}({self.strand})"


@dataclass(slots=True)
class Gene:
    id: str
    name: str | None = None
    transcripts: list[Transcript] = field(default_factory=list)
