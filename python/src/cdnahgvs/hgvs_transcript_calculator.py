'''
Calculate the c. or n. HGVS string of a normalized variant on one transcript.

Created on Feb 5, 2026
'''
import logging

from cdnahgvs import hgvs_assembler
from cdnahgvs.cdna_coord import BuildingComponents, Kind, MutationType
from cdnahgvs.exceptions import UnsupportedVariantFormat
from cdnahgvs.gene_model import Transcript
from cdnahgvs.justifier import justify
from cdnahgvs.transcript_classifier import is_coding
from cdnahgvs.variant import Variant

# Bases fetched either side of the variant when justifying indels
NEIGHBOURING_SEQUENCE_SIZE = 100


class HgvsTranscriptCalculator(object):
    '''
    Builds the HGVS string of a variant on a transcript. The variant must already be normalized, ie
    insertions have an empty reference and deletions an empty alternate.
    '''

    def __init__(self, sequence_provider, variant: Variant, transcript: Transcript, gene_id: str,
                 neighbouring_sequence_size: int = NEIGHBOURING_SEQUENCE_SIZE):
        '''
        Constructor
        * sequence_provider - any object with fetch_sequence(chromosome, start, end) returning the 1-based,
          inclusive reference sequence and get_reference_length(chromosome)
        '''
        self._logger = logging.getLogger(__name__)
        self._sequence_provider = sequence_provider
        self._variant = variant
        self._transcript = transcript
        self._neighbouring_sequence_size = neighbouring_sequence_size
        self._components = BuildingComponents(transcript.id, gene_id,
                                              kind=Kind.CODING if is_coding(transcript) else Kind.NON_CODING,
                                              chromosome=variant.chromosome,
                                              start=variant.start)

    @property
    def building_components(self) -> BuildingComponents:
        return self._components

    def calculate(self) -> str:
        """
        Return the transcript HGVS string, or None when the alleles can't be written on this transcript
        """
        if not self._variant.is_valid():
            raise UnsupportedVariantFormat(f"Variant {self._variant} is not supported")

        if self._variant.is_insertion():
            return self._calculate_insertion()
        elif self._variant.is_deletion():
            return self._calculate_deletion()
        elif self._variant.is_snv():
            return self._format(MutationType.SUBSTITUTION, self._variant.start, self._variant.end,
                                self._variant.reference, self._variant.alternate)
        else:
            return self._format(MutationType.DELINS, self._variant.start, self._variant.end,
                                self._variant.reference, self._variant.alternate)

    def _get_genomic_sequence(self) -> tuple[int, str]:
        """
        Return the 1-based start of the window around the variant and its sequence. The window is clipped to
        the ends of the chromosome.
        """
        chromosome_length = self._sequence_provider.get_reference_length(self._variant.chromosome)
        window_start = max(self._variant.start - self._neighbouring_sequence_size, 1)
        window_end = min(self._variant.start + self._neighbouring_sequence_size, chromosome_length)
        sequence = self._sequence_provider.fetch_sequence(self._variant.chromosome, window_start, window_end)
        return window_start, sequence

    def _calculate_deletion(self) -> str:
        window_start, genomic_sequence = self._get_genomic_sequence()
        start_offset = self._variant.start - window_start
        end_offset = start_offset + len(self._variant.reference) - 1

        justified = justify(self._variant, start_offset, end_offset, self._variant.reference, genomic_sequence,
                            self._transcript.strand)
        if justified.start != self._variant.start:
            self._logger.debug(f"Deletion {self._variant} justified to {justified} on {self._transcript.id}")

        return self._format(MutationType.DELETION, justified.start, justified.end, justified.reference, '')

    def _calculate_insertion(self) -> str:
        window_start, genomic_sequence = self._get_genomic_sequence()
        start_offset = self._variant.start - window_start

        justified = justify(self._variant, start_offset, start_offset - 1, self._variant.alternate,
                            genomic_sequence, self._transcript.strand)

        duplicated_range = self._get_duplicated_range(justified, window_start, genomic_sequence)
        if duplicated_range:
            return self._format(MutationType.DUPLICATION, duplicated_range[0], duplicated_range[1], '',
                                justified.alternate)

        return self._format(MutationType.INSERTION, justified.start, justified.end, '', justified.alternate)

    def _get_duplicated_range(self, insertion: Variant, window_start: int, genomic_sequence: str):
        """
        An insertion is a duplication when the inserted sequence is the same as the sequence immediately 5' of it
        on the transcript. Returns the genomic range of the duplicated bases or None.
        """
        length = len(insertion.alternate)
        if self._transcript.is_positive_strand():
            duplicated_start = insertion.start - length
        else:
            duplicated_start = insertion.start

        first = duplicated_start - window_start
        if first < 0 or first + length > len(genomic_sequence):
            return None

        if genomic_sequence[first:first + length] == insertion.alternate:
            return duplicated_start, duplicated_start + length - 1

        return None

    def _format(self, mutation_type: MutationType, genomic_start: int, genomic_end: int, reference: str,
                alternate: str) -> str:
        self._components.mutation_type = mutation_type
        if not hgvs_assembler.set_range_coords_and_alleles(genomic_start, genomic_end, reference, alternate,
                                                           self._transcript, self._components):
            return None

        return hgvs_assembler.format_transcript_string(self._components)
