'''
Calculate the HGVS strings of a variant for every transcript of one or more genes.

Created on Feb 5, 2026
'''
import logging

from cdnahgvs.exceptions import UnsupportedNotationKind, UnsupportedVariantFormat
from cdnahgvs.gene_model import Gene, Transcript
from cdnahgvs.hgvs_transcript_calculator import HgvsTranscriptCalculator, NEIGHBOURING_SEQUENCE_SIZE
from cdnahgvs.util.pdot import PDot
from cdnahgvs.util.vcf_normalizer import VcfNormalizer
from cdnahgvs.variant import Variant


class HgvsCalculator(object):
    '''
    Collaborators are duck typed:
    * sequence_provider.fetch_sequence(chromosome, start, end) -> str, 1-based inclusive
    * normalizer.normalize(variant) -> Variant, or None when the variant can't be normalized
    * protein_calculator.calculate(variant, transcript) -> list of (protein id, p.) tuples, or None
    '''

    def __init__(self, sequence_provider, normalizer=None, protein_calculator=None,
                 neighbouring_sequence_size: int = NEIGHBOURING_SEQUENCE_SIZE, protein_one_letter: bool = False):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)
        self._sequence_provider = sequence_provider
        self._normalizer = normalizer if normalizer is not None else VcfNormalizer()
        self._protein_calculator = protein_calculator
        self._neighbouring_sequence_size = neighbouring_sequence_size
        self._pdot = PDot() if protein_one_letter else None

    def run(self, variant: Variant, genes, normalize: bool = True) -> list[str]:
        """
        Return the transcript and protein HGVS strings of the variant, in gene and transcript order.
        genes is either a Gene or a list of them.
        A SequenceRetrievalError aborts the whole variant.
        """
        if isinstance(genes, Gene):
            genes = [genes]

        hgvs_list = []
        for gene in genes:
            hgvs_list.extend(self._run_gene(variant, gene, normalize))

        return hgvs_list

    def _run_gene(self, variant: Variant, gene: Gene, normalize: bool) -> list[str]:
        hgvs_list = []
        if not gene.transcripts:
            return hgvs_list

        for transcript in gene.transcripts:
            hgvs_list.extend(self._run_transcript(variant, transcript, gene.id, normalize))

        return hgvs_list

    def _run_transcript(self, variant: Variant, transcript: Transcript, gene_id: str, normalize: bool) -> list[str]:
        hgvs_strings = []

        if not self.overlaps(variant, transcript):
            return hgvs_strings

        if not variant.is_valid():
            raise UnsupportedVariantFormat(f"Variant {variant} is not supported. Alleles must be different "
                                           f"and only contain A, C, G or T")

        # We cannot know the type of variant before normalization has been carried out
        normalized_variant = self.normalize(variant, normalize)

        calculator = HgvsTranscriptCalculator(self._sequence_provider, normalized_variant, transcript, gene_id,
                                              self._neighbouring_sequence_size)
        try:
            hgvs_transcript = calculator.calculate()
        except UnsupportedNotationKind as e:
            self._logger.warning(f"Unable to calculate HGVS for {variant} on {transcript.id}: {e}")
            return hgvs_strings

        if not hgvs_transcript:
            self._logger.debug(f"No HGVS for {variant} on {transcript.id}")
            return hgvs_strings

        hgvs_strings.append(hgvs_transcript)
        hgvs_strings.extend(self._get_protein_hgvs(normalized_variant, transcript))
        return hgvs_strings

    def _get_protein_hgvs(self, variant: Variant, transcript: Transcript) -> list[str]:
        if self._protein_calculator is None:
            return []

        protein_hgvs = []
        for protein_id, p_dot in self._protein_calculator.calculate(variant, transcript) or []:
            if self._pdot is not None:
                p_dot = self._pdot.format(protein_id, p_dot, one_letter=True)
            protein_hgvs.append(f"{protein_id}:{p_dot}")

        return protein_hgvs

    @staticmethod
    def overlaps(variant: Variant, transcript: Transcript) -> bool:
        return (variant.chromosome == transcript.chromosome
                and variant.start <= transcript.end and variant.end >= transcript.start)

    def normalize(self, variant: Variant, normalize: bool = True) -> Variant:
        """
        Convert a VCF-style variant to HGVS-style
        """
        if not normalize:
            return variant

        normalized_variant = self._normalizer.normalize(variant)
        if normalized_variant is None:
            raise UnsupportedVariantFormat(f"Variant {variant} cannot be properly normalized. Please check.")

        return normalized_variant
