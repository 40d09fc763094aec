'''
Convert VCF-style variants to the HGVS-style representation used by the calculators: the bases shared by the
reference and alternate alleles are removed so insertions have an empty reference and deletions an empty
alternate.

Created on Feb 6, 2026
'''
import logging
import re

from cdnahgvs.variant import Variant

_ALLELE_PATTERN = re.compile('[ACGTN]*')


class VcfNormalizer(object):
    '''
    Stateless, one instance can be shared by any number of calculators
    '''

    def __init__(self):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)

    def normalize(self, variant: Variant) -> Variant:
        """
        Return the trimmed copy of the variant, or None when it can't be normalized (symbolic or
        identical alleles)
        """
        reference = variant.reference
        alternate = variant.alternate

        if (reference == alternate or _ALLELE_PATTERN.fullmatch(reference) is None
                or _ALLELE_PATTERN.fullmatch(alternate) is None):
            self._logger.debug(f"Unable to normalize {variant}")
            return None

        padding = self._find_padding(reference, alternate)
        reference = reference[padding:]
        alternate = alternate[padding:]

        suffix = self._find_common_suffix(reference, alternate)
        if suffix:
            reference = reference[:-suffix]
            alternate = alternate[:-suffix]

        start = variant.start + padding
        return variant.copy(start=start, end=start + len(reference) - 1, reference=reference, alternate=alternate)

    def _find_padding(self, reference: str, alternate: str) -> int:
        """
        Return the length of the prefix shared by both alleles
        """
        padding = 0
        while padding < len(reference) and padding < len(alternate) and reference[padding] == alternate[padding]:
            padding += 1

        return padding

    def _find_common_suffix(self, reference: str, alternate: str) -> int:
        suffix = 0
        while (suffix < len(reference) and suffix < len(alternate)
               and reference[-1 - suffix] == alternate[-1 - suffix]):
            suffix += 1

        return suffix
