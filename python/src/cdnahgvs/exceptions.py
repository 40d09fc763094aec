'''
Errors raised while calculating HGVS strings. They extend the hgvs package exceptions so callers can
handle them together with errors coming from hgvs itself.

Created on Feb 2, 2026
'''
from hgvs.exceptions import HGVSInvalidVariantError, HGVSUnsupportedOperationError, \
    HGVSDataNotAvailableError, HGVSInvalidIntervalError


class UnsupportedVariantFormat(HGVSInvalidVariantError):
    """Variant alleles are not plain nucleotides, are identical, or the variant could not be normalized"""


class UnsupportedNotationKind(HGVSUnsupportedOperationError):
    """HGVS string requested for something other than a coding or non-coding transcript"""


class SequenceRetrievalError(HGVSDataNotAvailableError):
    pass


class CoordinateOutOfRangeError(HGVSInvalidIntervalError):
    """A genomic position outside the exons of a transcript was converted to a cDNA position"""
