'''
Shift insertions and deletions to their most 3' position relative to the transcript, as HGVS requires.

Created on Feb 4, 2026
'''
from cdnahgvs.gene_model import NEGATIVE
from cdnahgvs.variant import Variant


def justify(variant: Variant, start_offset: int, end_offset: int, allele: str, genomic_sequence: str,
            strand: str) -> Variant:
    """
    Justify an indel to the left (negative strand) or to the right (positive strand) along genomic_sequence and
    return the justified copy of the variant.
    * start_offset - 0-based position of the variant start within genomic_sequence
    * end_offset - 0-based position of the variant end within genomic_sequence. For insertions this is
      start_offset - 1, the same way variant end is start - 1.
    * allele - the deleted or inserted sequence
    * genomic_sequence - reference sequence around the variant
    * strand - strand of the transcript, '+' or '-'
    """
    shifted = list(allele)
    shift = 0

    if strand == NEGATIVE:
        while start_offset > 0 and genomic_sequence[start_offset - 1] == shifted[-1]:
            shifted.pop()
            shifted.insert(0, genomic_sequence[start_offset - 1])
            start_offset -= 1
            end_offset -= 1
            shift -= 1
    else:
        while end_offset + 1 < len(genomic_sequence) and genomic_sequence[end_offset + 1] == shifted[0]:
            shifted.pop(0)
            shifted.append(genomic_sequence[end_offset + 1])
            start_offset += 1
            end_offset += 1
            shift += 1

    justified_allele = ''.join(shifted)
    changes = {'start': variant.start + shift, 'end': variant.end + shift}
    if variant.reference == '':
        changes['alternate'] = justified_allele
    else:
        changes['reference'] = justified_allele

    return variant.copy(**changes)
