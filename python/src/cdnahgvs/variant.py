'''
Created on Feb 2, 2026
'''
from dataclasses import dataclass, replace
import re

# Alleles made of anything else (eg 19:13318673:(CAG)4:(CAG)5) are not supported
VARIANT_STRING_PATTERN = re.compile('[ACGT]*')


@dataclass(slots=True)
class Variant:
    chromosome: str
    start: int
    end: int
    reference: str
    alternate: str

    @classmethod
    def from_vcf(cls, chromosome: str, position: int, reference: str, alternate: str):
        """
        Build a variant from VCF-style values where the alleles may share a padding base
        """
        return cls(chromosome, position, position + len(reference) - 1, reference, alternate)

    def is_valid(self) -> bool:
        """
        Reference and alternate must be strings of A, C, G and T (possibly empty) and must differ
        """
        return (VARIANT_STRING_PATTERN.fullmatch(self.reference) is not None
                and VARIANT_STRING_PATTERN.fullmatch(self.alternate) is not None
                and self.reference != self.alternate)

    def is_insertion(self) -> bool:
        return self.reference == '' and self.alternate != ''

    def is_deletion(self) -> bool:
        return self.alternate == '' and self.reference != ''

    def is_snv(self) -> bool:
        return len(self.reference) == 1 and len(self.alternate) == 1

    def copy(self, **changes):
        return replace(self, **changes)

    def __str__(self):
        return f"{self.chromosome}:{self.start}:{self.reference or '-'}:{self.alternate or '-'}"
