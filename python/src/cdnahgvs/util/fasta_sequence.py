'''
Reference sequence provider backed by an indexed fasta file.

Created on Feb 6, 2026
'''
import logging

import pysam

from cdnahgvs.exceptions import SequenceRetrievalError


class PysamSequenceProvider:
    """
    Class used to query reference genome fasta file. Coordinates are 1-based and inclusive.
    """

    def __init__(self, filename: str) -> None:
        self._logger = logging.getLogger(__name__)
        self.filename = filename
        self.my_fasta = pysam.FastaFile(self.filename)
        self._references = set(self.my_fasta.references)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.my_fasta.close()

    def fetch_sequence(self, chrom: str, start: int, end: int) -> str:
        """
        Provide reference sequence at given coordinates.
        :param chrom: chromosome, with or without the chr prefix
        :param start: 1-based first base
        :param end: 1-based last base
        :return: upper case sequence of exactly end - start + 1 bases
        """
        reference = self._get_reference_name(chrom)

        # pysam wants 0-based, half open coordinates
        sequence = self.my_fasta.fetch(reference=reference, start=start - 1, end=end)

        if len(sequence) != end - start + 1:
            raise SequenceRetrievalError(f"Expected {end - start + 1} bases from {chrom}:{start}-{end} "
                                         f"in {self.filename} but got {len(sequence)}")
        return sequence.upper()

    def get_reference_length(self, chrom: str) -> int:
        """
        Return the number of bases in the chromosome
        """
        return self.my_fasta.get_reference_length(self._get_reference_name(chrom))

    def _get_reference_name(self, chrom: str) -> str:
        """
        Find the name the fasta uses for the chromosome (eg 1 vs chr1, MT vs chrM)
        """
        if chrom.startswith('chr'):
            candidates = [chrom, chrom[3:]]
        else:
            candidates = [chrom, f"chr{chrom}"]

        if chrom in ('MT', 'chrM', 'M', 'chrMT'):
            candidates.extend(['MT', 'chrM'])

        for candidate in candidates:
            if candidate in self._references:
                return candidate

        raise SequenceRetrievalError(f"Chromosome {chrom} not found in {self.filename}")
