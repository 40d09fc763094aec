'''
Convert p. changes between three letter and one letter amino acid codes.

Created on Feb 6, 2026
'''
import logging
import re

import hgvs.parser
from hgvs.exceptions import HGVSParseError

aa3_to_1 = {
    'Ala': 'A', 'Arg': 'R', 'Asn': 'N', 'Asp': 'D', 'Cys': 'C', 'Gln': 'Q', 'Glu': 'E',
    'Gly': 'G', 'His': 'H', 'Ile': 'I', 'Leu': 'L', 'Lys': 'K', 'Met': 'M', 'Phe': 'F',
    'Pro': 'P', 'Ser': 'S', 'Thr': 'T', 'Trp': 'W', 'Tyr': 'Y', 'Val': 'V', 'Ter': '*',
    'Sec': 'U', 'Xaa': 'X'
}

_AA3_PATTERN = re.compile('|'.join(aa3_to_1.keys()))


class PDot(object):
    '''
    Rewrites protein HGVS strings with one or three letter amino acids
    '''

    def __init__(self):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)
        self._hp = hgvs.parser.Parser()

    def format(self, accession: str, p_dot: str, one_letter: bool = True) -> str:
        """
        Return p_dot (eg p.Arg175His) written with one or three letter amino acids.
        When hgvs can't parse it a one letter p. is made by mapping the amino acid codes.
        """
        try:
            var_p = self._hp.parse_p_variant(f"{accession}:{p_dot}")
            return var_p.format(conf={"p_3_letter": not one_letter}).split(':', 1)[1]
        except HGVSParseError as e:
            self._logger.warning(f"Error parsing {p_dot} for {accession}, will use backup method: {e}")

        if one_letter:
            return self.map_three_to_one(p_dot)
        return p_dot

    def map_three_to_one(self, p_dot3: str) -> str:
        """
        Use regex and the amino acid abbreviation map to convert three letter p. to one letter p.
        """
        return _AA3_PATTERN.sub(lambda x: aa3_to_1[x.group()], p_dot3)
