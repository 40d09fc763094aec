'''
Created on Feb 10, 2026
'''
import csv
import os
import tempfile
import unittest

from cdnahgvs.io.variant_helper import get_variants, write_hgvs
from cdnahgvs.variant import Variant


class TestVariantHelper(unittest.TestCase):

    def setUp(self):
        self._dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self._dir.cleanup()

    def test_get_variants(self):
        filename = os.path.join(self._dir.name, 'variants.csv')
        with open(filename, 'w') as f:
            f.write("chromosome,position,reference,alt\n1,510,c,t\nX,520,CAG, C\n")

        self.assertEqual(get_variants(filename), [Variant('1', 510, 510, 'C', 'T'),
                                                  Variant('X', 520, 522, 'CAG', 'C')])

    def test_write_hgvs(self):
        filename = os.path.join(self._dir.name, 'hgvs.csv')
        write_hgvs(filename, [(Variant('1', 510, 510, 'C', 'T'), 'ENST_PLUS(GENE1):c.61C>T')])

        with open(filename) as f:
            rows = list(csv.reader(f))

        self.assertEqual(rows, [['chromosome', 'position', 'reference', 'alt', 'hgvs'],
                                ['1', '510', 'C', 'T', 'ENST_PLUS(GENE1):c.61C>T']])


if __name__ == "__main__":
    unittest.main()
