'''
Calculate transcript HGVS for a list of variants.

usage: python -m cdnahgvs.hgvs_nomenclature --fasta hg38.fa --gene_model exons.tsv --variants variants.csv --out hgvs.csv

Created on Feb 7, 2026
'''
import logging.config

import argparse

from cdnahgvs.exceptions import SequenceRetrievalError, UnsupportedVariantFormat
from cdnahgvs.hgvs_calculator import HgvsCalculator
from cdnahgvs.hgvs_transcript_calculator import NEIGHBOURING_SEQUENCE_SIZE
from cdnahgvs.io import gene_model_loader, variant_helper
from cdnahgvs.util.fasta_sequence import PysamSequenceProvider
from cdnahgvs.util.log_config import LogConfig
from cdnahgvs.util.vcf_normalizer import VcfNormalizer
from cdnahgvs.variant import Variant


class HgvsNomenclature(object):
    '''
    Runs HgvsCalculator over a batch of variants
    '''

    def __init__(self, sequence_provider, genes: list, normalize: bool = True,
                 neighbouring_sequence_size: int = NEIGHBOURING_SEQUENCE_SIZE):
        '''
        Constructor
        '''
        self._logger = logging.getLogger(__name__)
        self._genes = genes
        self._normalize = normalize
        self._calculator = HgvsCalculator(sequence_provider, VcfNormalizer(),
                                          neighbouring_sequence_size=neighbouring_sequence_size)

    def get_nomenclature(self, variants: list[Variant]) -> list[tuple[Variant, str]]:
        """
        Return (variant, hgvs) pairs. Variants that can't be described are logged and skipped.
        """
        variant_hgvs = []
        for var in variants:
            try:
                for hgvs in self._calculator.run(var, self._genes, self._normalize):
                    variant_hgvs.append((var, hgvs))
            except UnsupportedVariantFormat as e:
                self._logger.warning(f"Unsupported variant {var}: {e}")
            except SequenceRetrievalError as e:
                self._logger.warning(f"Unable to get reference sequence for {var}: {e}")
            except Exception as e:
                self._logger.error(f"Error processing variant {var}: {e}")
                raise

        return variant_hgvs


def _parse_args():
    parser = argparse.ArgumentParser(description='Calculate transcript HGVS for a list of variants')
    parser.add_argument("--version", action="version", version="0.0.1")
    parser.add_argument("--fasta", help="Reference genome (indexed fasta)", required=True)
    parser.add_argument("--gene_model", help="Exons of the genes to annotate (tsv)", required=True)
    parser.add_argument("--variants", help="File with variants (csv)", required=True)
    parser.add_argument("--out", help="output file (csv)", required=True)
    parser.add_argument("--radius", help="Bases either side of an indel used to justify it", type=int,
                        default=NEIGHBOURING_SEQUENCE_SIZE)
    parser.add_argument("--no_normalize", help="Variants are already normalized", action="store_true")
    parser.add_argument("--log_file", help="Log to this file instead of stdout", required=False)
    args = parser.parse_args()
    return args


def main():
    args = _parse_args()

    if args.log_file:
        logging.config.dictConfig(LogConfig(args.log_file).file_config)
    else:
        logging.config.dictConfig(LogConfig().stdout_config)

    genes = gene_model_loader.load_genes(args.gene_model)
    variants = variant_helper.get_variants(args.variants)
    logging.getLogger(__name__).debug(f"Read {len(variants)} variants from {args.variants}")

    with PysamSequenceProvider(args.fasta) as sequence_provider:
        hn = HgvsNomenclature(sequence_provider, genes, not args.no_normalize, args.radius)
        variant_hgvs = hn.get_nomenclature(variants)

    variant_helper.write_hgvs(args.out, variant_hgvs)


if __name__ == '__main__':
    main()
