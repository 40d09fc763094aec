'''
Read variants from, and write HGVS strings to, csv files.

Created on Feb 7, 2026
'''
import csv
import logging

from cdnahgvs.variant import Variant


def get_variants(variants_file: str) -> list[Variant]:
    """
    Read the csv file that has the variants that will be processed. Rows have VCF-style
    chromosome, position, reference and alt values.
    """
    variants = []
    with open(variants_file, mode='r') as file:
        reader = csv.DictReader(file)
        for row in reader:
            variants.append(Variant.from_vcf(row['chromosome'],
                                             int(row['position']),
                                             row['reference'].strip().upper(),
                                             row['alt'].strip().upper()))

    return variants


def write_hgvs(out_filename: str, variant_hgvs: list[tuple[Variant, str]]):
    """
    Write one row per variant and HGVS string
    """
    headers = ['chromosome', 'position', 'reference', 'alt', 'hgvs']

    with open(out_filename, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(headers)

        for v, hgvs in variant_hgvs:
            writer.writerow([v.chromosome, v.start, v.reference, v.alternate, hgvs])

    logging.getLogger(__name__).info(f"Wrote {len(variant_hgvs)} rows to {out_filename}")
