'''
Build Gene, Transcript and Exon objects from a table with one row per exon.

Required columns: gene_id, transcript_id, chromosome, strand, exon_start, exon_end
Optional columns: gene_name, biotype, transcript_start, transcript_end, genomic_coding_start,
genomic_coding_end, cdna_coding_start, cdna_coding_end, exon_genomic_coding_start, exon_genomic_coding_end,
exon_cds_start, exon_cds_end, phase, protein_sequence, unconfirmed_start

Created on Feb 7, 2026
'''
import logging

import pandas as pd

from cdnahgvs.gene_model import Exon, Gene, Transcript

REQUIRED_COLUMNS = ['gene_id', 'transcript_id', 'chromosome', 'strand', 'exon_start', 'exon_end']

# Integer columns that may be missing or empty, and the value used when they are
INT_DEFAULTS = {
    'genomic_coding_start': 0,
    'genomic_coding_end': 0,
    'cdna_coding_start': 0,
    'cdna_coding_end': 0,
    'exon_genomic_coding_start': 0,
    'exon_genomic_coding_end': 0,
    'exon_cds_start': 0,
    'exon_cds_end': 0,
    'phase': -1
}

_TRUE_VALUES = ('true', '1', 'yes', 'y', 't')

_logger = logging.getLogger(__name__)


def load_genes(gene_model_file, sep: str = '\t') -> list[Gene]:
    """
    Read the gene model file (a path or buffer) and return the genes in the order they first appear
    """
    df = pd.read_csv(gene_model_file, sep=sep,
                     dtype={'gene_id': str, 'transcript_id': str, 'chromosome': str, 'strand': str})
    return genes_from_dataframe(df)


def genes_from_dataframe(df: pd.DataFrame) -> list[Gene]:
    missing = [x for x in REQUIRED_COLUMNS if x not in df.columns]
    if missing:
        raise ValueError(f"Gene model is missing columns: {', '.join(missing)}")

    df = df.copy()
    for column, default in INT_DEFAULTS.items():
        if column in df.columns:
            df[column] = df[column].fillna(default).astype(int)
        else:
            df[column] = default

    genes = {}
    for (gene_id, transcript_id), rows in df.groupby(['gene_id', 'transcript_id'], sort=False):
        rows = rows.sort_values('exon_start')
        transcript = _get_transcript(transcript_id, rows)

        if gene_id not in genes:
            genes[gene_id] = Gene(gene_id, _get_optional(rows.iloc[0], 'gene_name'))
        genes[gene_id].transcripts.append(transcript)

    _logger.debug(f"Loaded {len(genes)} genes from {df.shape[0]} exons")
    return list(genes.values())


def _get_transcript(transcript_id: str, rows: pd.DataFrame) -> Transcript:
    first = rows.iloc[0]
    exons = [Exon(int(row.exon_start), int(row.exon_end),
                  genomic_coding_start=int(row.exon_genomic_coding_start),
                  genomic_coding_end=int(row.exon_genomic_coding_end),
                  cds_start=int(row.exon_cds_start),
                  cds_end=int(row.exon_cds_end),
                  phase=int(row.phase))
             for row in rows.itertuples(index=False)]

    start = _get_optional(first, 'transcript_start')
    end = _get_optional(first, 'transcript_end')
    unconfirmed_start = _get_optional(first, 'unconfirmed_start')

    return Transcript(transcript_id,
                      first['chromosome'],
                      first['strand'],
                      int(start) if start is not None else exons[0].start,
                      int(end) if end is not None else exons[-1].end,
                      exons,
                      genomic_coding_start=int(first['genomic_coding_start']),
                      genomic_coding_end=int(first['genomic_coding_end']),
                      cdna_coding_start=int(first['cdna_coding_start']),
                      cdna_coding_end=int(first['cdna_coding_end']),
                      protein_sequence=_get_optional(first, 'protein_sequence'),
                      unconfirmed_start=str(unconfirmed_start).lower() in _TRUE_VALUES,
                      biotype=_get_optional(first, 'biotype'))


def _get_optional(row: pd.Series, column: str):
    if column not in row.index or pd.isna(row[column]):
        return None
    return row[column]
