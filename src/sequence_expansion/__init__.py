"""
RNA Variant Expansion Module

This module handles strand-aware transcription and IUPAC ambiguity expansion.
"""

from .iupac_tables import (
    StrandLogic,
    TEMPLATE_STRAND_MAP,
    AMBIGUOUS_RNA_BASES,
    UNTRANSLATABLE_SYMBOL,
    DNA_SYMBOLS,
    RNA_BASES
)

from .transcription import transcribe, parse_strand_logic

from .expansion import (
    iter_rna_variants,
    expand_rna_variants,
    count_rna_variants,
    ambiguous_positions
)

__all__ = [
    'StrandLogic',
    'TEMPLATE_STRAND_MAP',
    'AMBIGUOUS_RNA_BASES',
    'UNTRANSLATABLE_SYMBOL',
    'DNA_SYMBOLS',
    'RNA_BASES',
    'transcribe',
    'parse_strand_logic',
    'iter_rna_variants',
    'expand_rna_variants',
    'count_rna_variants',
    'ambiguous_positions',
]
