"""FASTA input and variant reporting for the expansion pipeline."""

from .fasta import (
    FastaError,
    FastaRecord,
    read_fasta_text,
    get_fasta_description,
    extract_dna,
    load_fasta,
)
from .reporting import (
    format_variant_line,
    print_variant_preview,
    print_remaining_variants,
    read_answer,
    ask_yes_no,
    save_variants,
    print_summary,
)

__all__ = [
    'FastaError',
    'FastaRecord',
    'read_fasta_text',
    'get_fasta_description',
    'extract_dna',
    'load_fasta',
    'format_variant_line',
    'print_variant_preview',
    'print_remaining_variants',
    'read_answer',
    'ask_yes_no',
    'save_variants',
    'print_summary',
]
