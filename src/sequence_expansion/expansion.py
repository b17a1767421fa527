"""
Enumeration of the concrete RNA sequences an ambiguous transcript stands for.
"""

from itertools import product
from math import prod
from typing import Iterator, List

from .iupac_tables import AMBIGUOUS_RNA_BASES


def _branches(transcript: str) -> List[tuple]:
    # Unmapped symbols get no branches, which drops every path through them
    return [AMBIGUOUS_RNA_BASES.get(symbol, ()) for symbol in transcript]


def iter_rna_variants(transcript: str) -> Iterator[str]:
    """
    Lazily yield every concrete RNA sequence denoted by a transcript.

    Variants come out depth-first, leftmost position outermost, so the
    rightmost ambiguous position cycles fastest. A symbol missing from
    AMBIGUOUS_RNA_BASES (including the untranslatable placeholder) yields
    nothing for the whole transcript.

    Args:
        transcript: RNA transcript, possibly containing IUPAC codes

    Yields:
        Concrete RNA sequences of the same length as the transcript
    """
    for bases in product(*_branches(transcript)):
        yield ''.join(bases)


def expand_rna_variants(transcript: str) -> List[str]:
    """
    Expand a transcript into the ordered list of all its concrete variants.

    An empty list is a valid result (an unmapped symbol is present); it is
    never signalled by an exception. The empty transcript expands to [''].

    Example:
        >>> expand_rna_variants("AUR")
        ['AUA', 'AUG']
    """
    return list(iter_rna_variants(transcript))


def count_rna_variants(transcript: str) -> int:
    """Number of variants expand_rna_variants would return, without enumerating."""
    return prod(len(bases) for bases in _branches(transcript))


def ambiguous_positions(transcript: str) -> List[int]:
    """0-based positions holding a symbol that stands for more than one base."""
    return [
        i for i, symbol in enumerate(transcript)
        if len(AMBIGUOUS_RNA_BASES.get(symbol, ())) > 1
    ]
