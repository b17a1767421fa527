"""
IUPAC symbol tables for DNA -> RNA transcription and ambiguity expansion.
"""

from enum import Enum
from typing import Dict, Tuple


class StrandLogic(Enum):
    """Which strand the input DNA is read as when deriving the transcript."""

    CODING = 'coding'
    TEMPLATE = 'template'


# Placeholder written for symbols the template strand table cannot translate
UNTRANSLATABLE_SYMBOL = '?'

DNA_SYMBOLS = 'ATCGRYSWKMBDHVN'
RNA_BASES = 'AUCG'

# Template strand: complement each base, ambiguity codes map to the code of
# their complemented base set
TEMPLATE_STRAND_MAP: Dict[str, str] = {
    'A': 'U', 'T': 'A', 'C': 'G', 'G': 'C',
    'R': 'Y', 'Y': 'R', 'S': 'S', 'W': 'W',
    'K': 'M', 'M': 'K', 'B': 'V', 'D': 'H',
    'H': 'D', 'V': 'B', 'N': 'N',
}

# RNA symbol -> concrete bases it stands for, in expansion order
AMBIGUOUS_RNA_BASES: Dict[str, Tuple[str, ...]] = {
    'A': ('A',), 'U': ('U',), 'C': ('C',), 'G': ('G',),
    'R': ('A', 'G'),  # purine
    'Y': ('C', 'U'),  # pyrimidine
    'S': ('G', 'C'),  # strong
    'W': ('A', 'U'),  # weak
    'K': ('G', 'U'),  # keto
    'M': ('A', 'C'),  # amino
    'B': ('C', 'G', 'U'),  # not A
    'D': ('A', 'G', 'U'),  # not C
    'H': ('A', 'C', 'U'),  # not G
    'V': ('A', 'C', 'G'),  # not U
    'N': ('A', 'U', 'C', 'G'),  # any
}
