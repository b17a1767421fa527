"""
Single-record FASTA reading.
"""

import gzip
from dataclasses import dataclass
from pathlib import Path
from typing import Union


class FastaError(Exception):
    """Raised when a FASTA file cannot be read or has no valid header."""


@dataclass(frozen=True)
class FastaRecord:
    description: str
    sequence: str


def read_fasta_text(path: Union[str, Path]) -> str:
    """
    Read a whole FASTA file as text. Paths ending in .gz are decompressed.

    Raises:
        FastaError: If the file cannot be opened or read
    """
    path = str(path)
    try:
        if path.endswith('.gz'):
            with gzip.open(path, 'rt') as f:
                return f.read()
        with open(path, 'r') as f:
            return f.read()
    except OSError as e:
        raise FastaError(f"Failed to open file: {path}") from e


def get_fasta_description(content: str) -> str:
    """
    Return the description text that follows '>' on the header line.

    Leading whitespace before the header is ignored.

    Raises:
        FastaError: If the first non-whitespace character is not '>'
    """
    stripped = content.lstrip()
    if not stripped.startswith('>'):
        raise FastaError("FASTA header should start with '>'")
    return stripped[1:].splitlines()[0] if len(stripped) > 1 else ''


def extract_dna(content: str) -> str:
    """
    Concatenate every line after the header into one upper-case sequence.

    All whitespace is removed; no alphabet check is done here.
    """
    lines = content.lstrip().splitlines()
    return ''.join(''.join(line.split()) for line in lines[1:]).upper()


def load_fasta(path: Union[str, Path]) -> FastaRecord:
    """
    Load the description and DNA sequence of a single-record FASTA file.

    Args:
        path: Path to a .fasta / .fa file (optionally gzipped)

    Returns:
        FastaRecord with header description and sequence

    Raises:
        FastaError: If the file is unreadable or the header is malformed
    """
    content = read_fasta_text(path)
    description = get_fasta_description(content)
    return FastaRecord(description=description, sequence=extract_dna(content))
