"""
Console and file output for expanded RNA variants.
"""

from pathlib import Path
from typing import Callable, Dict, List, Union

import pandas as pd


def format_variant_line(index: int, variant: str) -> str:
    """Format a variant with its 1-based index, e.g. 'RNA [3]: AUG'."""
    return f"RNA [{index}]: {variant}"


def print_variant_preview(variants: List[str], limit: int = 10) -> int:
    """
    Print the first `limit` variants and a note on how many remain.

    Args:
        variants: Expanded RNA variants
        limit: Maximum number of variants to print

    Returns:
        Number of variants printed
    """
    print(f"\n===== RNA Variants (First {limit} or less) =====")
    shown = min(limit, len(variants))
    for i in range(shown):
        print(format_variant_line(i + 1, variants[i]))

    if len(variants) > shown:
        print(f"...and {len(variants) - shown} more variants.")
    return shown


def print_remaining_variants(variants: List[str], start: int) -> None:
    """Print variants from position `start` on, keeping their original indices."""
    for i in range(start, len(variants)):
        print(format_variant_line(i + 1, variants[i]))


def read_answer(prompt: str, input_fn: Callable[[str], str] = input) -> str:
    """Read one stripped answer; end of input counts as an empty answer."""
    try:
        return input_fn(prompt).strip()
    except EOFError:
        return ''


def ask_yes_no(question: str, input_fn: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question; only answers starting with 'y' or 'Y' count as yes."""
    answer = read_answer(f"{question} (y/n): ", input_fn)
    return bool(answer) and answer[0] in ('y', 'Y')


def save_variants(variants: List[str], path: Union[str, Path]) -> Path:
    """
    Save variants to a file.

    Plain paths get one 'RNA [i]: <variant>' line per variant. Paths ending
    in .csv are written as a table with 'index' and 'rna_sequence' columns.

    Args:
        variants: Expanded RNA variants
        path: Output file path

    Returns:
        Path the variants were written to

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    if path.suffix.lower() == '.csv':
        df = pd.DataFrame({
            'index': range(1, len(variants) + 1),
            'rna_sequence': variants
        })
        df.to_csv(path, index=False)
    else:
        with open(path, 'w') as f:
            for i, variant in enumerate(variants, 1):
                f.write(format_variant_line(i, variant) + "\n")

    print(f"Results saved to: {path}")
    return path


def print_summary(summary: Dict) -> None:
    """Print the end-of-run summary for a pipeline result."""
    print("\n===== Summary =====")
    print(f"Total RNA sequences generated: {summary['n_variants']}")
    print(f"Original DNA length: {summary['dna_length']}")
    print(f"Ambiguous positions: {len(summary['ambiguous_positions'])}")
