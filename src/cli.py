"""
Expand the IUPAC ambiguity codes of a FASTA DNA sequence into concrete RNA variants.
"""

import sys
import argparse
from typing import Callable, List, Optional

from src.config import ExpansionConfig, load_config
from src.fasta_io import (
    FastaError,
    read_answer,
    ask_yes_no,
    print_variant_preview,
    print_remaining_variants,
    save_variants,
    print_summary
)
from src.pipeline import RNAVariantPipeline
from src.sequence_expansion import StrandLogic, parse_strand_logic


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transcribe a FASTA DNA sequence and expand its ambiguity codes into RNA variants"
    )

    parser.add_argument('--input', type=str, default=None, help="Path to a single-record FASTA file (prompted if omitted)")
    parser.add_argument('--strand', type=str, choices=[s.value for s in StrandLogic], default=None, help="Strand the DNA is read as (prompted if omitted)")
    parser.add_argument('--output', type=str, default=None, help="Save variants to this file (.csv for a table)")
    parser.add_argument('--config', type=str, default=None, help="YAML file with ExpansionConfig settings")
    parser.add_argument('--preview_limit', type=int, default=None, help="Variants shown before asking to list the rest (default: 10)")
    parser.add_argument('--max_variants', type=int, default=None, help="Refuse to expand beyond this many variants")
    parser.add_argument('--show_all', action='store_true', help="List every variant without asking")
    parser.add_argument('--no_prompt', action='store_true', help="Never prompt; fail if the input path is missing")

    return parser


def resolve_config(args: argparse.Namespace) -> ExpansionConfig:
    """Load the config file if given, then apply command-line overrides."""
    config = load_config(args.config) if args.config else ExpansionConfig()

    overrides = {
        'strand': args.strand,
        'preview_limit': args.preview_limit,
        'max_variants': args.max_variants,
        'output_path': args.output,
    }
    values = dict(vars(config))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ExpansionConfig(**values)


def choose_strand(input_fn: Callable[[str], str]) -> StrandLogic:
    print("\nUse which strand for RNA transcription?")
    print("1. Coding Strand")
    print("2. Template Strand")
    return parse_strand_logic(read_answer("Choice: ", input_fn))


def run(args: argparse.Namespace, input_fn: Callable[[str], str] = input) -> int:
    """
    Run one interactive or scripted expansion.

    Returns:
        Process exit status
    """
    config = resolve_config(args)
    pipeline = RNAVariantPipeline(config)
    interactive = not args.no_prompt

    fasta_path = args.input
    if fasta_path is None:
        if not interactive:
            raise ValueError("--input is required with --no_prompt")
        fasta_path = read_answer("Enter path to FASTA file: ", input_fn)

    record = pipeline.load(fasta_path)

    print("\n===== FASTA Description =====")
    print(record.description)
    print("\n===== DNA Sequence =====")
    print(record.sequence)

    if args.strand is None and args.config is None and interactive:
        logic = choose_strand(input_fn)
    else:
        logic = config.strand_logic

    transcript = pipeline.transcribe(record.sequence, logic)
    variants = pipeline.expand(transcript)

    shown = print_variant_preview(variants, limit=config.preview_limit)
    if len(variants) > shown:
        if args.show_all or (interactive and ask_yes_no("Show all RNA variants?", input_fn)):
            print_remaining_variants(variants, start=shown)

    output_path = config.output_path
    if output_path is None and interactive:
        if ask_yes_no("Do you want to save the RNA sequences to a file?", input_fn):
            output_path = read_answer("Enter output file name: ", input_fn)

    if output_path:
        try:
            save_variants(variants, output_path)
        except OSError as e:
            print(f"Failed to write to file: {output_path} ({e})", file=sys.stderr)

    print_summary(pipeline.summarize(record, logic, transcript, variants))
    return 0


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args, input_fn=input_fn)
    except (FastaError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
