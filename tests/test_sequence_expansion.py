"""
Unit tests for transcription and ambiguity expansion.
"""

import unittest
from math import prod

from src.sequence_expansion import (
    StrandLogic,
    AMBIGUOUS_RNA_BASES,
    TEMPLATE_STRAND_MAP,
    UNTRANSLATABLE_SYMBOL,
    DNA_SYMBOLS,
    transcribe,
    parse_strand_logic,
    iter_rna_variants,
    expand_rna_variants,
    count_rna_variants,
    ambiguous_positions
)


class TestSymbolTables(unittest.TestCase):
    """Test the static IUPAC tables."""

    def test_template_map_covers_dna_alphabet(self):
        """Test that every DNA symbol has a template strand translation."""
        for symbol in DNA_SYMBOLS:
            self.assertIn(symbol, TEMPLATE_STRAND_MAP)

    def test_template_map_output_is_expandable(self):
        """Test that every template strand output symbol can be expanded."""
        for rna_symbol in TEMPLATE_STRAND_MAP.values():
            self.assertIn(rna_symbol, AMBIGUOUS_RNA_BASES)

    def test_ambiguity_sets_are_concrete_bases(self):
        """Test that ambiguity sets are non-empty and hold only AUCG."""
        for symbol, bases in AMBIGUOUS_RNA_BASES.items():
            self.assertGreater(len(bases), 0)
            self.assertTrue(set(bases) <= set('AUCG'), symbol)

    def test_placeholder_is_not_expandable(self):
        """Test that the untranslatable placeholder has no ambiguity set."""
        self.assertNotIn(UNTRANSLATABLE_SYMBOL, AMBIGUOUS_RNA_BASES)


class TestTranscription(unittest.TestCase):
    """Test DNA -> RNA transcription."""

    def test_coding_strand(self):
        """Test coding strand transcription replaces T with U."""
        self.assertEqual(transcribe("ATCG", StrandLogic.CODING), "AUCG")

    def test_template_strand(self):
        """Test template strand transcription complements each base."""
        self.assertEqual(transcribe("ATCG", StrandLogic.TEMPLATE), "UAGC")

    def test_template_strand_ambiguity(self):
        """Test template strand transcription complements ambiguity codes."""
        self.assertEqual(transcribe("ATN", StrandLogic.TEMPLATE), "UAN")
        self.assertEqual(transcribe("RYKMBDHV", StrandLogic.TEMPLATE), "YRMKVHDB")

    def test_coding_strand_keeps_ambiguity_and_unknowns(self):
        """Test coding strand copies ambiguity codes and unknown characters."""
        self.assertEqual(transcribe("TNRX", StrandLogic.CODING), "UNRX")

    def test_template_strand_unknown_symbol(self):
        """Test unknown template strand symbols become the placeholder."""
        rna = transcribe("AXT", StrandLogic.TEMPLATE)
        self.assertEqual(rna, "U?A")
        self.assertEqual(len(rna), 3)

    def test_empty_sequence(self):
        """Test transcribing an empty sequence."""
        self.assertEqual(transcribe("", StrandLogic.CODING), "")
        self.assertEqual(transcribe("", StrandLogic.TEMPLATE), "")

    def test_parse_strand_logic(self):
        """Test menu choices map to strand logic with a coding default."""
        self.assertEqual(parse_strand_logic("2"), StrandLogic.TEMPLATE)
        self.assertEqual(parse_strand_logic(" Template "), StrandLogic.TEMPLATE)
        self.assertEqual(parse_strand_logic("1"), StrandLogic.CODING)
        self.assertEqual(parse_strand_logic("coding"), StrandLogic.CODING)
        # Anything unrecognised falls back to coding
        self.assertEqual(parse_strand_logic("3"), StrandLogic.CODING)
        self.assertEqual(parse_strand_logic(""), StrandLogic.CODING)


class TestExpansion(unittest.TestCase):
    """Test ambiguity expansion."""

    def test_single_ambiguity(self):
        """Test expanding a purine code."""
        self.assertEqual(expand_rna_variants("AUR"), ["AUA", "AUG"])

    def test_any_base(self):
        """Test N expands to all four bases in table order."""
        self.assertEqual(expand_rna_variants("N"), ["A", "U", "C", "G"])

    def test_rightmost_position_cycles_fastest(self):
        """Test variants come out in Cartesian-product order."""
        self.assertEqual(
            expand_rna_variants("RY"),
            ["AC", "AU", "GC", "GU"]
        )

    def test_unambiguous_fixed_point(self):
        """Test an unambiguous transcript expands to itself."""
        self.assertEqual(expand_rna_variants("AUGGCU"), ["AUGGCU"])

    def test_empty_transcript(self):
        """Test the empty transcript expands to one empty variant."""
        self.assertEqual(expand_rna_variants(""), [""])
        self.assertEqual(count_rna_variants(""), 1)

    def test_unmapped_symbol_drops_everything(self):
        """Test any unmapped symbol empties the result."""
        self.assertEqual(expand_rna_variants("?"), [])
        self.assertEqual(expand_rna_variants("NNU?A"), [])
        self.assertEqual(expand_rna_variants("AXG"), [])
        self.assertEqual(count_rna_variants("NNU?A"), 0)

    def test_count_and_length_laws(self):
        """Test variant count is the product of branch counts and lengths match."""
        transcript = "ANRBUSYW"
        variants = expand_rna_variants(transcript)
        expected = prod(len(AMBIGUOUS_RNA_BASES[s]) for s in transcript)
        self.assertEqual(len(variants), expected)
        self.assertEqual(count_rna_variants(transcript), expected)
        for variant in variants:
            self.assertEqual(len(variant), len(transcript))
            self.assertTrue(set(variant) <= set('AUCG'))
        self.assertEqual(len(set(variants)), len(variants))

    def test_bases_come_from_table(self):
        """Test every emitted base belongs to its position's ambiguity set."""
        transcript = "DHVK"
        for variant in expand_rna_variants(transcript):
            for symbol, base in zip(transcript, variant):
                self.assertIn(base, AMBIGUOUS_RNA_BASES[symbol])

    def test_deterministic(self):
        """Test repeated expansion gives identical output."""
        self.assertEqual(expand_rna_variants("NRS"), expand_rna_variants("NRS"))

    def test_iterator_matches_list(self):
        """Test the lazy iterator yields the same variants in the same order."""
        self.assertEqual(list(iter_rna_variants("MKN")), expand_rna_variants("MKN"))

    def test_long_unambiguous_transcript(self):
        """Test long transcripts expand without hitting recursion limits."""
        transcript = "AUCG" * 2000
        self.assertEqual(expand_rna_variants(transcript), [transcript])

    def test_ambiguous_positions(self):
        """Test positions of multi-base symbols are reported."""
        self.assertEqual(ambiguous_positions("AUNGRC"), [2, 4])
        self.assertEqual(ambiguous_positions("AU?G"), [])

    def test_template_placeholder_reaches_expansion(self):
        """Test an untranslatable template symbol yields no variants."""
        transcript = transcribe("ANX", StrandLogic.TEMPLATE)
        self.assertEqual(expand_rna_variants(transcript), [])


if __name__ == '__main__':
    unittest.main()
