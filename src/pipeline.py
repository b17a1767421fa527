"""
End-to-end RNA variant pipeline.
Integrates all components: FASTA loading, transcription, and ambiguity expansion.
"""

from pathlib import Path
from typing import Optional, Dict, List, Union

from src.config import ExpansionConfig
from src.fasta_io import FastaRecord, load_fasta
from src.sequence_expansion import (
    StrandLogic,
    transcribe,
    expand_rna_variants,
    count_rna_variants,
    ambiguous_positions
)


class VariantLimitError(ValueError):
    """Raised when a transcript denotes more variants than the configured limit."""


class RNAVariantPipeline:
    """
    Complete pipeline from a FASTA file to concrete RNA variants.

    Workflow:
        1. Load the single-record FASTA file (header + DNA)
        2. Transcribe the DNA under the chosen strand logic
        3. Expand IUPAC ambiguity codes into every concrete RNA sequence
    """

    def __init__(self, config: Optional[ExpansionConfig] = None):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration (defaults to ExpansionConfig())
        """
        self.config = config or ExpansionConfig()

    def load(self, path: Union[str, Path]) -> FastaRecord:
        """Load the FASTA record; read or header errors propagate as FastaError."""
        return load_fasta(path)

    def transcribe(self, dna: str, logic: Optional[StrandLogic] = None) -> str:
        """Transcribe DNA, using the configured strand when `logic` is None."""
        if logic is None:
            logic = self.config.strand_logic
        return transcribe(dna, logic)

    def expand(self, transcript: str) -> List[str]:
        """
        Expand a transcript, enforcing the configured variant limit first.

        Raises:
            VariantLimitError: If the variant count exceeds config.max_variants
        """
        max_variants = self.config.max_variants
        if max_variants is not None:
            n_variants = count_rna_variants(transcript)
            if n_variants > max_variants:
                raise VariantLimitError(
                    f"Transcript denotes {n_variants} variants, "
                    f"more than the limit of {max_variants}"
                )
        return expand_rna_variants(transcript)

    def run(
        self,
        path: Union[str, Path],
        logic: Optional[StrandLogic] = None
    ) -> Dict:
        """
        Run all steps on a FASTA file.

        Args:
            path: FASTA file path
            logic: Strand logic (defaults to the configured strand)

        Returns:
            Dictionary containing:
                - 'description': FASTA header text
                - 'dna': DNA sequence
                - 'strand': StrandLogic used
                - 'transcript': RNA transcript with ambiguity codes
                - 'variants': Concrete RNA variants in expansion order
                - 'n_variants': Number of variants
                - 'dna_length': Length of the DNA sequence
                - 'ambiguous_positions': Positions holding ambiguity codes
        """
        if logic is None:
            logic = self.config.strand_logic

        record = self.load(path)
        transcript = self.transcribe(record.sequence, logic)
        variants = self.expand(transcript)
        return self.summarize(record, logic, transcript, variants)

    @staticmethod
    def summarize(
        record: FastaRecord,
        logic: StrandLogic,
        transcript: str,
        variants: List[str]
    ) -> Dict:
        """Collect the results of one run into the dictionary returned by run()."""
        return {
            'description': record.description,
            'dna': record.sequence,
            'strand': logic,
            'transcript': transcript,
            'variants': variants,
            'n_variants': len(variants),
            'dna_length': len(record.sequence),
            'ambiguous_positions': ambiguous_positions(transcript)
        }
