"""
DNA -> RNA transcription under coding or template strand logic.
"""

from .iupac_tables import StrandLogic, TEMPLATE_STRAND_MAP, UNTRANSLATABLE_SYMBOL


def transcribe(dna: str, logic: StrandLogic) -> str:
    """
    Transcribe a DNA sequence into an RNA transcript.

    Ambiguity codes are kept in the transcript so they can be expanded later.
    The alphabet is not validated: on the coding strand unknown characters are
    copied through, on the template strand they become UNTRANSLATABLE_SYMBOL.

    Args:
        dna: DNA sequence (upper case)
        logic: Strand the sequence is read as

    Returns:
        RNA transcript with the same length as the input
    """
    if logic == StrandLogic.TEMPLATE:
        return ''.join(
            TEMPLATE_STRAND_MAP.get(base, UNTRANSLATABLE_SYMBOL) for base in dna
        )
    return dna.replace('T', 'U')


def parse_strand_logic(choice: str) -> StrandLogic:
    """
    Map a menu selection to a strand logic.

    "2" or "template" selects the template strand; anything else falls back
    to the coding strand.
    """
    if choice.strip().lower() in ('2', StrandLogic.TEMPLATE.value):
        return StrandLogic.TEMPLATE
    return StrandLogic.CODING
