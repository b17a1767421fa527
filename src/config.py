"""
Run configuration for the RNA variant expander.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from src.sequence_expansion import StrandLogic


@dataclass
class ExpansionConfig:
    """
    Configuration for a transcription + expansion run.

    Settings:
        strand: Strand the DNA is read as, "coding" or "template"
            (default: "coding")

        preview_limit: Variants printed before asking to show the rest
            (default: 10)

        max_variants: Refuse to expand when the transcript denotes more
            variants than this (default: None, no limit)
            - Expansion is exponential in the number of ambiguous positions;
              set this when inputs are untrusted

        output_path: Where to save variants; .csv paths are written as a
            table (default: None, ask interactively)

    Example:
        >>> config = ExpansionConfig(strand="template", max_variants=100000)
    """
    strand: str = 'coding'
    preview_limit: int = 10
    max_variants: Optional[int] = None
    output_path: Optional[str] = None

    def __post_init__(self):
        valid = [logic.value for logic in StrandLogic]
        if self.strand not in valid:
            raise ValueError(f"strand must be one of {valid}, got {self.strand!r}")
        for name in ('preview_limit', 'max_variants'):
            value = getattr(self, name)
            if value is None and name == 'max_variants':
                continue
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.output_path is not None and not isinstance(self.output_path, str):
            raise ValueError(f"output_path must be a string, got {self.output_path!r}")

    @property
    def strand_logic(self) -> StrandLogic:
        return StrandLogic(self.strand)


def load_config(path: Union[str, Path]) -> ExpansionConfig:
    """
    Load an ExpansionConfig from a YAML file.

    Args:
        path: YAML file holding a mapping of ExpansionConfig fields

    Returns:
        Validated configuration

    Raises:
        ValueError: If the file is not valid YAML, not a mapping, or has
            unknown keys
    """
    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ExpansionConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")

    return ExpansionConfig(**data)
