#!/usr/bin/env python3
"""
Expand the ambiguity codes of a FASTA DNA sequence into concrete RNA variants.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli import main


if __name__ == "__main__":
    sys.exit(main())
