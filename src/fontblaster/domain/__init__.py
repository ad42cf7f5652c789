"""Domain models for fontblaster.

This module contains the descriptor of a candidate font file and the
tagged outcomes produced when loading it. All descriptor and outcome
types are frozen dataclasses.

Key classes:
- SupportedExtension: The closed set of loadable font types
- FontDescriptor: A candidate font file inside a bundle
- LoadedFont / SkippedFont: Tagged per-font outcomes
- BlastReport: Ordered outcomes of a single blast
"""

from fontblaster.domain.font import FontDescriptor, SupportedExtension
from fontblaster.domain.report import BlastReport, FontOutcome, LoadedFont, SkippedFont

__all__: list[str] = [
    # Enums
    "SupportedExtension",
    # Core types
    "FontDescriptor",
    "FontOutcome",
    "LoadedFont",
    "SkippedFont",
    "BlastReport",
]
