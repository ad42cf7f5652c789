"""Core loading pipeline for fontblaster.

This module contains:

- File name classification and parsing
- Font and nested bundle discovery
- Per-font loading and registration
- Orchestration over a bundle tree

Key functions:
- is_font_file: Test if a file name denotes a font candidate
- parse_font_name: Split a file name into base name and extension

Key classes:
- FontDiscoverer: Lists bundles and builds font descriptors
- FontRegistrar: Loads and registers a single font
- BundleFontLoader: Loads a whole bundle tree into a BlastReport
- FontBlaster: Process-wide facade with shared state
"""

from fontblaster.core.blaster import BundleFontLoader, FontBlaster
from fontblaster.core.discovery import FontDiscoverer
from fontblaster.core.naming import is_font_file, parse_font_name
from fontblaster.core.registrar import FontRegistrar

__all__ = [
    "BundleFontLoader",
    "FontBlaster",
    "FontDiscoverer",
    "FontRegistrar",
    "is_font_file",
    "parse_font_name",
]
