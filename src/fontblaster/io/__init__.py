"""Bundle and font backend I/O for fontblaster.

This module handles filesystem access to resource bundles and the
decoding and registration of font binaries using fonttools.

Key classes:
- ResourceBundle: List bundle contents and resolve resources
- FontToolsDecoder: Decode TTF/OTF bytes into font handles
- ProcessFontManager: In-process registry of loaded fonts
"""

from fontblaster.io.backend import (
    FontDecoder,
    FontHandle,
    FontManager,
    FontToolsDecoder,
    ProcessFontManager,
    get_font_manager,
)
from fontblaster.io.bundle import ResourceBundle, default_bundle_path

__all__ = [
    "FontDecoder",
    "FontHandle",
    "FontManager",
    "FontToolsDecoder",
    "ProcessFontManager",
    "ResourceBundle",
    "default_bundle_path",
    "get_font_manager",
]
