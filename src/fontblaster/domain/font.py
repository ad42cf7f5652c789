"""Font descriptor types.

This module defines the supported font types and the descriptor that
identifies one candidate font file before it is loaded.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from fontblaster.exceptions import UnsupportedFontError


class SupportedExtension(str, Enum):
    """Font types that can be loaded into an application."""

    TRUE_TYPE = ".ttf"
    OPEN_TYPE = ".otf"

    @property
    def suffix(self) -> str:
        """Extension without the leading dot."""
        return self.value.lstrip(".")

    @classmethod
    def suffixes(cls) -> frozenset[str]:
        """All supported extensions without the leading dot."""
        return frozenset(member.suffix for member in cls)


@dataclass(frozen=True)
class FontDescriptor:
    """One candidate font file inside a bundle.

    Attributes:
        container_path: Bundle directory holding the font file
        base_name: File name up to the first dot
        extension: Extension without the leading dot (e.g. "ttf")

    Raises:
        UnsupportedFontError: If the base name is empty or the extension
            is not a supported font type
    """

    container_path: Path
    base_name: str
    extension: str

    def __post_init__(self) -> None:
        if not self.base_name:
            raise UnsupportedFontError(self.file_name, self.extension)
        if self.extension not in SupportedExtension.suffixes():
            raise UnsupportedFontError(self.file_name, self.extension)

    @property
    def file_name(self) -> str:
        """File name the descriptor resolves to."""
        return f"{self.base_name}.{self.extension}"
