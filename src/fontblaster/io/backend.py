"""Font decoding and registration backends.

The registrar only talks to two narrow capabilities: a decoder turning
raw bytes into a font handle, and a font manager registering handles.
The defaults decode with fontTools and register into an in-process
registry keyed by PostScript name.
"""

import hashlib
from dataclasses import dataclass, field
from io import BytesIO
from typing import Protocol

from fontTools.ttLib import TTFont

from fontblaster.exceptions import FontDecodeError, FontRegistrationError

POSTSCRIPT_NAME_ID = 6


@dataclass
class FontHandle:
    """A decoded font and the bytes it came from."""

    font: TTFont
    data: bytes = field(repr=False)

    @property
    def postscript_name(self) -> str | None:
        """PostScript name from the name table, if present."""
        return self.font["name"].getDebugName(POSTSCRIPT_NAME_ID)

    @property
    def digest(self) -> str:
        return hashlib.sha256(self.data).hexdigest()


class FontDecoder(Protocol):
    def decode(self, data: bytes, name: str = "") -> FontHandle:
        ...


class FontManager(Protocol):
    def register(self, handle: FontHandle) -> str | None:
        ...


class FontToolsDecoder:
    """Decodes TrueType/OpenType binaries with fontTools."""

    REQUIRED_TABLES = ("head", "name")

    def decode(self, data: bytes, name: str = "") -> FontHandle:
        """Decode font bytes.

        Args:
            data: Raw font binary
            name: Font name used in error messages

        Returns:
            FontHandle wrapping the decoded font

        Raises:
            FontDecodeError: If the bytes are not a decodable font
        """
        try:
            font = TTFont(BytesIO(data), lazy=False)
            for tag in self.REQUIRED_TABLES:
                font[tag]
        except Exception as e:
            # fontTools raises TTLibError, KeyError, struct.error and others
            raise FontDecodeError(name, str(e) or type(e).__name__) from e
        return FontHandle(font=font, data=data)


class ProcessFontManager:
    """In-process font registry keyed by PostScript name.

    Registering the same bytes again succeeds and returns the same name.
    A different font claiming a registered name is rejected.
    """

    def __init__(self) -> None:
        self._fonts: dict[str, FontHandle] = {}
        self._unnamed: dict[str, FontHandle] = {}

    def register(self, handle: FontHandle) -> str | None:
        """Register a decoded font.

        Returns:
            The font's PostScript name, or None if it has none

        Raises:
            FontRegistrationError: If another font already holds the name
        """
        name = handle.postscript_name
        if name is None:
            self._unnamed[handle.digest] = handle
            return None

        existing = self._fonts.get(name)
        if existing is not None and existing.digest != handle.digest:
            raise FontRegistrationError(
                name,
                f"A font with PostScript name '{name}' is already registered",
            )
        self._fonts[name] = handle
        return name

    def registered_names(self) -> list[str]:
        return list(self._fonts)

    def lookup(self, name: str) -> FontHandle | None:
        return self._fonts.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._fonts

    def __len__(self) -> int:
        return len(self._fonts) + len(self._unnamed)


_process_font_manager = ProcessFontManager()


def get_font_manager() -> ProcessFontManager:
    """Return the process-wide font manager."""
    return _process_font_manager
