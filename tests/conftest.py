"""Shared fixtures for fontblaster tests."""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontblaster.core import FontBlaster
from fontblaster.exceptions import FontDecodeError, FontRegistrationError
from fontblaster.io import ProcessFontManager
from fontblaster.utils import MemorySink


def _box_glyph(x0: int, y0: int, x1: int, y1: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    return pen.glyph()


def build_font(path: Path, postscript_name: str) -> Path:
    """Write a minimal TrueType font with the given PostScript name."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupGlyf(
        {
            ".notdef": _box_glyph(50, 0, 450, 700),
            "A": _box_glyph(100, 0, 500, 700),
        }
    )
    fb.setupHorizontalMetrics({".notdef": (500, 50), "A": (600, 100)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": postscript_name.split("-")[0],
            "styleName": "Regular",
            "psName": postscript_name,
        }
    )
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def make_font():
    """Factory writing real font files."""
    return build_font


@dataclass
class FakeHandle:
    """Stand-in for a decoded font."""

    postscript_name: str | None


class FakeDecoder:
    """Decoder treating file contents as the PostScript name.

    Contents starting with "BAD" fail to decode; empty contents decode
    to a font without a PostScript name.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def decode(self, data: bytes, name: str = "") -> FakeHandle:
        self.calls.append(name)
        text = data.decode("utf-8").strip()
        if text.startswith("BAD"):
            raise FontDecodeError(name, "not a font binary")
        return FakeHandle(postscript_name=text or None)


class FakeManager:
    """Font manager accepting every name except the rejected ones."""

    def __init__(self, rejected: tuple[str, ...] = ()) -> None:
        self.rejected = set(rejected)
        self.registered: list[str | None] = []

    def register(self, handle: FakeHandle) -> str | None:
        if handle.postscript_name in self.rejected:
            raise FontRegistrationError(
                handle.postscript_name or "", "The font is already registered"
            )
        self.registered.append(handle.postscript_name)
        return handle.postscript_name


@pytest.fixture
def fake_decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture
def fake_manager() -> FakeManager:
    return FakeManager()


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def font_manager(monkeypatch) -> ProcessFontManager:
    """Fresh process font manager used by FontBlaster."""
    manager = ProcessFontManager()
    monkeypatch.setattr("fontblaster.core.blaster.get_font_manager", lambda: manager)
    return manager


@pytest.fixture
def blaster_state(monkeypatch, font_manager):
    """Isolate FontBlaster's process-wide state."""
    monkeypatch.setattr(FontBlaster, "loaded_fonts", [])
    monkeypatch.setattr(FontBlaster, "debug_enabled", False)
    return FontBlaster


@pytest.fixture
def restrict_mode():
    """Drop the search bit of a directory for one test.

    Privileged users bypass directory permissions, so the test is skipped
    unless lookups inside the directory are actually refused.
    """
    changed: list[Path] = []

    def _restrict(directory: Path, mode: int) -> Path:
        directory.chmod(mode)
        changed.append(directory)
        try:
            os.stat(directory / "missing")
        except PermissionError:
            return directory
        except FileNotFoundError:
            pass
        pytest.skip("directory permissions are not enforced for this user")

    yield _restrict

    for directory in changed:
        directory.chmod(0o755)
