"""Unit tests for single-font loading and registration."""

from pathlib import Path
from unittest.mock import Mock

from fontblaster.core.registrar import FontRegistrar
from fontblaster.domain import FontDescriptor, LoadedFont, SkippedFont


class TestFontRegistrar:
    """Tests for FontRegistrar class."""

    def test_load_success(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test a resolvable, decodable font is registered."""
        (tmp_path / "Arial.ttf").write_text("ArialMT")
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Arial", "ttf"))

        assert isinstance(outcome, LoadedFont)
        assert outcome.postscript_name == "ArialMT"
        assert outcome.path == tmp_path / "Arial.ttf"
        assert fake_manager.registered == ["ArialMT"]
        assert sink.messages == ["Successfully loaded font: 'ArialMT'."]

    def test_unresolvable_resource(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test a missing file is skipped without decoding."""
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "weird", "ttf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "ResourceResolutionError"
        assert fake_decoder.calls == []
        assert sink.failures[0].message == (
            "Could not unwrap the file URL for the resource with name: "
            "weird and extension ttf"
        )

    def test_decode_failure(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test undecodable bytes are skipped without registering."""
        (tmp_path / "Broken.ttf").write_text("BAD")
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Broken", "ttf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "FontDecodeError"
        assert fake_manager.registered == []
        assert sink.failures[0].message == "Failed to load font 'Broken': not a font binary"

    def test_read_failure(self, tmp_path: Path, fake_decoder, fake_manager, sink, monkeypatch) -> None:
        """Test an I/O error while reading is reported as a decode failure."""
        (tmp_path / "Locked.ttf").write_text("Locked")
        monkeypatch.setattr(Path, "read_bytes", Mock(side_effect=PermissionError(13, "Permission denied")))
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Locked", "ttf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "FontDecodeError"
        assert "Permission denied" in outcome.reason

    def test_registration_failure(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test a rejected font is logged with the manager's description."""
        (tmp_path / "Dup.ttf").write_text("Dup-Regular")
        fake_manager.rejected.add("Dup-Regular")
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Dup", "ttf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "FontRegistrationError"
        assert sink.failures[0].message == (
            "Failed to load font 'Dup': The font is already registered"
        )

    def test_missing_postscript_name(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test a font without a PostScript name is not reported as loaded."""
        (tmp_path / "Nameless.otf").write_text("")
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Nameless", "otf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "MissingPostScriptName"

    def test_skipped_outcome_carries_descriptor(self, tmp_path: Path, fake_decoder, fake_manager, sink) -> None:
        """Test skipped outcomes identify the font."""
        descriptor = FontDescriptor(tmp_path, "Gone", "otf")
        outcome = FontRegistrar(fake_decoder, fake_manager, sink).load(descriptor)
        assert outcome.descriptor == descriptor
        assert outcome.file_name == "Gone.otf"
        assert outcome.container_path == tmp_path

    def test_unsearchable_bundle_is_skipped(self, tmp_path: Path, fake_decoder, fake_manager, sink, monkeypatch) -> None:
        """Test a permission error while resolving becomes a skipped font."""
        (tmp_path / "Y.otf").write_text("Yttrium-Regular")
        monkeypatch.setattr(
            Path, "is_file", Mock(side_effect=PermissionError(13, "Permission denied"))
        )
        registrar = FontRegistrar(fake_decoder, fake_manager, sink)

        outcome = registrar.load(FontDescriptor(tmp_path, "Y", "otf"))

        assert isinstance(outcome, SkippedFont)
        assert outcome.error_type == "ResourceResolutionError"
        assert fake_manager.registered == []
