"""Discovery of font files and nested bundles.

This module lists a bundle directory, turns font-like entries into
FontDescriptor values and finds nested bundles to descend into.
"""

from pathlib import Path

from fontblaster.config import DiscoveryConfig
from fontblaster.core.naming import is_font_file, parse_font_name
from fontblaster.domain import BlastReport, FontDescriptor, SkippedFont
from fontblaster.exceptions import ContainerAccessError, DescriptorError
from fontblaster.io import ResourceBundle
from fontblaster.utils import DiagnosticsSink


class FontDiscoverer:
    """Finds font candidates and nested bundles inside a bundle.

    Example:
        discoverer = FontDiscoverer(sink=MemorySink())
        descriptors, bundles = discoverer.scan(Path("App/Resources"))
    """

    def __init__(
        self,
        sink: DiagnosticsSink,
        config: DiscoveryConfig | None = None,
    ) -> None:
        self._sink = sink
        self.config = config or DiscoveryConfig()

    def list_container(self, path: Path) -> list[str]:
        """List a bundle's entries.

        Raises:
            ContainerAccessError: If the bundle cannot be listed
        """
        return ResourceBundle(path).contents()

    def scan(
        self,
        path: Path,
        report: BlastReport | None = None,
    ) -> tuple[list[FontDescriptor], list[Path]]:
        """List a bundle once and split it into fonts and nested bundles.

        An unreadable bundle is logged and contributes nothing.

        Args:
            path: Bundle directory
            report: Report receiving container errors and invalid names

        Returns:
            Tuple of (font descriptors, nested bundle paths), both in
            listing order
        """
        path = Path(path)
        try:
            contents = self.list_container(path)
        except ContainerAccessError as e:
            self._sink.emit(
                f"There was an error loading fonts from the bundle. "
                f"Path: {path}. Error: {e.reason}",
                failure=True,
                path=str(path),
            )
            if report is not None:
                report.record_container_error(path, e.reason)
            return [], []

        fonts = self.fonts_from_contents(path, contents, report)
        if not fonts:
            self._sink.emit(
                f"No fonts were found in the bundle path: {path}.",
                path=str(path),
            )
        return fonts, self.nested_bundles(path, contents)

    def discover(
        self,
        path: Path,
        report: BlastReport | None = None,
    ) -> list[FontDescriptor]:
        """Return the font descriptors directly inside a bundle."""
        fonts, _ = self.scan(path, report)
        return fonts

    def fonts_from_contents(
        self,
        path: Path,
        contents: list[str],
        report: BlastReport | None = None,
    ) -> list[FontDescriptor]:
        """Build descriptors for the font entries of a listing."""
        fonts: list[FontDescriptor] = []
        for name in contents:
            if not is_font_file(name):
                continue
            try:
                base_name, extension = parse_font_name(name)
                fonts.append(FontDescriptor(path, base_name, extension))
            except DescriptorError as e:
                self._sink.emit(
                    f"Skipping '{name}': {e}",
                    failure=True,
                    path=str(path),
                    error_type=type(e).__name__,
                )
                if report is not None:
                    report.record(
                        SkippedFont(
                            container_path=path,
                            reason=str(e),
                            error_type=type(e).__name__,
                            file_name=name,
                        )
                    )
        return fonts

    def nested_bundles(self, path: Path, contents: list[str]) -> list[Path]:
        """Return the nested bundle paths of a listing."""
        marker = self.config.bundle_marker
        return [path / name for name in contents if marker in name]
