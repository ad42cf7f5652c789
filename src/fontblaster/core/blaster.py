"""Orchestration of bundle discovery and font registration.

This module coordinates the full loading workflow:

- BundleFontLoader: instance pipeline returning a BlastReport per call
- FontBlaster: process-wide facade with a shared loaded-fonts list and
  a global debug switch

Neither class takes locks. Running blasts from several threads at once
races on the shared list and on the process font manager.
"""

import time
from collections.abc import Callable
from pathlib import Path
from typing import ClassVar

from fontblaster.config import BlasterSettings, get_default_settings
from fontblaster.core.discovery import FontDiscoverer
from fontblaster.core.registrar import FontRegistrar
from fontblaster.domain import BlastReport
from fontblaster.io import FontToolsDecoder, default_bundle_path, get_font_manager
from fontblaster.utils import DiagnosticsSink, StructlogSink


class BundleFontLoader:
    """Loads every font in a bundle tree.

    Fonts directly inside a bundle are loaded first, then each nested
    bundle is visited depth-first in listing order.

    Example:
        loader = BundleFontLoader(sink=MemorySink())
        report = loader.blast(Path("App/Resources"))
        print(report.loaded_fonts)
    """

    def __init__(
        self,
        discoverer: FontDiscoverer | None = None,
        registrar: FontRegistrar | None = None,
        settings: BlasterSettings | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            discoverer: Font discoverer (built from settings if None)
            registrar: Font registrar (fontTools decoder and the process
                font manager if None)
            settings: Library settings (defaults if None)
            sink: Diagnostics sink (structlog sink gated by
                settings.logging.debug_enabled if None)
        """
        self.settings = settings or get_default_settings()
        self.sink = sink or StructlogSink(
            enabled=self.settings.logging.debug_enabled,
            tag=self.settings.logging.tag,
        )
        self.discoverer = discoverer or FontDiscoverer(
            self.sink, self.settings.discovery
        )
        self.registrar = registrar or FontRegistrar(
            FontToolsDecoder(), get_font_manager(), self.sink
        )

    def blast(self, root: Path | str | None = None) -> BlastReport:
        """Load all fonts in a bundle and its nested bundles.

        Args:
            root: Bundle directory (the application's own directory if None)

        Returns:
            BlastReport with one outcome per font candidate
        """
        root_path = Path(root) if root is not None else default_bundle_path()
        report = BlastReport(root=root_path)
        report.start_time = time.time()

        self._blast_bundle(root_path, report, depth=0, visited=set())

        report.end_time = time.time()
        return report

    def _blast_bundle(
        self,
        path: Path,
        report: BlastReport,
        depth: int,
        visited: set[Path],
    ) -> None:
        config = self.settings.discovery
        if config.detect_cycles:
            resolved = path.resolve()
            if resolved in visited:
                self.sink.emit(
                    f"Skipping already visited bundle: {path}.",
                    path=str(path),
                )
                return
            visited.add(resolved)

        fonts, bundles = self.discoverer.scan(path, report)
        for descriptor in fonts:
            report.record(self.registrar.load(descriptor))

        if not bundles:
            return
        if config.max_depth is not None and depth >= config.max_depth:
            self.sink.emit(
                f"Not descending into {len(bundles)} nested bundle(s) of {path}: "
                f"maximum depth {config.max_depth} reached.",
                path=str(path),
            )
            return

        for bundle_path in bundles:
            self._blast_bundle(bundle_path, report, depth + 1, visited)


class FontBlaster:
    """Process-wide entry point for loading bundled fonts.

    debug_enabled toggles diagnostic output for every subsequent blast.
    loaded_fonts accumulates the PostScript names of all fonts registered
    since process start; it is never deduplicated or cleared here.

    Example:
        FontBlaster.debug_enabled = True
        FontBlaster.blast("App/Resources", completion=print)
    """

    debug_enabled: ClassVar[bool] = False
    loaded_fonts: ClassVar[list[str]] = []

    @classmethod
    def blast(
        cls,
        path: Path | str | None = None,
        completion: Callable[[list[str]], None] | None = None,
    ) -> BlastReport:
        """Load all fonts found in a bundle.

        Args:
            path: Bundle directory (the application's own directory if None)
            completion: Called once with a copy of loaded_fonts when done

        Returns:
            BlastReport for this call
        """
        sink = StructlogSink(enabled=lambda: cls.debug_enabled)
        registrar = FontRegistrar(FontToolsDecoder(), get_font_manager(), sink)
        loader = BundleFontLoader(registrar=registrar, sink=sink)

        report = loader.blast(path)
        cls.loaded_fonts.extend(report.loaded_fonts)

        if completion is not None:
            completion(list(cls.loaded_fonts))
        return report
