"""Loading and registration of individual fonts.

FontRegistrar takes one FontDescriptor through resolution, reading,
decoding and registration. Any failure is logged and returned as a
SkippedFont so the remaining fonts still load.
"""

from pathlib import Path

from fontblaster.domain import FontDescriptor, FontOutcome, LoadedFont, SkippedFont
from fontblaster.exceptions import (
    FontDecodeError,
    FontLoadError,
    FontRegistrationError,
    ResourceResolutionError,
)
from fontblaster.io import FontDecoder, FontManager, ResourceBundle
from fontblaster.utils import DiagnosticsSink


class FontRegistrar:
    """Loads font files and registers them with a font manager."""

    def __init__(
        self,
        decoder: FontDecoder,
        manager: FontManager,
        sink: DiagnosticsSink,
    ) -> None:
        self._decoder = decoder
        self._manager = manager
        self._sink = sink

    def resolve(self, descriptor: FontDescriptor) -> Path:
        """Resolve a descriptor to its file.

        Raises:
            ResourceResolutionError: If the file is not in the bundle
        """
        bundle = ResourceBundle(descriptor.container_path)
        url = bundle.url_for_resource(descriptor.base_name, descriptor.extension)
        if url is None:
            raise ResourceResolutionError(
                descriptor.base_name,
                descriptor.extension,
                str(descriptor.container_path),
            )
        return url

    def read(self, descriptor: FontDescriptor, path: Path) -> bytes:
        """Read the font bytes.

        Raises:
            FontDecodeError: If the file cannot be read
        """
        try:
            return path.read_bytes()
        except OSError as e:
            raise FontDecodeError(descriptor.base_name, e.strerror or str(e)) from e

    def load(self, descriptor: FontDescriptor) -> FontOutcome:
        """Load and register one font.

        Args:
            descriptor: Font candidate to load

        Returns:
            LoadedFont on success, SkippedFont with the failure reason
            otherwise
        """
        try:
            path = self.resolve(descriptor)
            data = self.read(descriptor, path)
            handle = self._decoder.decode(data, descriptor.base_name)
            postscript_name = self._manager.register(handle)
        except FontLoadError as e:
            message = self._failure_message(descriptor, e)
            self._sink.emit(
                message,
                failure=True,
                font=descriptor.file_name,
                error_type=type(e).__name__,
            )
            return self._skipped(descriptor, message, type(e).__name__)

        if postscript_name is None:
            message = f"Font '{descriptor.base_name}' has no PostScript name."
            self._sink.emit(message, failure=True, font=descriptor.file_name)
            return self._skipped(descriptor, message, "MissingPostScriptName")

        self._sink.emit(
            f"Successfully loaded font: '{postscript_name}'.",
            font=descriptor.file_name,
        )
        return LoadedFont(
            descriptor=descriptor,
            postscript_name=postscript_name,
            path=path,
        )

    @staticmethod
    def _failure_message(descriptor: FontDescriptor, error: FontLoadError) -> str:
        if isinstance(error, FontRegistrationError):
            return f"Failed to load font '{descriptor.base_name}': {error.description}"
        return str(error)

    @staticmethod
    def _skipped(descriptor: FontDescriptor, reason: str, error_type: str) -> SkippedFont:
        return SkippedFont(
            container_path=descriptor.container_path,
            reason=reason,
            error_type=error_type,
            descriptor=descriptor,
            file_name=descriptor.file_name,
        )
