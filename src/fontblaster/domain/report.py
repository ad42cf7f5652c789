"""Per-invocation results of a blast.

Each font handled by the registrar ends as exactly one tagged outcome:
LoadedFont when the font manager accepted it, SkippedFont otherwise.
BlastReport collects outcomes in the order they were produced.
"""

from dataclasses import dataclass, field
from pathlib import Path

from fontblaster.domain.font import FontDescriptor


@dataclass(frozen=True)
class LoadedFont:
    """A font registered with the font manager."""

    descriptor: FontDescriptor
    postscript_name: str
    path: Path

    @property
    def is_loaded(self) -> bool:
        return True


@dataclass(frozen=True)
class SkippedFont:
    """A font candidate that was not registered.

    Attributes:
        container_path: Bundle the candidate was found in
        reason: Human-readable failure description
        error_type: Name of the exception class that caused the skip
        descriptor: Descriptor, if one could be built from the file name
        file_name: Listing entry the candidate came from
    """

    container_path: Path
    reason: str
    error_type: str
    descriptor: FontDescriptor | None = None
    file_name: str | None = None

    @property
    def is_loaded(self) -> bool:
        return False


FontOutcome = LoadedFont | SkippedFont


@dataclass
class BlastReport:
    """Results of one blast, in insertion order."""

    root: Path
    outcomes: list[FontOutcome] = field(default_factory=list)
    container_errors: list[tuple[Path, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    def record(self, outcome: FontOutcome) -> None:
        """Append a font outcome."""
        self.outcomes.append(outcome)

    def record_container_error(self, path: Path, reason: str) -> None:
        """Append a bundle that could not be listed."""
        self.container_errors.append((path, reason))

    @property
    def loaded(self) -> list[LoadedFont]:
        return [o for o in self.outcomes if isinstance(o, LoadedFont)]

    @property
    def skipped(self) -> list[SkippedFont]:
        return [o for o in self.outcomes if isinstance(o, SkippedFont)]

    @property
    def loaded_fonts(self) -> list[str]:
        """PostScript names of registered fonts, in registration order."""
        return [o.postscript_name for o in self.loaded]

    @property
    def loaded_count(self) -> int:
        return len(self.loaded)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def duration_seconds(self) -> float:
        """Calculate blast duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0
