"""Resource bundle access.

A bundle is a directory holding an application's packaged resources.
ResourceBundle lists a bundle's entries and resolves named resources
inside it.
"""

import sys
from pathlib import Path

from fontblaster.exceptions import ContainerAccessError


def default_bundle_path() -> Path:
    """Return the resource directory of the running application.

    Frozen applications (PyInstaller) unpack their resources into
    ``sys._MEIPASS``; otherwise the directory of the launched script is
    used, falling back to the current working directory.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    if sys.argv and sys.argv[0]:
        script = Path(sys.argv[0]).resolve()
        if script.exists():
            return script.parent
    return Path.cwd()


class ResourceBundle:
    """A directory of packaged resources.

    Example:
        bundle = ResourceBundle(Path("App/Resources"))
        for name in bundle.contents():
            print(name)
        url = bundle.url_for_resource("Arial", "ttf")
    """

    def __init__(self, path: Path) -> None:
        """Initialize the bundle.

        Args:
            path: Bundle directory
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def contents(self) -> list[str]:
        """List entry names in the bundle, sorted by name.

        Raises:
            ContainerAccessError: If the bundle does not exist, is not a
                directory or cannot be read
        """
        try:
            names = [entry.name for entry in self._path.iterdir()]
        except OSError as e:
            raise ContainerAccessError(str(self._path), e.strerror or str(e)) from e
        return sorted(names)

    def url_for_resource(self, name: str, extension: str) -> Path | None:
        """Resolve a resource file by base name and extension.

        A bundle that can be listed but not searched resolves nothing.

        Returns:
            Path to the resource, or None if no such file exists
        """
        candidate = self._path / f"{name}.{extension}"
        try:
            found = candidate.is_file()
        except OSError:
            return None
        return candidate if found else None

    def __repr__(self) -> str:
        return f"ResourceBundle({str(self._path)!r})"
