"""FontBlaster - Load bundled fonts into an application.

FontBlaster finds TrueType/OpenType font files inside an application's
resource bundle and any nested ``.bundle`` directories, decodes them and
registers each one so it can be referenced by PostScript name.

Example:
    >>> from fontblaster import FontBlaster
    >>> FontBlaster.debug_enabled = True
    >>> FontBlaster.blast("MyApp/Resources", completion=print)
"""

from collections.abc import Callable
from pathlib import Path

from fontblaster.core import BundleFontLoader, FontBlaster
from fontblaster.domain import BlastReport

__version__ = "0.1.0"

__all__ = [
    "BlastReport",
    "BundleFontLoader",
    "FontBlaster",
    "__version__",
    "blast",
]


def blast(
    path: Path | str | None = None,
    completion: Callable[[list[str]], None] | None = None,
) -> BlastReport:
    """Load all fonts found in a bundle. See FontBlaster.blast."""
    return FontBlaster.blast(path, completion)
