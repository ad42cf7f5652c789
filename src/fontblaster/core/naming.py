"""File name classification and parsing for font resources."""

from fontblaster.domain.font import SupportedExtension
from fontblaster.exceptions import FontNameError

FONT_EXTENSIONS: tuple[str, ...] = tuple(ext.value for ext in SupportedExtension)


def is_font_file(name: str) -> bool:
    """Return True if the name contains a supported font extension.

    Matching is by substring, not suffix: "weird.ttf.bak" and "a.ttfx"
    are both candidates. Candidates whose parsed extension is not a
    supported type, such as "a.ttfx", are later skipped when their
    FontDescriptor is built.
    """
    return any(ext in name for ext in FONT_EXTENSIONS)


def parse_font_name(name: str) -> tuple[str, str]:
    """Split a file name into its base name and extension.

    Only the first two dot-separated components are used, so
    "My.Font.ttf" parses as ("My", "Font"). Empty components are dropped.

    Args:
        name: File name from a bundle listing

    Returns:
        Tuple of (base name, extension without the dot)

    Raises:
        FontNameError: If fewer than two components remain
    """
    components = [part for part in name.split(".") if part]
    if len(components) < 2:
        raise FontNameError(name)
    return components[0], components[1]
