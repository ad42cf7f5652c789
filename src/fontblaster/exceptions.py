"""Exception hierarchy for FontBlaster."""


class FontBlasterError(Exception):
    """Base exception for all FontBlaster errors."""

    pass


class ContainerAccessError(FontBlasterError):
    """A bundle directory could not be listed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access bundle '{path}': {reason}")


class DescriptorError(FontBlasterError):
    """Errors building a font descriptor from a file name."""

    pass


class FontNameError(DescriptorError):
    """File name cannot be split into a base name and an extension."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot parse font file name '{name}'")


class UnsupportedFontError(DescriptorError):
    """Descriptor extension is not one of the supported font types."""

    def __init__(self, name: str, extension: str) -> None:
        self.name = name
        self.extension = extension
        super().__init__(
            f"Unsupported font extension '{extension}' for '{name}'"
        )


class FontLoadError(FontBlasterError):
    """Errors loading or registering a single font."""

    pass


class ResourceResolutionError(FontLoadError):
    """Font resource does not resolve inside its bundle."""

    def __init__(self, name: str, extension: str, container: str) -> None:
        self.name = name
        self.extension = extension
        self.container = container
        super().__init__(
            f"Could not unwrap the file URL for the resource with name: "
            f"{name} and extension {extension}"
        )


class FontDecodeError(FontLoadError):
    """Font bytes could not be read or decoded."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to load font '{name}': {reason}")


class FontRegistrationError(FontLoadError):
    """Font manager rejected the font."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        super().__init__(f"Failed to load font '{name}': {description}")
