"""Custom exceptions for pathlex."""


class PathlexError(Exception):
    """Base exception for pathlex."""


class PathError(PathlexError):
    """A path could not be processed lexically."""

    message = "path error"

    def __init__(self, path: object = None):
        self.path = None if path is None else str(path)
        if not self.path:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {self.path}")


class EmptyPathError(PathError):
    """Input path (or a required portion of it) is empty."""

    message = "path empty"


class MultipleHomeSymbolsError(PathError):
    """More than one ~ in the input."""

    message = "multiple home symbols for path"


class InvalidExpansionError(PathError):
    """A ~ in an illegal position or a malformed $VAR reference."""

    message = "invalid expansion for path"


class ComponentNotFoundError(PathError):
    """first/last called on a path without components."""

    message = "component not found for path"


class ParentNotFoundError(PathError):
    """Walked past the top of a path that has no parent."""

    message = "parent not found for path"


class FileNameNotFoundError(PathError):
    """Path has no final named segment."""

    message = "filename not found for path"


class ExtensionNotFoundError(PathError):
    """Final segment has no extension."""

    message = "path extension not found"


class HomeNotFoundError(PathlexError):
    """Home directory could not be determined."""

    def __init__(self, detail: str = "home directory not set"):
        super().__init__(detail)


class VariableNotFoundError(PathlexError):
    """Environment variable is not present."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"environment variable not found: {name}")


class ConfigValidationError(PathlexError):
    """Config file is invalid or malformed."""


class ConfigVersionError(PathlexError):
    """Config version is unsupported."""

