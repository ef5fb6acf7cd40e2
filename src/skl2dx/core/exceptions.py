# src/skl2dx/core/exceptions.py
"""Exceptions raised by the skeleton to OpenDX conversion."""


class Skl2DXError(Exception):
    """Base class for all conversion errors."""


class SkeletonFormatError(Skl2DXError, ValueError):
    """Raised when a skeleton file cannot be parsed."""

    def __init__(self, message: str, path: str = "", line_number: int = 0):
        self.path = path
        self.line_number = line_number
        location = ""
        if path:
            location = f"{path}:{line_number}: " if line_number else f"{path}: "
        super().__init__(f"{location}{message}")


class UnknownElementError(Skl2DXError, KeyError):
    """Raised when an element name or atomic number is not in the element table."""

    def __init__(self, element):
        self.element = element
        super().__init__(element)

    def __str__(self) -> str:
        return f"Unknown element: {self.element!r}"


class OutputFileError(Skl2DXError, OSError):
    """Raised when an output document cannot be opened for writing."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(path, reason)

    def __str__(self) -> str:
        message = f"Unable to open {self.path} for writing"
        return f"{message}: {self.reason}" if self.reason else message
