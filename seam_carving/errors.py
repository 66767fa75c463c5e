"""
Exceptions raised by the seam carving engine and its image I/O helpers.
"""

from typing import Tuple


class SeamCarvingError(ValueError):
    """Base class for invalid inputs to the carving engine."""


class InvalidDimensions(SeamCarvingError):
    """Image or energy map has an unsupported rank or a zero-length side."""

    def __init__(self, shape: Tuple[int, ...], reason: str = "expected H >= 1 and W >= 1"):
        self.shape = tuple(shape)
        super().__init__(f"Invalid dimensions {self.shape}: {reason}")


class TooManySeams(SeamCarvingError):
    """Requested seam count would leave the image with no columns."""

    def __init__(self, n_seams: int, width: int):
        self.n_seams = n_seams
        self.width = width
        super().__init__(
            f"Cannot remove {n_seams} seam(s) from an image of width {width}; "
            f"need 0 <= n_seams < {width}")


class InvalidSeam(SeamCarvingError):
    """Seam does not fit the image it is removed from."""


class ImageReadError(OSError):
    """Image file is missing or cannot be decoded."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not open image '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ImageWriteError(OSError):
    """Image could not be encoded or written to disk."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Failed to save {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
