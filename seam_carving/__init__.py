"""
Content-aware image width reduction by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import (SeamCarvingError, InvalidDimensions, TooManySeams, InvalidSeam,
                     ImageReadError, ImageWriteError)
from .energy import gradient_magnitude_energy, to_grayscale
from .seam import cumulative_energy, backtrack_seam, dp_seam, seam_energy, remove_seam
from .carving import carve
from .io import load_image, save_image

__all__ = [
    'SeamCarvingError',
    'InvalidDimensions',
    'TooManySeams',
    'InvalidSeam',
    'ImageReadError',
    'ImageWriteError',
    'gradient_magnitude_energy',
    'to_grayscale',
    'cumulative_energy',
    'backtrack_seam',
    'dp_seam',
    'seam_energy',
    'remove_seam',
    'carve',
    'load_image',
    'save_image',
]
