"""
High-level carving function that composes energy, seam search and removal.
"""

import logging
import operator

import torch

from .energy import gradient_magnitude_energy
from .errors import InvalidDimensions, SeamCarvingError, TooManySeams
from .seam import dp_seam, remove_seam, seam_energy

logger = logging.getLogger(__name__)


def carve(image: torch.Tensor, n_seams: int) -> torch.Tensor:
    """
    Reduce image width by removing the n_seams lowest-energy vertical seams.

    Energy is recomputed on the narrower image after every removal, since
    taking out a seam changes the gradients of its neighbours.

    Args:
        image: Image tensor (C, H, W) or (H, W); not modified
        n_seams: Number of seams to remove, 0 <= n_seams < W

    Returns:
        Carved image (C, H, W - n_seams) or (H, W - n_seams)

    Raises:
        InvalidDimensions: image is empty or has an unsupported shape
            or channel count
        SeamCarvingError: n_seams is not an integer
        TooManySeams: n_seams is negative or would remove every column
    """
    if image.dim() not in (2, 3):
        raise InvalidDimensions(tuple(image.shape), "expected (C, H, W) or (H, W)")
    if image.dim() == 3 and image.shape[0] not in (1, 3):
        raise InvalidDimensions(tuple(image.shape), "expected 1 or 3 channels")
    H, W = image.shape[-2:]
    if H < 1 or W < 1:
        raise InvalidDimensions(tuple(image.shape))
    try:
        n_seams = operator.index(n_seams)
    except TypeError:
        raise SeamCarvingError(f"Number of seams must be an integer, got {n_seams!r}") from None
    if n_seams < 0 or n_seams >= W:
        raise TooManySeams(n_seams, W)

    logger.info("Carving %d seam(s): width %d -> %d", n_seams, W, W - n_seams)

    carved = image.clone()

    for i in range(n_seams):
        energy = gradient_magnitude_energy(carved)
        seam = dp_seam(energy)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Seam %d/%d: columns %d..%d, energy %.3f",
                         i + 1, n_seams, seam.min().item(), seam.max().item(),
                         seam_energy(energy, seam))
        carved = remove_seam(carved, seam)

    return carved
