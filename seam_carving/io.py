"""
Image loading and saving between files and uint8 tensors (C, H, W).
"""

from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image

from .errors import ImageReadError, ImageWriteError

PathLike = Union[str, Path]


def load_image(path: PathLike, device='cpu') -> torch.Tensor:
    """Load an image file as a uint8 RGB tensor (3, H, W)."""
    try:
        with Image.open(path) as img:
            img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    except OSError as ex:
        # also covers PIL.UnidentifiedImageError
        raise ImageReadError(path, str(ex)) from ex
    img_tensor = torch.from_numpy(img_array).permute(2, 0, 1).contiguous().to(device)
    return img_tensor


def save_image(tensor: torch.Tensor, path: PathLike):
    """
    Save a uint8 tensor (C, H, W) or (H, W) as an image file.

    Missing parent directories are created. The format follows the file
    extension; use PNG for a lossless result.
    """
    path = Path(path)
    if tensor.dim() == 3:
        img_array = tensor.permute(1, 2, 0).cpu().numpy()
        if img_array.shape[2] == 1:
            img_array = img_array[:, :, 0]
    else:
        img_array = tensor.cpu().numpy()
    img_array = np.ascontiguousarray(img_array.clip(0, 255).astype(np.uint8))

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(img_array).save(path)
    except (OSError, ValueError) as ex:
        raise ImageWriteError(path, str(ex)) from ex
