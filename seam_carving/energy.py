"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

For images, we use gradient magnitude (Avidan & Shamir 2007).
"""

import torch
import torch.nn.functional as F

from .errors import InvalidDimensions

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Same weights in 14-bit fixed point, summing to 1 << 14. 8-bit images use
# these so luminance is an exact integer, as an 8-bit RGB -> gray conversion gives.
LUMA_WEIGHTS_FIXED = (4899, 9617, 1868)
LUMA_SHIFT = 14

SOBEL_X = ((-1.0, 0.0, 1.0),
           (-2.0, 0.0, 2.0),
           (-1.0, 0.0, 1.0))

SOBEL_Y = ((-1.0, -2.0, -1.0),
           ( 0.0,  0.0,  0.0),
           ( 1.0,  2.0,  1.0))


def to_grayscale(image: torch.Tensor) -> torch.Tensor:
    """
    Project an image to a single float64 luminance channel.

    uint8 RGB images are converted with rounded fixed-point BT.601 weights,
    so the result holds whole numbers in [0, 255]. Other dtypes use the
    floating-point weights directly.

    Args:
        image: RGB image tensor (3, H, W), single channel (1, H, W)
               or grayscale (H, W)

    Returns:
        Luminance (H, W) as float64
    """
    if image.dim() == 2:
        gray = image.to(torch.float64)
    elif image.dim() == 3 and image.shape[0] == 3:
        if image.dtype == torch.uint8:
            rgb = image.to(torch.int64)
            wr, wg, wb = LUMA_WEIGHTS_FIXED
            half = 1 << (LUMA_SHIFT - 1)
            gray = (wr * rgb[0] + wg * rgb[1] + wb * rgb[2] + half) >> LUMA_SHIFT
            gray = gray.to(torch.float64)
        else:
            rgb = image.to(torch.float64)
            wr, wg, wb = LUMA_WEIGHTS
            gray = wr * rgb[0] + wg * rgb[1] + wb * rgb[2]
    elif image.dim() == 3 and image.shape[0] == 1:
        gray = image[0].to(torch.float64)
    else:
        raise InvalidDimensions(tuple(image.shape),
                                "expected (3, H, W), (1, H, W) or (H, W)")

    H, W = gray.shape
    if H < 1 or W < 1:
        raise InvalidDimensions(tuple(image.shape))
    return gray


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    Uses L1 norm of Sobel image gradients on the luminance channel:
    E_I(i,j) = |Gx(i,j)| + |Gy(i,j)|

    Samples outside the image take the value of the nearest edge sample,
    so a flat image has zero energy everywhere, borders included.

    Args:
        image: RGB image tensor (3, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W), float64
    """
    gray = to_grayscale(image)

    sobel_x = torch.tensor(SOBEL_X, dtype=torch.float64, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)

    sobel_y = torch.tensor(SOBEL_Y, dtype=torch.float64, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    # (H, W) -> (1, 1, H + 2, W + 2)
    padded = F.pad(gray.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode='replicate')

    grad_x = F.conv2d(padded, sobel_x)
    grad_y = F.conv2d(padded, sobel_y)

    energy = torch.abs(grad_x) + torch.abs(grad_y)
    return energy[0, 0]
