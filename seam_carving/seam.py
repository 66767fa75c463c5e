"""
Seam computation and removal.

Vertical seams are found with dynamic programming over the energy map
(Avidan & Shamir 2007): the cumulative cost table is filled top to bottom,
then the cheapest path is recovered from the last row by backtracking.
"""

import torch
from typing import Tuple

from .errors import InvalidDimensions, InvalidSeam


def _as_energy(energy) -> torch.Tensor:
    energy = torch.as_tensor(energy, dtype=torch.float64)
    if energy.dim() != 2:
        raise InvalidDimensions(tuple(energy.shape), "energy map must be 2D (H, W)")
    H, W = energy.shape
    if H < 1 or W < 1:
        raise InvalidDimensions(tuple(energy.shape))
    return energy


def _as_seam(seam, H: int, W: int) -> torch.Tensor:
    seam = torch.as_tensor(seam, dtype=torch.long)
    if seam.dim() != 1 or seam.shape[0] != H:
        raise InvalidSeam(f"Seam length {tuple(seam.shape)} does not match image height {H}")
    if H > 0 and (seam.min().item() < 0 or seam.max().item() >= W):
        raise InvalidSeam(f"Seam columns must lie in [0, {W - 1}], "
                          f"got [{seam.min().item()}, {seam.max().item()}]")
    return seam


def cumulative_energy(energy) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Fill the cumulative cost and backtrack tables for vertical seams.

    cost[0] = energy[0]
    cost[i, j] = energy[i, j] + min(cost[i-1, j-1], cost[i-1, j], cost[i-1, j+1])

    Neighbours outside the image are excluded. On equal costs the straight
    predecessor wins over the left one, and the left one over the right one.
    Each row is computed in one vectorised step; it only depends on the row
    above, so the result equals the column-by-column definition.

    Args:
        energy: Energy map (H, W)

    Returns:
        cost: Cumulative cost (H, W), float64
        back: Column offset of the chosen predecessor (H, W), int8 in
              {-1, 0, 1}; row 0 is unused and left at 0
    """
    energy = _as_energy(energy)
    H, W = energy.shape

    cost = torch.empty_like(energy)
    back = torch.zeros(H, W, dtype=torch.int8, device=energy.device)
    cost[0] = energy[0]

    for i in range(1, H):
        prev = cost[i - 1]

        # Predecessor costs seen from column j: left is prev[j-1], right is prev[j+1]
        from_left = torch.full((W,), float('inf'), dtype=torch.float64, device=energy.device)
        from_left[1:] = prev[:-1]
        from_right = torch.full((W,), float('inf'), dtype=torch.float64, device=energy.device)
        from_right[:-1] = prev[1:]

        best = prev.clone()
        offset = torch.zeros(W, dtype=torch.int8, device=energy.device)

        take_left = from_left < best
        best = torch.where(take_left, from_left, best)
        offset[take_left] = -1

        take_right = from_right < best
        best = torch.where(take_right, from_right, best)
        offset[take_right] = 1

        cost[i] = energy[i] + best
        back[i] = offset

    return cost, back


def backtrack_seam(cost: torch.Tensor, back: torch.Tensor) -> torch.Tensor:
    """
    Recover the minimum-cost seam from filled DP tables.

    The seam ends at the smallest column index holding the minimum of the
    last cost row.

    Returns:
        Seam (H,) with one column index per row, torch.long
    """
    H = cost.shape[0]
    offsets = back.tolist()

    seam = [0] * H
    seam[H - 1] = int(torch.argmin(cost[H - 1]).item())
    for i in range(H - 2, -1, -1):
        seam[i] = seam[i + 1] + offsets[i + 1][seam[i + 1]]

    return torch.tensor(seam, dtype=torch.long, device=cost.device)


def dp_seam(energy) -> torch.Tensor:
    """
    Find the minimum total energy vertical seam.

    The seam is an 8-connected path from the top row to the bottom row:
    consecutive rows differ by at most one column.

    Args:
        energy: Energy map (H, W); tensors, numpy arrays and nested lists
                are accepted

    Returns:
        Seam indices (H,) with the column index per row
    """
    cost, back = cumulative_energy(energy)
    return backtrack_seam(cost, back)


def seam_energy(energy, seam: torch.Tensor) -> float:
    """
    Total energy along a vertical seam, summed top to bottom.

    Raises InvalidSeam if the seam does not fit the energy map.
    """
    energy = _as_energy(energy)
    seam = _as_seam(seam, *energy.shape)
    rows = torch.arange(energy.shape[0], device=energy.device)
    return float(energy[rows, seam.to(energy.device)].sum().item())


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    Pixels left of the seam keep their column, pixels right of it move one
    column to the left. Values are copied, never modified.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved image with one column removed, same dtype and device
    """
    if image.dim() == 2:
        # Grayscale
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape

    seam = _as_seam(seam, H, W)

    carved = torch.empty(C, H, W - 1, dtype=image.dtype, device=image.device)

    for i, col in enumerate(seam.tolist()):
        carved[:, i, :col] = image[:, i, :col]
        carved[:, i, col:] = image[:, i, col + 1:]

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
