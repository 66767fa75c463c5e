"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_uniform_image(H, W, value=128):
    """Solid gray uint8 image (3, H, W)."""
    return torch.full((3, H, W), value, dtype=torch.uint8)


def make_stripe_image(H, W, col):
    """Black uint8 image with one pure white column."""
    img = torch.zeros(3, H, W, dtype=torch.uint8)
    img[:, :, col] = 255
    return img


def make_column_index_image(H, W):
    """Each pixel stores its own column index in every channel."""
    cols = torch.arange(W, dtype=torch.uint8).view(1, 1, W)
    return cols.expand(3, H, W).clone()


def make_natural_image(H, W, seed=0):
    """Smooth blobs plus noise, a stand-in for a photograph."""
    gen = torch.Generator().manual_seed(seed)
    y = torch.linspace(0, 1, H).view(H, 1)
    x = torch.linspace(0, 1, W).view(1, W)
    base = torch.stack([
        torch.sin(6.0 * x + 2.0 * y),
        torch.cos(4.0 * y - 3.0 * x),
        torch.sin(5.0 * x * y + 1.0),
    ])
    noise = torch.rand(3, H, W, generator=gen) * 0.3
    img = (base + 1.0) / 2.3 + noise
    return (img.clamp(0, 1) * 255).round().to(torch.uint8)


@pytest.fixture
def natural_image():
    """64x64 natural-looking RGB image."""
    return make_natural_image(64, 64)
