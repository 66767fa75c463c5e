"""Tests for image loading and saving."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from PIL import Image
from seam_carving.errors import ImageReadError, ImageWriteError
from seam_carving.io import load_image, save_image

from conftest import make_natural_image


class TestLoadImage:
    def test_loads_rgb_as_channels_first_uint8(self, tmp_path):
        pixels = np.zeros((2, 3, 3), dtype=np.uint8)
        pixels[0, 1] = (10, 20, 30)
        path = tmp_path / 'small.png'
        Image.fromarray(pixels).save(path)

        image = load_image(path)
        assert image.shape == (3, 2, 3)
        assert image.dtype == torch.uint8
        assert image[:, 0, 1].tolist() == [10, 20, 30]

    def test_grayscale_file_is_expanded_to_rgb(self, tmp_path):
        path = tmp_path / 'gray.png'
        Image.fromarray(np.full((4, 5), 77, dtype=np.uint8)).save(path)
        image = load_image(path)
        assert image.shape == (3, 4, 5)
        assert (image == 77).all()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageReadError) as excinfo:
            load_image(tmp_path / 'nope.png')
        assert 'nope.png' in str(excinfo.value)

    def test_not_an_image(self, tmp_path):
        path = tmp_path / 'notes.png'
        path.write_text('hello')
        with pytest.raises(ImageReadError):
            load_image(path)


class TestSaveImage:
    def test_png_is_lossless(self, tmp_path):
        image = make_natural_image(16, 12)
        path = tmp_path / 'out.png'
        save_image(image, path)
        assert torch.equal(load_image(path), image)

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / 'a' / 'b' / 'out.png'
        save_image(make_natural_image(4, 4), path)
        assert path.exists()

    def test_accepts_grayscale(self, tmp_path):
        path = tmp_path / 'gray.png'
        save_image(torch.full((3, 4), 200, dtype=torch.uint8), path)
        with Image.open(path) as img:
            assert img.size == (4, 3)
            assert img.mode == 'L'

    def test_unknown_extension(self, tmp_path):
        with pytest.raises(ImageWriteError):
            save_image(make_natural_image(4, 4), tmp_path / 'out.notaformat')


class TestIoErrors:
    @pytest.mark.parametrize("error_cls", [ImageReadError, ImageWriteError])
    def test_carries_path_and_is_os_error(self, error_cls):
        err = error_cls('some/file.png', 'boom')
        assert isinstance(err, OSError)
        assert err.path == 'some/file.png'
        assert 'some/file.png' in str(err) and 'boom' in str(err)
        assert error_cls.__doc__
