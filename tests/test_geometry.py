"""Tests for resize, rotate, flip and crop."""

import numpy as np
import pytest
from engines.geometry import (
    compute_fit,
    crop,
    fliph,
    flipv,
    resize,
    resize_fast,
    rotate90,
    rotate180,
    rotate270,
)
from models import InvalidDimensions, OutOfBounds, PixelBuffer
from utils.metrics import compute_psnr_ssim
from utils.test_images import generate_checkerboard, generate_gradient, generate_noise, generate_thin_stripes

RGBW = [255, 0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255, 255, 255, 255, 255]


def _assert_invariant(buffer):
    assert len(buffer.to_raw()) == buffer.width * buffer.height * 4


def test_rotate90_layout():
    """Clockwise: top-left goes to top-right."""
    buffer = PixelBuffer(2, 2, RGBW)
    rotated = rotate90(buffer)
    assert rotated.get_pixel(1, 0) == (255, 0, 0, 255)
    assert rotated.get_pixel(0, 0) == (0, 0, 255, 255)
    assert rotated.get_pixel(1, 1) == (0, 255, 0, 255)


def test_rotations_swap_dimensions():
    buffer = generate_noise(5, 3)
    assert rotate90(buffer).dimensions == (3, 5)
    assert rotate270(buffer).dimensions == (3, 5)
    assert rotate180(buffer).dimensions == (5, 3)


def test_rotation_cycles():
    buffer = generate_noise(7, 4, seed=2)
    assert rotate90(rotate90(rotate90(rotate90(buffer)))) == buffer
    assert rotate180(rotate180(buffer)) == buffer
    assert rotate90(rotate270(buffer)) == buffer
    assert rotate90(rotate90(buffer)) == rotate180(buffer)


def test_rotate180_reverses_pixels():
    buffer = generate_noise(6, 3, seed=4)
    expected = buffer.pixels[::-1, ::-1]
    assert np.array_equal(rotate180(buffer).pixels, expected)


def test_flips_are_involutions():
    buffer = generate_noise(5, 4, seed=6)
    assert fliph(fliph(buffer)) == buffer
    assert flipv(flipv(buffer)) == buffer
    assert fliph(buffer).get_pixel(0, 0) == buffer.get_pixel(4, 0)
    assert flipv(buffer).get_pixel(0, 0) == buffer.get_pixel(0, 3)
    assert fliph(flipv(buffer)) == rotate180(buffer)


def test_transforms_do_not_alias_input():
    buffer = generate_noise(4, 4, seed=8)
    before = buffer.to_raw()
    for transform in (rotate90, rotate180, rotate270, fliph, flipv):
        out = transform(buffer)
        out.set_pixel(0, 0, 1, 2, 3, 4)
        _assert_invariant(out)
    assert buffer.to_raw() == before


def test_crop_full_rectangle_is_identity():
    buffer = generate_noise(6, 5)
    assert crop(buffer, 0, 0, 6, 5) == buffer


def test_crop_extracts_sub_rectangle():
    buffer = generate_noise(6, 5, seed=9)
    sub = crop(buffer, 2, 1, 3, 2)
    assert sub.dimensions == (3, 2)
    assert sub.get_pixel(0, 0) == buffer.get_pixel(2, 1)
    assert sub.get_pixel(2, 1) == buffer.get_pixel(4, 2)
    before = buffer.to_raw()
    sub.set_pixel(0, 0, 0, 0, 0, 0)
    assert buffer.to_raw() == before


@pytest.mark.parametrize('rect', [(1, 0, 6, 5), (0, 1, 6, 5), (5, 0, 2, 1), (-1, 0, 2, 2), (0, 4, 1, 2)])
def test_crop_out_of_bounds(rect):
    buffer = generate_noise(6, 5)
    with pytest.raises(OutOfBounds) as exc_info:
        crop(buffer, *rect)
    assert exc_info.value.request == rect
    assert exc_info.value.bounds == (6, 5)


def test_crop_empty_rectangle():
    with pytest.raises(InvalidDimensions):
        crop(generate_noise(4, 4), 0, 0, 0, 2)


def test_resize_fast_nearest_neighbor():
    buffer = PixelBuffer(2, 2, RGBW)
    up = resize_fast(buffer, 4, 4)
    assert up.dimensions == (4, 4)
    assert up.get_pixel(1, 1) == (255, 0, 0, 255)
    assert up.get_pixel(3, 0) == (0, 255, 0, 255)
    assert up.get_pixel(0, 3) == (0, 0, 255, 255)
    assert resize_fast(up, 2, 2) == buffer


def test_resize_fast_only_uses_source_colors():
    stripes = generate_thin_stripes(16, stripe_width=1)
    small = resize_fast(stripes, 5, 7)
    colors = {tuple(p) for p in small.pixels.reshape(-1, 4)}
    assert colors <= {(200, 60, 60, 255), (60, 180, 200, 255)}


@pytest.mark.parametrize('size', [(32, 16), (7, 40), (1, 1), (100, 3)])
def test_resize_dimensions_and_invariant(size):
    buffer = generate_gradient(20, 12)
    out = resize(buffer, *size)
    assert out.dimensions == size
    _assert_invariant(out)


def test_resize_same_size_is_copy():
    buffer = generate_noise(9, 9)
    out = resize(buffer, 9, 9)
    assert out == buffer
    out.set_pixel(0, 0, 0, 0, 0, 0)
    assert resize(buffer, 9, 9) == buffer


def test_resize_is_deterministic():
    buffer = generate_noise(40, 30, seed=11)
    assert resize(buffer, 17, 53) == resize(buffer, 17, 53)


def test_resize_constant_color():
    buffer = PixelBuffer.blank(10, 6, (12, 34, 56, 78))
    assert resize(buffer, 25, 4) == PixelBuffer.blank(25, 4, (12, 34, 56, 78))


def test_lanczos_downscale_tracks_gradient():
    """Halving a gradient stays close to the gradient rendered at half size."""
    image = generate_gradient(128, 128)
    reference = generate_gradient(64, 64)
    smooth = compute_psnr_ssim(reference, resize(image, 64, 64))['psnr_rgb']
    assert smooth > 35.0


def test_resize_fit_keeps_aspect():
    buffer = generate_checkerboard(size=40)
    wide = resize(generate_gradient(40, 20), 100, 100, fit=True)
    assert wide.dimensions == (100, 50)
    assert resize(buffer, 10, 30, fit=True).dimensions == (10, 10)
    assert compute_fit(40, 20, 100, 100) == (100, 50)


@pytest.mark.parametrize('fn', [resize, resize_fast])
def test_resize_rejects_empty_target(fn):
    with pytest.raises(InvalidDimensions):
        fn(generate_noise(4, 4), 0, 3)
