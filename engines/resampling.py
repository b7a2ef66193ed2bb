"""Separable resampling and convolution kernels."""

import math
from typing import Callable, Tuple

import cv2
import numpy as np

from utils.constants import BLUR_RADIUS_SIGMAS, LANCZOS_SUPPORT


def lanczos3(x: np.ndarray) -> np.ndarray:
    """Windowed sinc with support radius 3."""
    x = np.abs(x)
    return np.where(x < LANCZOS_SUPPORT, np.sinc(x) * np.sinc(x / LANCZOS_SUPPORT), 0.0)


def compute_weights(
    src_size: int,
    dst_size: int,
    kernel: Callable[[np.ndarray], np.ndarray] = lanczos3,
    support: float = LANCZOS_SUPPORT
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Per-output-sample source indices and normalized weights for one axis.

    When downscaling the kernel is stretched by the scale ratio so every
    source sample contributes. Returns ``(indices, weights)``, both of shape
    ``(dst_size, taps)``; padding taps carry zero weight.
    """
    ratio = src_size / dst_size
    scale = max(ratio, 1.0)
    radius = support * scale

    centers = (np.arange(dst_size) + 0.5) * ratio
    left = np.clip(np.floor(centers - radius).astype(np.intp), 0, src_size - 1)
    right = np.clip(np.ceil(centers + radius).astype(np.intp), left + 1, src_size)

    taps = int(np.max(right - left))
    indices = left[:, None] + np.arange(taps)[None, :]
    valid = indices < right[:, None]
    indices = np.minimum(indices, src_size - 1)

    weights = kernel((indices - centers[:, None] + 0.5) / scale)
    weights = np.where(valid, weights, 0.0)
    totals = weights.sum(axis=1, keepdims=True)
    totals[totals == 0.0] = 1.0
    return indices, weights / totals


def resample_axis(image: np.ndarray, dst_size: int, axis: int) -> np.ndarray:
    """1-D Lanczos pass along axis 0 (rows) or 1 (columns) of a float image."""
    indices, weights = compute_weights(image.shape[axis], dst_size)
    out_shape = list(image.shape)
    out_shape[axis] = dst_size
    out = np.zeros(out_shape, dtype=np.float64)

    for t in range(indices.shape[1]):
        taken = np.take(image, indices[:, t], axis=axis)
        if axis == 1:
            out += taken * weights[None, :, t, None]
        else:
            out += taken * weights[:, t, None, None]
    return out


def lanczos_resample(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize an (H, W, C) uint8 array: horizontal pass, then vertical pass."""
    work = pixels.astype(np.float64)
    if work.shape[1] != width:
        work = resample_axis(work, width, axis=1)
    if work.shape[0] != height:
        work = resample_axis(work, height, axis=0)
    return np.clip(np.rint(work), 0, 255).astype(np.uint8)


def nearest_indices(src_size: int, dst_size: int) -> np.ndarray:
    """src = floor(dst * src_size / dst_size)"""
    return (np.arange(dst_size, dtype=np.int64) * src_size) // dst_size


def gaussian_kernel(sigma: float) -> np.ndarray:
    """Normalized 1-D Gaussian of radius ceil(3 * sigma)."""
    radius = max(1, math.ceil(BLUR_RADIUS_SIGMAS * sigma))
    x = np.arange(-radius, radius + 1, dtype=np.float64)
    kernel = np.exp(-(x ** 2) / (2.0 * sigma * sigma))
    return kernel / kernel.sum()


def gaussian_blur(pixels: np.ndarray, sigma: float) -> np.ndarray:
    """Separable Gaussian over every channel, edges replicated."""
    kernel = gaussian_kernel(sigma)
    work = pixels.astype(np.float64)
    blurred = cv2.sepFilter2D(
        work, cv2.CV_64F, kernel, kernel, borderType=cv2.BORDER_REPLICATE
    )
    return np.clip(np.rint(blurred), 0, 255).astype(np.uint8)
