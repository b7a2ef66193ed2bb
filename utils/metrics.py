"""Metrics: PSNR and SSIM between two images."""

from typing import Dict

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity


def _luma(rgb: np.ndarray) -> np.ndarray:
    # BT.601
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def compute_psnr_ssim(original, reconstructed) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and Y channel of two same-size PixelBuffers.

    Alpha is ignored. Images must be at least 7x7 for SSIM.
    """
    if original.dimensions != reconstructed.dimensions:
        raise ValueError(
            f"Size mismatch: {original.dimensions} vs {reconstructed.dimensions}"
        )
    original_rgb = original.pixels[:, :, :3]
    reconstructed_rgb = reconstructed.pixels[:, :, :3]

    psnr_rgb = peak_signal_noise_ratio(original_rgb, reconstructed_rgb, data_range=255)
    ssim_rgb = structural_similarity(
        original_rgb, reconstructed_rgb, channel_axis=2, data_range=255
    )

    original_y = _luma(original_rgb.astype(np.float64))
    recon_y = _luma(reconstructed_rgb.astype(np.float64))

    psnr_y = peak_signal_noise_ratio(original_y, recon_y, data_range=255)
    ssim_y = structural_similarity(original_y, recon_y, data_range=255)

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }
