# renderer/tone_mapping.py
import numpy as np
from numba import njit

CHANNEL_POLICIES = ("clamp", "wrap")

@njit(cache=False)
def quantize_kernel(linear_image, output_image, wrap):
    h, w, c = linear_image.shape
    for y in range(h):
        for x in range(w):
            for k in range(c):
                value = linear_image[y, x, k] * 255.0
                if wrap:
                    # Truncate, then keep the low byte: 1.0 becomes 255, 1.01 wraps to 1.
                    output_image[y, x, k] = int(value) % 256
                elif value >= 255.0:
                    output_image[y, x, k] = 255
                elif value <= 0.0:
                    output_image[y, x, k] = 0
                else:
                    output_image[y, x, k] = int(value)

def to_rgb8(frame, policy: str = "clamp") -> np.ndarray:
    """
    Convert a linear (height, width, 3) color frame to 8-bit channels.

    "clamp" saturates out-of-range components to 0 or 255. "wrap" keeps the
    low byte of int(component * 255), so components above 1.0 wrap around
    instead of saturating.
    """
    if policy not in CHANNEL_POLICIES:
        raise ValueError(f"Unknown channel policy {policy!r}, expected one of {CHANNEL_POLICIES}")
    linear = np.ascontiguousarray(frame, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) frame, got shape {linear.shape}")
    output = np.empty(linear.shape, dtype=np.uint8)
    quantize_kernel(linear, output, policy == "wrap")
    return output
