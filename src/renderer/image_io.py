# renderer/image_io.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def _check_pixels(pixels: np.ndarray) -> np.ndarray:
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a uint8 (height, width, 3) array, got "
                         f"{pixels.dtype} {pixels.shape}")
    return np.ascontiguousarray(pixels)

def write_ppm(path: str, pixels: np.ndarray) -> None:
    """
    Write a binary (P6) PPM: a "P6 width height 255" header followed by the
    RGB bytes row by row, top row first.
    """
    pixels = _check_pixels(pixels)
    height, width = pixels.shape[:2]
    with open(path, 'wb') as f:
        f.write(b"P6\n%d %d\n255\n" % (width, height))
        f.write(pixels.tobytes())

def _next_field(data: bytes, pos: int):
    while pos < len(data):
        if data[pos:pos + 1].isspace():
            pos += 1
        elif data[pos:pos + 1] == b'#':
            end = data.find(b'\n', pos)
            pos = len(data) if end < 0 else end + 1
        else:
            break
    start = pos
    while pos < len(data) and not data[pos:pos + 1].isspace():
        pos += 1
    if start == pos:
        raise ValueError("Truncated PPM header")
    return data[start:pos], pos

def read_ppm(path: str) -> np.ndarray:
    """Read a binary (P6) PPM with an 8-bit max value into a (height, width, 3) array."""
    with open(path, 'rb') as f:
        data = f.read()

    magic, pos = _next_field(data, 0)
    if magic != b'P6':
        raise ValueError(f"{path} is not a binary PPM (magic {magic!r})")
    fields = []
    for _ in range(3):
        field, pos = _next_field(data, pos)
        fields.append(int(field))
    width, height, max_value = fields
    if max_value != 255:
        raise ValueError(f"Unsupported PPM max value {max_value}")

    # Exactly one whitespace byte separates the header from the raster.
    pixels = np.frombuffer(data, dtype=np.uint8, count=width * height * 3, offset=pos + 1)
    return pixels.reshape(height, width, 3).copy()

def save_image(path: str, pixels: np.ndarray) -> str:
    """
    Save 8-bit RGB pixels. ".ppm" files are written directly, any other
    extension Pillow understands (e.g. ".png") goes through Pillow.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if os.path.splitext(path)[1].lower() == '.ppm':
        write_ppm(path, pixels)
    else:
        Image.fromarray(_check_pixels(pixels)).save(path)
    logger.info("Wrote %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
    return path
