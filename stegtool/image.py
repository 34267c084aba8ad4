"""Raster images held as numpy arrays in blue-green-red channel order."""

import numpy as np
from PIL import Image as PILImage

_DEPTHS = {
    np.dtype(np.uint8): 8,
    np.dtype(np.uint16): 16,
    np.dtype(np.float32): 32,
}

_NATIVE_MODES = ("L", "RGB", "RGBA", "I", "F")


class ImageError(Exception):
    """Raised when an image cannot be loaded, saved or used."""


def _normalise(pixels):
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    if pixels.ndim != 3 or pixels.shape[2] < 1:
        raise ValueError("pixel array must have shape (height, width[, channels])")
    return np.ascontiguousarray(pixels)


def _swap_red_blue(pixels):
    channels = pixels.shape[2]
    if channels == 3:
        return np.ascontiguousarray(pixels[..., [2, 1, 0]])
    if channels == 4:
        return np.ascontiguousarray(pixels[..., [2, 1, 0, 3]])
    return pixels.copy()


def _to_array(source):
    mode = source.mode
    if mode == "1":
        source = source.convert("L")
    elif mode in ("P", "PA"):
        has_alpha = mode == "PA" or "transparency" in source.info
        source = source.convert("RGBA" if has_alpha else "RGB")
    elif mode == "LA":
        source = source.convert("RGBA")
    elif mode not in _NATIVE_MODES and not mode.startswith("I;16"):
        source = source.convert("RGB")
    pixels = np.array(source)
    if pixels.dtype.kind == "u" and pixels.dtype.itemsize == 2:
        pixels = pixels.astype(np.uint16)
    return _swap_red_blue(_normalise(pixels))


class Image:
    """An image whose pixels are a (height, width, channels) array.

    Colour images are stored blue first, so a pixel of a three-channel
    image reads (blue, green, red).
    """

    def __init__(self, path):
        try:
            with PILImage.open(path) as source:
                source.load()
                pixels = _to_array(source)
        except (OSError, ValueError) as exc:
            raise ImageError("can't load image") from exc
        self.pixels = pixels

    @classmethod
    def from_array(cls, pixels):
        """Build an image from a copy of a 2-D or 3-D pixel array."""
        image = cls.__new__(cls)
        image.pixels = _normalise(np.array(pixels))
        return image

    def save(self, path):
        """Write the image; the format follows the file extension."""
        pixels = _swap_red_blue(self.pixels)
        if pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        try:
            PILImage.fromarray(pixels).save(path)
        except (OSError, ValueError, TypeError, KeyError) as exc:
            raise ImageError("can't save file") from exc

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    @property
    def depth(self):
        """Bits per channel: 8, 16 or 32, or -1 for other sample types."""
        return _DEPTHS.get(self.pixels.dtype, -1)

    @property
    def channels(self):
        return self.pixels.shape[2]