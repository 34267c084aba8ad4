"""Least-significant-bit embedding of an encrypted payload."""

import logging

import numpy as np

from .crypto import Cipher
from .embedder import Embedder
from .image import ImageError

logger = logging.getLogger(__name__)

_HEADER_BITS = 64
_HEADER_BYTES = _HEADER_BITS // 8
_TRAILER = Cipher.SALT_LEN + Cipher.IV_LEN


class CapacityError(Exception):
    """Raised when a payload does not fit, or an image holds none."""


def _encode_size(size):
    # Byte order of the length header: low byte first, then the remaining
    # seven bytes most significant first.
    return bytes([size & 0xFF]) + (size >> 8).to_bytes(_HEADER_BYTES - 1, "big")


def _decode_size(header):
    return header[0] | int.from_bytes(header[1:_HEADER_BYTES], "big") << 8


def _slots(img, start, count):
    """Pixel and channel indices that carry bits ``start`` .. ``start+count``.

    Each row is walked through one position past its end, which lands on
    the first pixel of the following row. Within every group of eight bits
    the channel is (7 - bit position) modulo the channel count.
    """
    positions = np.arange(start, start + count)
    rows, cols = np.divmod(positions, img.width + 1)
    pixel = rows * img.width + cols
    channel = (7 - positions % 8) % img.channels
    return pixel, channel


class LSBEmbedder(Embedder):
    """Encrypts a payload with a password and stores it in pixel LSBs.

    The stored stream is a 64-bit length header followed by the cipher
    text, the salt and the IV.
    """

    def __init__(self, password):
        self._password = password

    def capacity(self, img):
        """Largest stored stream, in bytes, that the image is allowed to hold."""
        return max((img.height * (img.width - 1) - _HEADER_BYTES) // 8, 0)

    @staticmethod
    def _check(img):
        if img.depth != 8 or img.channels < 2:
            raise ImageError("LSB embedding needs an 8-bit image with colour channels")

    def embed(self, img, data):
        self._check(img)
        max_capacity = self.capacity(img)
        logger.info("image max capacity is %d bytes", max_capacity)
        cipher = Cipher(self._password)
        stream = cipher.add_salt_iv(cipher.encrypt(bytes(data)))
        logger.info("cipher text size is %d bytes", len(stream))
        if len(stream) > max_capacity:
            raise CapacityError("too large input file to embed")

        bits = np.unpackbits(np.frombuffer(_encode_size(len(stream)) + stream, dtype=np.uint8))
        shape = img.pixels.shape
        pixels = img.pixels.reshape(-1, img.channels)
        pixel, channel = _slots(img, 0, bits.size)
        pixels[pixel, channel] = (pixels[pixel, channel] & 0xFE) | bits
        img.pixels = pixels.reshape(shape)

    def _read(self, img, start, count):
        pixels = img.pixels.reshape(-1, img.channels)
        pixel, channel = _slots(img, start, count)
        return np.packbits(pixels[pixel, channel] & 1).tobytes()

    def extract(self, img):
        self._check(img)
        max_capacity = self.capacity(img)
        logger.info("image max capacity is %d bytes", max_capacity)
        size = _decode_size(self._read(img, 0, _HEADER_BITS))
        if not _TRAILER <= size <= max_capacity:
            raise CapacityError("image holds no embedded data")

        stream = self._read(img, _HEADER_BITS, size * 8)
        body = stream[:-_TRAILER]
        salt = stream[-_TRAILER:-Cipher.IV_LEN]
        iv = stream[-Cipher.IV_LEN:]
        return Cipher(self._password, iv, salt).decrypt(body)