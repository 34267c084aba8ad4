import numpy as np
import pytest

from stegtool.crypto import CipherError
from stegtool.image import Image, ImageError
from stegtool.lsb_embedder import CapacityError, LSBEmbedder

PASSWORD = "password"


def _cover(height=32, width=32, channels=3, seed=0):
    rng = np.random.default_rng(seed)
    return Image.from_array(
        rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)
    )


def test_round_trip():
    img = _cover()
    data = b"the quick brown fox"
    LSBEmbedder(PASSWORD).embed(img, data)
    assert LSBEmbedder(PASSWORD).extract(img) == data


def test_round_trip_four_channels():
    img = _cover(channels=4, seed=3)
    data = bytes(range(40))
    embedder = LSBEmbedder(PASSWORD)
    embedder.embed(img, data)
    assert embedder.extract(img) == data


def test_round_trip_through_png(tmp_path):
    img = _cover(seed=4)
    data = b"\x00\xffbinary\x10"
    LSBEmbedder(PASSWORD).embed(img, data)
    path = tmp_path / "stego.png"
    img.save(path)
    assert LSBEmbedder(PASSWORD).extract(Image(path)) == data


def test_only_least_significant_bits_change():
    img = _cover(seed=6)
    before = img.pixels.copy()
    LSBEmbedder(PASSWORD).embed(img, b"payload")
    after = img.pixels
    assert np.array_equal(before >> 1, after >> 1)
    assert np.any(before != after)


def test_payload_filling_capacity_fits():
    img = _cover(seed=7)
    embedder = LSBEmbedder(PASSWORD)
    data = bytes(max(embedder.capacity(img) - 48, 0))
    embedder.embed(img, data)
    assert embedder.extract(img) == data


def test_payload_beyond_capacity_raises():
    img = _cover(seed=8)
    embedder = LSBEmbedder(PASSWORD)
    before = img.pixels.copy()
    with pytest.raises(CapacityError, match="too large"):
        embedder.embed(img, bytes(embedder.capacity(img)))
    assert np.array_equal(img.pixels, before)


def test_tiny_image_has_no_capacity():
    img = Image.from_array(np.zeros((1, 1, 3), dtype=np.uint8))
    embedder = LSBEmbedder(PASSWORD)
    assert embedder.capacity(img) == 0
    with pytest.raises(CapacityError):
        embedder.embed(img, b"x")


def test_clean_image_holds_nothing():
    img = Image.from_array(np.zeros((32, 32, 3), dtype=np.uint8))
    with pytest.raises(CapacityError, match="no embedded data"):
        LSBEmbedder(PASSWORD).extract(img)


def test_corrupted_payload_fails_decryption():
    img = _cover(seed=9)
    embedder = LSBEmbedder(PASSWORD)
    embedder.embed(img, b"abc")
    img.pixels[:, :, :] = 0
    img.pixels[0, 0, :] = 0
    with pytest.raises((CapacityError, CipherError)):
        embedder.extract(img)


def test_sixteen_bit_image_rejected():
    img = Image.from_array(np.zeros((16, 16, 3), dtype=np.uint16))
    with pytest.raises(ImageError):
        LSBEmbedder(PASSWORD).embed(img, b"x")


def test_grayscale_image_rejected():
    img = Image.from_array(np.zeros((16, 16), dtype=np.uint8))
    with pytest.raises(ImageError):
        LSBEmbedder(PASSWORD).extract(img)