"""Password-encrypted LSB steganography: hide files in image pixels and recover them."""

__version__ = "0.1.0"