"""Password-based AES-256-CBC encryption of payloads."""

import hashlib
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher as _BlockCipher
from cryptography.hazmat.primitives.ciphers import algorithms, modes


class CipherError(Exception):
    """Raised when key derivation, encryption or decryption fails."""


class Cipher:
    """AES-256-CBC cipher keyed by PBKDF2-HMAC-SHA256 over a password.

    Without a salt a fresh random one is generated. Every call to
    :meth:`encrypt` draws a fresh random IV, kept in :attr:`iv`.
    """

    IV_LEN = 16
    SALT_LEN = 16
    KEY_LEN = 32
    PBKDF2_ITERS = 100_000
    _BLOCK_BITS = 128

    def __init__(self, password, iv=None, salt=None):
        self.salt = os.urandom(self.SALT_LEN) if salt is None else bytes(salt)
        self.iv = b"" if iv is None else bytes(iv)
        if len(self.salt) != self.SALT_LEN:
            raise CipherError("Key derivation failed")
        encoded = password.encode() if isinstance(password, str) else bytes(password)
        self._key = hashlib.pbkdf2_hmac(
            "sha256", encoded, self.salt, self.PBKDF2_ITERS, self.KEY_LEN
        )

    def _block_cipher(self):
        return _BlockCipher(algorithms.AES(self._key), modes.CBC(self.iv))

    def encrypt(self, plain_text):
        """Encrypt with PKCS#7 padding under a newly generated IV."""
        self.iv = os.urandom(self.IV_LEN)
        padder = padding.PKCS7(self._BLOCK_BITS).padder()
        padded = padder.update(bytes(plain_text)) + padder.finalize()
        encryptor = self._block_cipher().encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, cipher_text):
        """Decrypt with the current IV and strip the PKCS#7 padding."""
        data = bytes(cipher_text)
        if len(self.iv) != self.IV_LEN:
            raise CipherError("DecryptInit failed")
        if not data or len(data) % (self._BLOCK_BITS // 8):
            raise CipherError("DecryptFinal failed")
        decryptor = self._block_cipher().decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = padding.PKCS7(self._BLOCK_BITS).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise CipherError("DecryptFinal failed") from exc

    def add_salt_iv(self, cipher_text):
        """Return the cipher text followed by the salt and then the IV."""
        return bytes(cipher_text) + self.salt + self.iv