"""Interface shared by the ways of hiding data in an image."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Hides a byte payload in an image and recovers it again."""

    @abstractmethod
    def embed(self, img, data):
        """Hide ``data`` inside ``img``, modifying its pixels in place."""

    @abstractmethod
    def extract(self, img):
        """Return the payload hidden inside ``img``."""