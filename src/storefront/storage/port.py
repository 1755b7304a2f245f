"""Blob storage port.

Product images live outside the database. Adapters store raw bytes under a
key and hand back the public URL the catalogue records.
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    @abstractmethod
    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        """Store `content` under `key` and return its public URL."""

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove the object previously returned as `url`."""
