"""In-memory blob store for development and testing."""

from storefront.storage.port import BlobStore

BASE_URL = "https://storage.example.com/products"


class FakeBlobStore(BlobStore):
    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.deleted: list[str] = []
        self.outage: str | None = None

    def fail_with(self, reason: str = "Storage unavailable") -> None:
        """Make every following call raise OSError(reason)."""
        self.outage = reason

    def recover(self) -> None:
        self.outage = None

    def _check_available(self) -> None:
        if self.outage:
            raise OSError(self.outage)

    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        self._check_available()
        url = f"{BASE_URL}/{key}"
        self.objects[url] = content
        return url

    def delete(self, url: str) -> None:
        self._check_available()
        self.objects.pop(url, None)
        self.deleted.append(url)
