"""Blob store backed by a local directory, served under a static URL prefix."""

from pathlib import Path

from storefront.storage.port import BlobStore


class LocalBlobStore(BlobStore):
    def __init__(self, root: str, base_url: str) -> None:
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def _path_for(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if self.root.resolve() not in path.parents:
            raise ValueError(f"Blob key escapes storage root: {key!r}")
        return path

    def upload(self, key: str, content: bytes, content_type: str | None = None) -> str:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return f"{self.base_url}/{key}"

    def delete(self, url: str) -> None:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            raise ValueError(f"URL is not managed by this store: {url!r}")
        self._path_for(url[len(prefix) :]).unlink(missing_ok=True)
