"""Blob store factory and helpers.

Provides get_blob_store() / set_blob_store() to swap implementations:
- FakeBlobStore (in memory) for development and testing
- LocalBlobStore for a directory served as static files
"""

import re
from uuid import uuid4

import structlog

from storefront import settings
from storefront.errors import Internal
from storefront.storage.port import BlobStore

logger = structlog.get_logger(__name__)

_current_store: BlobStore | None = None


def get_blob_store() -> BlobStore:
    """Return the configured blob store."""
    global _current_store
    if _current_store is None:
        if settings.BLOB_STORAGE == "local":
            from storefront.storage.local_adapter import LocalBlobStore

            _current_store = LocalBlobStore(settings.BLOB_DIR, settings.BLOB_BASE_URL)
        else:
            from storefront.storage.fake_adapter import FakeBlobStore

            _current_store = FakeBlobStore()
    return _current_store


def set_blob_store(store: BlobStore) -> None:
    global _current_store
    _current_store = store


def reset_blob_store() -> None:
    global _current_store
    _current_store = None


def _object_key(filename: str) -> str:
    safe = re.sub(r"[^A-Za-z0-9._-]", "_", filename or "image")
    return f"{uuid4().hex[:12]}-{safe}"


def store_image(filename: str, content: bytes, content_type: str | None = None) -> str:
    """Upload an image and return its URL. Failure aborts the caller."""
    try:
        url = get_blob_store().upload(_object_key(filename), content, content_type)
    except Exception as exc:
        logger.error("Image upload failed", filename=filename, error=str(exc))
        raise Internal("Image upload failed") from exc

    logger.info("Image stored", url=url)
    return url


def discard_image(url: str | None) -> None:
    """Best-effort removal of an image; failures are logged, never raised."""
    if not url:
        return
    try:
        get_blob_store().delete(url)
    except Exception as exc:
        logger.warning("Image cleanup failed", url=url, error=str(exc))
