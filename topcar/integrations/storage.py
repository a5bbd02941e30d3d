# topcar/integrations/storage.py
from abc import ABC, abstractmethod

from topcar.core import config


class BlobStore(ABC):
    @abstractmethod
    def put(self, filename: str, content: bytes, content_type: str) -> str:
        """Store the bytes and return a public URL for them."""


class MockBlobStore(BlobStore):
    """Keeps uploads in memory and hands back URLs under ``base_url``."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, filename, content, content_type):
        self.objects[filename] = (content, content_type)
        return f"{self.base_url}/{filename}"


_store: BlobStore = MockBlobStore(config.UPLOAD_BASE_URL)


def get_blob_store() -> BlobStore:
    return _store
