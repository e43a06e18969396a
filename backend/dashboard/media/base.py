from typing import BinaryIO, Protocol

IMAGE = "image"
VIDEO = "video"
RESOURCE_KINDS = (IMAGE, VIDEO)


class ObjectStore(Protocol):
    def upload(self, file: BinaryIO, resource_kind: str, folder: str) -> str:
        """Upload ``file`` and return its public URL."""
        ...
