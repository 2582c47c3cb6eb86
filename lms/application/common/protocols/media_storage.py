from typing import Protocol

from lms.infrastructure.common.services.media_storage import StoredAsset


class MediaStorageProtocol(Protocol):
    def upload(self, data: str, folder: str) -> StoredAsset: ...

    def destroy(self, public_id: str) -> bool: ...
