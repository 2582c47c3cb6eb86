from .mail_service import MailServiceProtocol
from .media_storage import MediaStorageProtocol

__all__ = [
    "MailServiceProtocol",
    "MediaStorageProtocol",
]
