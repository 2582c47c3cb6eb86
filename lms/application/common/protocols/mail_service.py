from typing import Any, Protocol


class MailServiceProtocol(Protocol):
    def send(self, email: str, subject: str, template: str, data: dict[str, Any]) -> bool: ...
