from datetime import datetime
from typing import Protocol


class CreatedCounterProtocol(Protocol):
    """Any repository that can count the rows created in a time range."""

    def count_created_between(self, start: datetime, end: datetime) -> int: ...
