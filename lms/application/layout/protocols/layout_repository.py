from typing import Protocol

from lms.models import Layout


class LayoutRepositoryProtocol(Protocol):
    def find_by_type(self, layout_type: str) -> Layout | None: ...

    def save(self, layout: Layout) -> Layout: ...
