"""Repository for Layout blocks."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from lms.models import Layout

logger = logging.getLogger(__name__)


class LayoutRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_type(self, layout_type: str) -> Layout | None:
        stmt = select(Layout).where(Layout.type == layout_type)
        return self.db.execute(stmt).scalar_one_or_none()

    def save(self, layout: Layout) -> Layout:
        self.db.add(layout)
        self.db.commit()
        self.db.refresh(layout)
        logger.info(f"Saved {layout.type} layout (id={layout.id})")
        return layout
