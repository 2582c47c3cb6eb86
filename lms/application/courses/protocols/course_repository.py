from datetime import datetime
from typing import Protocol

from lms.models import Comment, Course, CourseContent, Review


class CourseRepositoryProtocol(Protocol):
    def find_by_id(self, course_id: int) -> Course | None: ...

    def list_recent(self) -> list[Course]: ...

    def save(self, course: Course) -> Course: ...

    def delete(self, course: Course) -> None: ...

    def add_question(self, content: CourseContent, user_id: int, text: str) -> Comment: ...

    def add_reply(self, parent: Comment, user_id: int, text: str) -> Comment: ...

    def add_review(self, course: Course, user_id: int, rating: int, comment: str) -> Review: ...

    def review_ratings(self, course_id: int) -> list[int]: ...

    def find_ids_reviewed_by(self, user_id: int) -> list[int]: ...

    def add_review_reply(self, review: Review, user_id: int, text: str) -> Comment: ...

    def count_created_between(self, start: datetime, end: datetime) -> int: ...
