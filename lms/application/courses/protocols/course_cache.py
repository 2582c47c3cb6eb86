from typing import Protocol


class CourseCacheProtocol(Protocol):
    def get_course(self, course_id: int) -> str | None: ...

    def set_course(self, course_id: int, payload: str) -> None: ...

    def get_courses(self) -> str | None: ...

    def set_courses(self, payload: str) -> None: ...

    def invalidate(self, course_id: int | None = None) -> None: ...
