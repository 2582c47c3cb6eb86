"""Unit tests for CourseRatingService."""

import pytest

from lms.domain.courses.services.rating_service import CourseRatingService


class TestCourseRatingService:
    def test_no_reviews(self) -> None:
        assert CourseRatingService().average([]) == 0.0

    def test_single_rating(self) -> None:
        assert CourseRatingService().average([4]) == 4.0

    @pytest.mark.parametrize(
        ("ratings", "expected"),
        [
            ([4, 5], 4.5),
            ([5, 4, 4], 4.3),
            ([5, 5, 4], 4.7),
            ([1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2], 2.0),
        ],
    )
    def test_mean_rounded_to_one_decimal(self, ratings: list[int], expected: float) -> None:
        assert CourseRatingService().average(ratings) == expected

    def test_rounds_half_up(self) -> None:
        # 4.25 rounds to 4.3, not the banker's 4.2
        assert CourseRatingService().average([4, 4, 4, 5]) == 4.3

    def test_accepts_generator(self) -> None:
        assert CourseRatingService().average(rating for rating in (3, 4)) == 3.5
