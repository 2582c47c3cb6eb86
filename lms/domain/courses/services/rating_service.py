"""
Domain service for course rating aggregation.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

MIN_RATING = 1
MAX_RATING = 5


class CourseRatingService:
    """Computes the aggregate rating shown on a course."""

    def average(self, ratings: Iterable[int]) -> float:
        """
        Mean of all review ratings, rounded half-up to one decimal.

        Args:
            ratings: Ratings of every review on the course

        Returns:
            Aggregate rating, 0.0 for a course without reviews
        """
        values = list(ratings)
        if not values:
            return 0.0

        mean = Decimal(sum(values)) / Decimal(len(values))
        return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
