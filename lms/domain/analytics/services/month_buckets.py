"""Month bucketing for the admin analytics charts."""

from dataclasses import dataclass
from datetime import UTC, datetime

MONTHS_IN_REPORT = 12


@dataclass(frozen=True)
class MonthRange:
    """Half-open range [start, end) covering one calendar month."""

    label: str
    start: datetime
    end: datetime


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


class MonthBucketService:
    """Builds the calendar months an analytics report counts over."""

    def last_months(
        self, now: datetime | None = None, count: int = MONTHS_IN_REPORT
    ) -> list[MonthRange]:
        """
        Return the last `count` calendar months, oldest first.

        The month containing `now` is the final bucket. Labels look like
        "Oct 2026".
        """
        now = now or datetime.now(UTC)
        tz = now.tzinfo

        buckets: list[MonthRange] = []
        for offset in range(count - 1, -1, -1):
            year, month = _shift_month(now.year, now.month, -offset)
            next_year, next_month = _shift_month(year, month, 1)
            start = datetime(year, month, 1, tzinfo=tz)
            end = datetime(next_year, next_month, 1, tzinfo=tz)
            buckets.append(MonthRange(label=start.strftime("%b %Y"), start=start, end=end))
        return buckets
