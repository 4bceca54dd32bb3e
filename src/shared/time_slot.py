"""
Time Slot primitive.

A time slot is a half-open UTC interval ``[from, to)``. Two consecutive daily
slots share a boundary instant but do not overlap, so one resource can serve
Jan 1 and Jan 2 back to back.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class TimeSlot:
    """A half-open interval of time in UTC."""

    from_: datetime
    to: datetime

    def __post_init__(self):
        if self.to < self.from_:
            raise ValueError(f"Time slot ends before it starts: {self.from_} > {self.to}")

    @classmethod
    def empty(cls) -> "TimeSlot":
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        return cls(epoch, epoch)

    @classmethod
    def create_daily_time_slot_at_utc(cls, year: int, month: int, day: int) -> "TimeSlot":
        return cls.create_time_slot_at_utc_of_duration(year, month, day, timedelta(days=1))

    @classmethod
    def create_time_slot_at_utc_of_duration(
        cls,
        year: int,
        month: int,
        day: int,
        duration: timedelta
    ) -> "TimeSlot":
        start = datetime(year, month, day, tzinfo=timezone.utc)
        return cls(start, start + duration)

    @classmethod
    def create_monthly_time_slot_at_utc(cls, year: int, month: int) -> "TimeSlot":
        start = datetime(year, month, 1, tzinfo=timezone.utc)
        if month == 12:
            end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
        else:
            end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
        return cls(start, end)

    def overlaps_with(self, other: Optional["TimeSlot"]) -> bool:
        """Check whether the two slots share any instant besides a boundary."""
        if other is None:
            return False
        return self.from_ < other.to and other.from_ < self.to

    def within(self, other: "TimeSlot") -> bool:
        """Check whether this slot lies entirely inside ``other``."""
        return self.from_ >= other.from_ and self.to <= other.to

    def is_empty(self) -> bool:
        return self.from_ == self.to

    @property
    def duration(self) -> timedelta:
        return self.to - self.from_

    def __str__(self) -> str:
        return f"[{self.from_.isoformat()}, {self.to.isoformat()})"
