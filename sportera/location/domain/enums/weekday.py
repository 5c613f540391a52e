"""Weekday Enum."""

from enum import Enum


class Weekday(str, Enum):
    """운영 시간 요일 키. 정의 순서는 datetime.weekday()와 같다."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        return list(cls)[index]
