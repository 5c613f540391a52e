"""Opening Hours Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from types import MappingProxyType
from typing import Any, Mapping

from sportera.location.domain.enums.weekday import Weekday
from sportera.location.domain.exceptions.validation import ValidationError

FIELD = "opening_hours"


def _parse_time(value: Any) -> time:
    """HH:MM 문자열을 time으로 변환."""
    if isinstance(value, time):
        return value
    try:
        hour_text, minute_text = str(value).strip().split(":")
        return time(hour=int(hour_text), minute=int(minute_text))
    except (ValueError, TypeError) as e:
        raise ValidationError(FIELD, f"invalid time of day: {value!r} (expected HH:MM)") from e


@dataclass(frozen=True, slots=True)
class DailyHours:
    """하루 운영 시간 (open/close 모두 포함)."""

    open: time
    close: time

    @classmethod
    def parse(cls, open_value: Any, close_value: Any) -> "DailyHours":
        return cls(open=_parse_time(open_value), close=_parse_time(close_value))

    def contains(self, moment: time) -> bool:
        current = moment.hour * 60 + moment.minute
        opens = self.open.hour * 60 + self.open.minute
        closes = self.close.hour * 60 + self.close.minute
        return opens <= current <= closes

    def to_dict(self) -> dict[str, str]:
        return {"open": self.open.strftime("%H:%M"), "close": self.close.strftime("%H:%M")}


def parse_opening_hours(raw: Mapping[str, Any] | None) -> Mapping[Weekday, DailyHours] | None:
    """{"monday": {"open": "08:00", "close": "22:00"}, ...} 형식 파싱.

    결과는 읽기 전용 매핑입니다 (Place가 불변이므로).

    Raises:
        ValidationError: 요일 키 또는 시간 형식이 잘못된 경우
    """
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValidationError(FIELD, "must be a mapping of weekday to open/close")

    schedule: dict[Weekday, DailyHours] = {}
    for day, hours in raw.items():
        try:
            weekday = Weekday(str(day).strip().lower())
        except ValueError as e:
            raise ValidationError(FIELD, f"unknown weekday: {day!r}") from e
        if isinstance(hours, DailyHours):
            schedule[weekday] = hours
            continue
        if not isinstance(hours, Mapping) or "open" not in hours or "close" not in hours:
            raise ValidationError(FIELD, f"{weekday.value} requires 'open' and 'close'")
        schedule[weekday] = DailyHours.parse(hours["open"], hours["close"])
    return MappingProxyType(schedule)
