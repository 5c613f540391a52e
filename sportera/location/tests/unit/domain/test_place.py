"""Place 엔티티 단위 테스트."""

from datetime import datetime, timezone

import pytest

from sportera.location.domain.entities import Place
from sportera.location.domain.enums import Sport, Weekday
from sportera.location.domain.exceptions import ValidationError
from sportera.location.domain.value_objects import Coordinates

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)  # 월요일
LATER = datetime(2024, 6, 4, 10, 0, tzinfo=timezone.utc)


def make_place(**overrides) -> Place:
    params = {
        "name": "Stade Jean Bouin",
        "latitude": 48.8415,
        "longitude": 2.2530,
        "sports": ["football", "running"],
        "now": NOW,
    }
    params.update(overrides)
    return Place.create(**params)


class TestPlaceCreate:
    """Place.create 검증 테스트."""

    def test_create_normalizes_sports(self) -> None:
        place = make_place(sports=["Football", " TENNIS ", "football"])
        assert place.sports == (Sport.FOOTBALL, Sport.TENNIS)

    def test_create_sets_timestamps_and_defaults(self) -> None:
        place = make_place()
        assert place.created_at == NOW
        assert place.updated_at == NOW
        assert place.is_active is True
        assert place.amenities == ()

    def test_name_is_trimmed(self) -> None:
        assert make_place(name="  Piscine  ").name == "Piscine"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_place(name=name)
        assert exc_info.value.field == "name"

    def test_name_at_max_length(self) -> None:
        assert len(make_place(name="x" * 100).name) == 100

    def test_empty_sports_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_place(sports=[])
        assert exc_info.value.field == "sports"

    def test_invalid_sports_lists_every_entry(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_place(sports=["football", "quidditch", "curling"])
        assert "quidditch" in exc_info.value.message
        assert "curling" in exc_info.value.message

    def test_invalid_coordinates(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_place(latitude=95.0)
        assert exc_info.value.field == "latitude"


class TestPlaceWithChanges:
    """Place.with_changes 테스트."""

    def test_returns_new_instance_with_same_id(self) -> None:
        place = make_place()
        updated = place.with_changes(now=LATER, name="Nouveau nom")

        assert updated.id_ == place.id_
        assert updated.name == "Nouveau nom"
        assert updated.updated_at == LATER
        assert updated.created_at == NOW
        assert place.name == "Stade Jean Bouin"

    def test_removing_all_sports_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_place().with_changes(now=LATER, sports=[])

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_place().with_changes(now=LATER, created_at=LATER)

    def test_coordinates_must_be_value_object(self) -> None:
        place = make_place()
        moved = place.with_changes(now=LATER, coordinates=Coordinates(latitude=1.0, longitude=2.0))
        assert moved.coordinates.latitude == 1.0
        with pytest.raises(ValidationError):
            place.with_changes(now=LATER, coordinates=(1.0, 2.0))


class TestPlaceBehaviour:
    def test_distance_from_own_location_is_zero(self) -> None:
        place = make_place()
        assert place.distance_from(Coordinates(latitude=48.8415, longitude=2.2530)) == 0.0

    def test_equality_by_id(self) -> None:
        place = make_place()
        assert place == place.with_changes(now=LATER, name="Autre")
        assert place != make_place()

    def test_is_open_without_schedule(self) -> None:
        assert make_place().is_open_at(NOW) is True

    def test_is_open_at(self) -> None:
        place = make_place(opening_hours={"monday": {"open": "08:00", "close": "22:00"}})
        assert place.is_open_at(NOW) is True
        assert place.is_open_at(NOW.replace(hour=23)) is False
        # 화요일 정보 없음
        assert place.is_open_at(LATER) is False

    def test_opening_hours_read_only(self) -> None:
        """운영 시간은 with_changes()를 거치지 않고는 바꿀 수 없음"""
        place = make_place(opening_hours={"monday": {"open": "08:00", "close": "22:00"}})

        with pytest.raises(TypeError):
            place.opening_hours[Weekday.TUESDAY] = place.opening_hours[Weekday.MONDAY]
        with pytest.raises(TypeError):
            del place.opening_hours[Weekday.MONDAY]
        assert list(place.opening_hours) == [Weekday.MONDAY]
