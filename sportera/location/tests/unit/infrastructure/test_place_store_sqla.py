"""SqlaPlaceStore 테스트 (aiosqlite)."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio

from sportera._shared.database import build_engine, build_session_factory, create_schema
from sportera.location.domain.entities import Place
from sportera.location.domain.enums import Sport, Weekday
from sportera.location.domain.value_objects import ContactInfo, PlaceId
from sportera.location.infrastructure.persistence_postgres import SqlaPlaceStore

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def store(tmp_path):
    """파일 기반 SQLite 저장소 fixture"""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'places.db'}")
    await create_schema(engine)
    yield SqlaPlaceStore(build_session_factory(engine))
    await engine.dispose()


def make_place(name: str = "Gymnase Charras", **kwargs) -> Place:
    return Place.create(
        name=name,
        latitude=48.8814,
        longitude=2.2689,
        sports=["basketball", "volleyball"],
        now=NOW,
        **kwargs,
    )


class TestSqlaPlaceStore:
    """SQLAlchemy 저장소 테스트."""

    @pytest.mark.asyncio
    async def test_add_and_get_round_trip(self, store: SqlaPlaceStore) -> None:
        # Arrange
        place = make_place(
            owner_id="org-1",
            opening_hours={"monday": {"open": "08:00", "close": "22:00"}},
            amenities=["vestiaires", "parking"],
            contact_info=ContactInfo(phone="01 23 45 67 89"),
            address="7 Rue Charras",
        )

        # Act
        await store.add(place)
        loaded = await store.get(place.id_)

        # Assert
        assert loaded == place
        assert loaded.sports == (Sport.BASKETBALL, Sport.VOLLEYBALL)
        assert loaded.opening_hours[Weekday.MONDAY].to_dict() == {"open": "08:00", "close": "22:00"}
        assert loaded.amenities == ("vestiaires", "parking")
        assert loaded.contact_info.phone == "01 23 45 67 89"
        assert loaded.created_at == NOW

    @pytest.mark.asyncio
    async def test_list_all_in_insertion_order(self, store: SqlaPlaceStore) -> None:
        for name in ("A", "B", "C"):
            await store.add(make_place(name))

        assert [place.name for place in await store.list_all()] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_replace(self, store: SqlaPlaceStore) -> None:
        place = make_place()
        await store.add(place)

        replaced = await store.replace(place.with_changes(now=NOW, is_active=False))

        assert replaced is not None
        assert (await store.get(place.id_)).is_active is False
        assert await store.replace(make_place("Absent")) is None

    @pytest.mark.asyncio
    async def test_remove(self, store: SqlaPlaceStore) -> None:
        place = make_place()
        await store.add(place)

        assert await store.remove(place.id_) is True
        assert await store.remove(place.id_) is False
        assert await store.get(PlaceId.generate()) is None
