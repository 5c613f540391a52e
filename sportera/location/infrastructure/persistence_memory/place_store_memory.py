"""In-memory Place Store.

PlaceStore 포트의 구현체입니다.
"""

from __future__ import annotations

import asyncio
from typing import Iterable

from sportera.location.domain.entities import Place
from sportera.location.domain.value_objects import PlaceId


class InMemoryPlaceStore:
    """dict 기반 장소 저장소.

    PlaceStore 구현체. dict는 삽입 순서를 유지하고, replace는 위치를 바꾸지 않습니다.
    """

    def __init__(self, places: Iterable[Place] = ()) -> None:
        self._places: dict[PlaceId, Place] = {place.id_: place for place in places}
        self._lock = asyncio.Lock()

    async def add(self, place: Place) -> Place:
        async with self._lock:
            self._places[place.id_] = place
        return place

    async def get(self, place_id: PlaceId) -> Place | None:
        return self._places.get(place_id)

    async def list_all(self) -> list[Place]:
        return list(self._places.values())

    async def replace(self, place: Place) -> Place | None:
        async with self._lock:
            if place.id_ not in self._places:
                return None
            self._places[place.id_] = place
        return place

    async def remove(self, place_id: PlaceId) -> bool:
        async with self._lock:
            return self._places.pop(place_id, None) is not None
