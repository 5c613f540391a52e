"""PlaceStore Port.

장소 저장소 인터페이스입니다. 메모리/DB 구현 모두 가능합니다.
"""

from typing import Protocol

from sportera.location.domain.entities import Place
from sportera.location.domain.value_objects import PlaceId


class PlaceStore(Protocol):
    """장소 저장소 인터페이스.

    구현체:
        - InMemoryPlaceStore (infrastructure/persistence_memory/)
        - SqlaPlaceStore (infrastructure/persistence_postgres/)

    레코드 단위 원자성은 구현체가 보장합니다.
    """

    async def add(self, place: Place) -> Place:
        """새 장소 저장."""
        ...

    async def get(self, place_id: PlaceId) -> Place | None:
        """id로 조회. 없으면 None."""
        ...

    async def list_all(self) -> list[Place]:
        """전체 장소 (삽입 순서 유지)."""
        ...

    async def replace(self, place: Place) -> Place | None:
        """같은 id의 장소를 교체. 없으면 None."""
        ...

    async def remove(self, place_id: PlaceId) -> bool:
        """삭제. 없으면 False."""
        ...
