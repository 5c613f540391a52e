"""PlaceReader Port."""

from typing import Protocol

from sportera.location.domain.entities import Place


class PlaceReader(Protocol):
    """주변 검색용 읽기 전용 장소 조회 인터페이스.

    구현체:
        - PlaceCatalogService (application/catalog/services/)
        - PlaceStore 구현체들
    """

    async def list_all(self) -> list[Place]:
        """전체 장소 (삽입 순서 유지)."""
        ...
