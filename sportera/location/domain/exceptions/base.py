"""Location Domain Error Base."""

from sportera._shared.exceptions import SporteraError


class DomainError(SporteraError):
    """Location 도메인 예외 베이스 클래스."""

    pass
