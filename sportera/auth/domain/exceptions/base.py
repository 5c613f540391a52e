"""Auth Domain Error Base."""

from sportera._shared.exceptions import SporteraError


class DomainError(SporteraError):
    """Auth 도메인 예외 베이스 클래스."""

    pass
