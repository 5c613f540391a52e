"""Application Error Base."""

from sportera._shared.exceptions import SporteraError


class ApplicationError(SporteraError):
    """Location 애플리케이션 예외 베이스 클래스."""

    pass
