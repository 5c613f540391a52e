"""PasswordHasher Port."""

from typing import Protocol

from sportera.auth.domain.value_objects.password_hash import PasswordHash


class PasswordHasher(Protocol):
    """단방향 비밀번호 해시 인터페이스.

    같은 평문도 호출마다 다른 해시를 만들어야 합니다 (salt).

    구현체:
        - BcryptPasswordHasher (infrastructure/security/)
    """

    def hash(self, password: str) -> PasswordHash:
        ...

    def verify(self, password: str, password_hash: PasswordHash) -> bool:
        """비밀번호 검증.

        Raises:
            CorruptedPasswordHashError: 저장된 해시 형식 오류
        """
        ...
