"""Bcrypt Password Hasher.

PasswordHasher 포트의 구현체입니다.
"""

from __future__ import annotations

import bcrypt

from sportera.auth.application.common.exceptions import CorruptedPasswordHashError
from sportera.auth.domain.value_objects.password_hash import PasswordHash
from sportera.setup.constants import DEFAULT_BCRYPT_ROUNDS

# bcrypt는 72바이트까지만 사용
BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    """bcrypt 기반 비밀번호 해시.

    Args:
        rounds: cost factor (테스트에서는 4로 낮춰서 사용)
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> PasswordHash:
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds))
        return PasswordHash(value=hashed.decode("ascii"))

    def verify(self, password: str, password_hash: PasswordHash) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.value.encode("ascii"))
        except (ValueError, UnicodeEncodeError) as e:
            raise CorruptedPasswordHashError() from e
