"""UUID Account ID Generator.

AccountIdGenerator 포트의 구현체입니다.
"""

import uuid

from sportera.auth.domain.value_objects.account_id import AccountId


class UuidAccountIdGenerator:
    """UUID v4 기반 계정 ID 생성기."""

    def __call__(self) -> AccountId:
        return AccountId(value=uuid.uuid4())
