"""Account 엔티티 및 값 객체 단위 테스트."""

from datetime import datetime, timedelta, timezone

import pytest

from sportera.auth.domain.entities import Account
from sportera.auth.domain.enums import AccountKind
from sportera.auth.domain.exceptions import (
    AccountNotFoundError,
    InsufficientPointsError,
    InvalidEmailError,
    ValidationError,
)
from sportera.auth.domain.value_objects import AccountId, Email, PasswordHash

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)


def make_account(**overrides) -> Account:
    params = {
        "id_": AccountId.generate(),
        "name": "Camille",
        "email": Email.parse("camille@example.fr"),
        "password_hash": PasswordHash(value="$2b$04$hash"),
        "kind": AccountKind.STANDARD,
        "now": NOW,
    }
    params.update(overrides)
    return Account.register(**params)


class TestEmail:
    """Email 값 객체 테스트."""

    def test_parse_normalizes(self) -> None:
        assert Email.parse("  Camille@Example.FR ").value == "camille@example.fr"

    @pytest.mark.parametrize("raw", ["", "camille", "camille@", "@example.fr", "a@b.c"])
    def test_invalid_format(self, raw: str) -> None:
        with pytest.raises(InvalidEmailError) as exc_info:
            Email.parse(raw)
        assert exc_info.value.field == "email"

    def test_constructor_requires_normalized_value(self) -> None:
        with pytest.raises(InvalidEmailError):
            Email(value="Camille@example.fr")


class TestAccountId:
    def test_malformed_id_is_not_found(self) -> None:
        with pytest.raises(AccountNotFoundError):
            AccountId.from_string("42")


class TestPasswordHash:
    def test_repr_hides_value(self) -> None:
        assert "$2b$" not in repr(PasswordHash(value="$2b$04$secret"))


class TestAccountRegister:
    """Account.register 검증 테스트."""

    def test_standard_account_starts_with_zero_points(self) -> None:
        account = make_account(organization_name="ignored")

        assert account.points == 0
        assert account.organization_name is None
        assert account.is_organization is False

    @pytest.mark.parametrize("name", ["", "  ", "x" * 51])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_account(name=name)
        assert exc_info.value.field == "name"

    def test_organization_requires_name(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_account(kind=AccountKind.ORGANIZATION, organization_name="  ")
        assert exc_info.value.field == "organization_name"

    def test_organization_name_length(self) -> None:
        with pytest.raises(ValidationError):
            make_account(kind=AccountKind.ORGANIZATION, organization_name="x" * 101)

    def test_organization_description_length(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_account(
                kind=AccountKind.ORGANIZATION,
                organization_name="Club",
                organization_description="x" * 501,
            )
        assert exc_info.value.field == "organization_description"

    def test_organization_account(self) -> None:
        account = make_account(kind=AccountKind.ORGANIZATION, organization_name=" Club Sportif ")
        assert account.is_organization
        assert account.organization_name == "Club Sportif"


class TestAccountPoints:
    """포인트 증감 테스트."""

    def test_add_and_subtract(self) -> None:
        account = make_account()
        later = NOW + timedelta(minutes=5)

        account.add_points(30, later)
        account.subtract_points(10, later)

        assert account.points == 20
        assert account.updated_at == later

    def test_subtract_beyond_balance_fails_without_change(self) -> None:
        account = make_account()
        account.add_points(5, NOW)

        with pytest.raises(InsufficientPointsError):
            account.subtract_points(6, NOW + timedelta(minutes=1))
        assert account.points == 5
        assert account.updated_at == NOW

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_account().add_points(-1, NOW)


class TestAccountView:
    def test_public_view_has_no_secret(self) -> None:
        account = make_account()
        view = account.to_public()

        assert view.id == str(account.id_)
        assert view.email == "camille@example.fr"
        assert not hasattr(view, "password_hash")
