"""FastAPI 의존성 정의

컨테이너에서 협력자를 꺼내 요청마다 Use Case를 조립합니다.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from sportera.auth.application.commands import LoginInteractor, RegisterAccountInteractor
from sportera.auth.application.common.dto import ValidatedAccount
from sportera.auth.application.common.exceptions import PermissionDeniedError
from sportera.auth.application.queries import GetAccountQueryService
from sportera.auth.application.token.queries import ValidateTokenQueryService
from sportera.auth.domain.exceptions import InvalidTokenError
from sportera.location.application.catalog import PlaceCatalogService
from sportera.location.application.nearby import GetNearbyPlacesQuery
from sportera.setup.config import Settings
from sportera.setup.container import Container

# =============================================================================
# 컨테이너
# =============================================================================


def get_container(request: Request) -> Container:
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_app_settings(container: ContainerDep) -> Settings:
    return container.settings


# =============================================================================
# Location
# =============================================================================


def get_nearby_query(container: ContainerDep) -> GetNearbyPlacesQuery:
    return GetNearbyPlacesQuery(
        container.place_store,
        max_radius_m=container.settings.max_search_radius_m,
    )


def get_place_catalog(container: ContainerDep) -> PlaceCatalogService:
    return PlaceCatalogService(container.place_store, clock=container.clock)


# =============================================================================
# Auth
# =============================================================================


def get_register_interactor(container: ContainerDep) -> RegisterAccountInteractor:
    return RegisterAccountInteractor(
        account_store=container.account_store,
        password_hasher=container.password_hasher,
        id_generator=container.id_generator,
        clock=container.clock,
    )


def get_login_interactor(container: ContainerDep) -> LoginInteractor:
    return LoginInteractor(
        account_store=container.account_store,
        password_hasher=container.password_hasher,
        token_service=container.token_service,
        token_ttl=container.settings.access_token_ttl,
    )


def get_validate_token(container: ContainerDep) -> ValidateTokenQueryService:
    return ValidateTokenQueryService(container.token_service, container.account_store)


def get_account_query(container: ContainerDep) -> GetAccountQueryService:
    return GetAccountQueryService(container.account_store)


# =============================================================================
# Bearer 인증
# =============================================================================


async def get_current_account(
    validate: Annotated[ValidateTokenQueryService, Depends(get_validate_token)],
    authorization: Optional[str] = Header(default=None),
) -> ValidatedAccount:
    """Authorization 헤더의 Bearer 토큰을 검증하고 계정 정보를 반환."""
    if not authorization:
        raise InvalidTokenError("Missing authorization header", reason="malformed")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidTokenError("Invalid authorization format", reason="malformed")

    return await validate.execute(token.strip())


async def get_current_organization(
    account: Annotated[ValidatedAccount, Depends(get_current_account)],
) -> ValidatedAccount:
    """단체 계정만 허용."""
    if not account.is_organization:
        raise PermissionDeniedError("Only organization accounts can manage places")
    return account


# =============================================================================
# 의존성 타입 별칭 (FastAPI Annotated 패턴)
# =============================================================================

SettingsDep = Annotated[Settings, Depends(get_app_settings)]
NearbyQueryDep = Annotated[GetNearbyPlacesQuery, Depends(get_nearby_query)]
PlaceCatalogDep = Annotated[PlaceCatalogService, Depends(get_place_catalog)]
RegisterDep = Annotated[RegisterAccountInteractor, Depends(get_register_interactor)]
LoginDep = Annotated[LoginInteractor, Depends(get_login_interactor)]
AccountQueryDep = Annotated[GetAccountQueryService, Depends(get_account_query)]
CurrentAccount = Annotated[ValidatedAccount, Depends(get_current_account)]
CurrentOrganization = Annotated[ValidatedAccount, Depends(get_current_organization)]
