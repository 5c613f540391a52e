"""Auth Controller.

회원가입, 로그인, 내 정보 조회 API입니다.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from sportera._shared.exceptions import SporteraError
from sportera.auth.application.common.dto import LoginRequest, RegisterRequest
from sportera.auth.presentation.http.schemas import (
    AccountResponse,
    AccountSchema,
    LoginData,
    LoginRequestSchema,
    LoginResponse,
    RegisterRequestSchema,
    RegisterResponse,
)
from sportera.setup.dependencies import (
    AccountQueryDep,
    CurrentAccount,
    LoginDep,
    RegisterDep,
)
from sportera.setup.metrics import increment_auth_attempt

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
    responses={
        400: {"description": "입력값 검증 실패"},
        409: {"description": "이미 등록된 이메일"},
    },
)
async def register(payload: RegisterRequestSchema, interactor: RegisterDep) -> RegisterResponse:
    try:
        view = await interactor.execute(
            RegisterRequest(
                name=payload.name,
                email=payload.email,
                password=payload.password,
                kind=payload.kind,
                organization_name=payload.organization_name,
                organization_description=payload.organization_description,
            )
        )
    except SporteraError:
        increment_auth_attempt("register", success=False)
        raise
    increment_auth_attempt("register", success=True)
    return RegisterResponse(data=AccountSchema.model_validate(view))


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="로그인",
    responses={401: {"description": "이메일 또는 비밀번호 불일치"}},
)
async def login(payload: LoginRequestSchema, interactor: LoginDep) -> LoginResponse:
    try:
        result = await interactor.execute(
            LoginRequest(email=payload.email, password=payload.password)
        )
    except SporteraError:
        increment_auth_attempt("login", success=False)
        raise
    increment_auth_attempt("login", success=True)
    return LoginResponse(
        data=LoginData(
            account=AccountSchema.model_validate(result.account),
            access_token=result.token,
            expires_at=result.expires_at,
        )
    )


@router.get("/me", response_model=AccountResponse, summary="내 정보 조회")
async def me(account: CurrentAccount, query: AccountQueryDep) -> AccountResponse:
    view = await query.execute(account.account_id)
    return AccountResponse(data=AccountSchema.model_validate(view))
