"""Auth HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from sportera.auth.domain.enums import AccountKind


class RegisterRequestSchema(BaseModel):
    """회원가입 요청. 형식 검증은 도메인에서 수행합니다."""

    name: str
    email: str
    password: str = Field(..., description="6자 이상")
    kind: AccountKind = AccountKind.STANDARD
    organization_name: str | None = Field(None, description="단체 계정은 필수")
    organization_description: str | None = None


class LoginRequestSchema(BaseModel):
    email: str
    password: str


class AccountSchema(BaseModel):
    """공개 계정 정보. 비밀번호 해시는 포함하지 않습니다."""

    id: str
    name: str
    email: str
    kind: AccountKind
    points: int
    organization_name: str | None = None
    organization_description: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Account created"
    data: AccountSchema


class LoginData(BaseModel):
    account: AccountSchema
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    data: LoginData


class AccountResponse(BaseModel):
    success: bool = True
    data: AccountSchema
