# 요청/응답 스키마 정의 (Pydantic 모델)

from datetime import datetime
from typing import Annotated, Optional

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator


def _check_email(value: str) -> str:
    # 형식만 검사하고 입력값은 그대로 둡니다 (EmailStr 은 도메인을 소문자로 바꿔 버림)
    # 이메일은 대소문자를 구분하는 조회 키입니다
    validate_email(value, check_deliverability=False)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailAddress
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: EmailAddress
    password: str = Field(min_length=1)


class AccessToken(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class UserPublic(BaseModel):
    """클라이언트에 돌려주는 사용자 정보 (비밀번호 해시 제외)"""
    id: int
    email: str
    name: str


class TokenClaims(BaseModel):
    sub: str
    email: str
    name: str
    type: str = "access"
    exp: Optional[datetime] = None
    iat: Optional[datetime] = None

    @field_validator("sub")
    @classmethod
    def _sub_is_user_id(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError("sub must be a user id")
        return value

    @property
    def user_id(self) -> int:
        return int(self.sub)


class AuthContext(BaseModel):
    """Auth Guard 를 통과한 요청의 호출자 정보"""
    user: UserPublic
    claims: TokenClaims
