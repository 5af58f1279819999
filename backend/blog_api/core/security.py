# 보안/인증 유틸리티
# - 비밀번호 해싱/검증
# - JWT 토큰 생성/검증
# - 현재 사용자 가져오기(의존성) = Auth Guard

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
from pydantic import ValidationError

from ..repositories.base import UserRepository
from ..repositories.factory import get_user_repository
from ..schemas.user_schema import AuthContext, TokenClaims, UserPublic
from .config import settings
from .exceptions import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # passlib 이 알아보지 못하는 해시(다른 스킴, 깨진 문자열)는 불일치로 취급합니다
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


@lru_cache
def dummy_password_hash() -> str:
    """존재하지 않는 이메일로 로그인할 때도 bcrypt 검증 비용을 치르기 위한 해시"""
    return get_password_hash("not-a-real-password")


def create_token(subject: dict, expires_delta: timedelta) -> str:
    now = datetime.now(tz=timezone.utc)
    payload = {
        "exp": now + expires_delta,
        "iat": now,
        "nbf": now,
        **subject,
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token


def create_access_token(user_id: int, email: str, name: str) -> str:
    return create_token(
        {"sub": str(user_id), "email": email, "name": name, "type": "access"},
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def decode_access_token(token: str) -> TokenClaims:
    """서명/만료/형식을 검증하고 claims 를 돌려줍니다.

    설정된 알고리즘 하나만 허용하므로 다른 키나 알고리즘(none 포함)으로
    서명된 토큰은 모두 InvalidTokenError 가 됩니다.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )
        claims = TokenClaims.model_validate(payload)
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e)) from e
    except ValidationError as e:
        raise InvalidTokenError("malformed token claims") from e

    if claims.type != "access":
        raise InvalidTokenError("not an access token")
    return claims


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    repo: UserRepository = Depends(get_user_repository),
) -> AuthContext:
    # Authorization: Bearer <token> 파싱 및 사용자 조회
    if not token:
        raise UnauthenticatedError()
    try:
        claims = decode_access_token(token)
    except InvalidTokenError as e:
        logger.debug(f"Rejected token on {request.url.path}: {e.message}")
        raise UnauthenticatedError() from e

    user = await repo.get(claims.user_id)
    if not user:
        # 토큰 발급 후 사용자가 사라진 경우
        raise UnauthenticatedError()

    auth = AuthContext(user=UserPublic(id=user.id, email=user.email, name=user.name), claims=claims)
    request.state.auth = auth
    return auth
