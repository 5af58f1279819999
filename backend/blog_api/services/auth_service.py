# 인증 서비스 레이어
# - 회원가입 (비밀번호 해싱, 이메일 중복 처리)
# - 로그인 (비밀번호 검증, JWT 토큰 발급)

import logging

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool

from ..core.exceptions import DuplicateEmailError, InternalFailureError, InvalidCredentialsError
from ..core.security import create_access_token, dummy_password_hash, get_password_hash, verify_password
from ..repositories.base import UniqueViolation, UserRepository
from ..repositories.factory import get_user_repository
from ..schemas.user_schema import AccessToken, UserPublic

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, name: str, email: str, password: str) -> UserPublic:
        # bcrypt 는 CPU 작업이라 스레드풀에서 실행합니다
        hashed = await run_in_threadpool(get_password_hash, password)
        try:
            user = await self.repo.create(email=email, name=name, hashed_password=hashed)
        except UniqueViolation:
            raise DuplicateEmailError()
        except Exception as e:
            logger.error(f"[AuthService] 사용자 생성 실패 ({email}): {e}", exc_info=True)
            raise InternalFailureError() from e
        logger.info(f"[AuthService] 회원가입 완료: user_id={user.id}")
        return UserPublic(id=user.id, email=user.email, name=user.name)

    async def login(self, email: str, password: str) -> AccessToken:
        user = await self.repo.get_by_email(email)
        if not user:
            # 없는 이메일도 같은 비용의 검증을 거친 뒤 같은 예외로 실패합니다
            await run_in_threadpool(verify_password, password, dummy_password_hash())
            raise InvalidCredentialsError()
        if not await run_in_threadpool(verify_password, password, user.hashed_password):
            raise InvalidCredentialsError()
        token = create_access_token(user.id, user.email, user.name)
        return AccessToken(access_token=token)


def get_auth_service(repo: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(repo)
