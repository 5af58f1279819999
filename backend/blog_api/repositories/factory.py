# 저장소 의존성 (FastAPI Depends 용)
# - STORAGE_BACKEND 설정에 따라 MongoDB 또는 프로세스 내부 구현체를 돌려줍니다
# - 테스트에서는 app.dependency_overrides 로 교체합니다

from functools import lru_cache

from ..core.config import settings
from .base import PostRepository, UserRepository
from .memory import InMemoryPostRepository, InMemoryUserRepository
from .post_repository import MongoPostRepository
from .user_repository import MongoUserRepository


@lru_cache
def _memory_user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@lru_cache
def _memory_post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


def get_user_repository() -> UserRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_user_repository()
    return MongoUserRepository()


def get_post_repository() -> PostRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_post_repository()
    return MongoPostRepository()
