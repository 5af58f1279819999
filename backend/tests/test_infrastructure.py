# 저장소 선택 / DB 연결 재시도 테스트 (실제 MongoDB 불필요)
import asyncio

import pytest
from pymongo.errors import ConnectionFailure

from blog_api.core.config import settings
from blog_api.core.retry import create_db_retry_decorator
from blog_api.repositories.factory import get_post_repository, get_user_repository
from blog_api.repositories.memory import InMemoryPostRepository, InMemoryUserRepository
from blog_api.repositories.post_repository import MongoPostRepository
from blog_api.repositories.user_repository import MongoUserRepository


def test_memory_backend_reuses_one_store(monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "memory")
    assert isinstance(get_user_repository(), InMemoryUserRepository)
    assert isinstance(get_post_repository(), InMemoryPostRepository)
    assert get_user_repository() is get_user_repository()


def test_mongo_backend(monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "mongo")
    assert isinstance(get_user_repository(), MongoUserRepository)
    assert isinstance(get_post_repository(), MongoPostRepository)


def test_db_retry_recovers_from_transient_failure():
    attempts = []

    @create_db_retry_decorator(max_attempts=3, initial_wait=0, max_wait=0)
    async def ping():
        attempts.append(1)
        if len(attempts) < 3:
            raise ConnectionFailure("not yet")
        return "pong"

    assert asyncio.run(ping()) == "pong"
    assert len(attempts) == 3


def test_db_retry_gives_up_and_reraises():
    @create_db_retry_decorator(max_attempts=2, initial_wait=0, max_wait=0)
    async def ping():
        raise ConnectionFailure("down")

    with pytest.raises(ConnectionFailure):
        asyncio.run(ping())
