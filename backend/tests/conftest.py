# 공용 테스트 설정
# - settings 가 import 되기 전에 환경변수를 지정합니다
# - 저장소는 프로세스 내부 구현체를 테스트마다 새로 만듭니다

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from blog_api.main import app
from blog_api.repositories.factory import get_post_repository, get_user_repository
from blog_api.repositories.memory import InMemoryPostRepository, InMemoryUserRepository


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def client(user_repo, post_repo):
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_post_repository] = lambda: post_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
