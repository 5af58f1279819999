# 프로세스 내부 저장소 구현
# - STORAGE_BACKEND=memory 일 때 사용 (MongoDB 없이 로컬 실행)
# - 테스트에서 dependency_overrides 로 주입
#
# 주니어 개발자님께: 아래 메서드들은 내부에서 await 하지 않으므로
# 이벤트 루프 하나 안에서는 각 호출이 중간에 끊기지 않고 원자적으로 실행됩니다.

import itertools
from typing import Dict, List, Optional

from .base import (
    PostQuery,
    PostRecord,
    PostRepository,
    RecordNotFound,
    UniqueViolation,
    UserRecord,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: Dict[int, UserRecord] = {}
        self._ids_by_email: Dict[str, int] = {}
        self._seq = itertools.count(1)

    async def create(self, email: str, name: str, hashed_password: str) -> UserRecord:
        if email in self._ids_by_email:
            raise UniqueViolation("email", email)
        user = UserRecord(id=next(self._seq), email=email, name=name, hashed_password=hashed_password)
        self._users[user.id] = user
        self._ids_by_email[email] = user.id
        return user.model_copy()

    async def get(self, user_id: int) -> Optional[UserRecord]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        user_id = self._ids_by_email.get(email)
        return await self.get(user_id) if user_id is not None else None


class InMemoryPostRepository(PostRepository):
    def __init__(self):
        self._posts: Dict[int, PostRecord] = {}
        self._seq = itertools.count(1)

    async def create(self, title: str, content: str, author_id: int) -> PostRecord:
        post = PostRecord(id=next(self._seq), title=title, content=content, author_id=author_id)
        self._posts[post.id] = post
        return post.model_copy()

    async def get(self, post_id: int) -> Optional[PostRecord]:
        post = self._posts.get(post_id)
        return post.model_copy() if post else None

    async def find(self, query: PostQuery) -> List[PostRecord]:
        posts = sorted(self._posts.values(), key=lambda p: p.id)
        if query.search_string:
            # 대소문자 구분 (MongoDB 구현체의 $regex 와 동일)
            posts = [
                p for p in posts
                if query.search_string in p.title or query.search_string in p.content
            ]
        start = query.skip or 0
        end = start + query.take if query.take is not None else None
        return [p.model_copy() for p in posts[start:end]]

    async def update(self, post_id: int, changes: dict) -> PostRecord:
        post = self._posts.get(post_id)
        if post is None:
            raise RecordNotFound("post", post_id)
        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated.model_copy()

    async def delete(self, post_id: int) -> None:
        if self._posts.pop(post_id, None) is None:
            raise RecordNotFound("post", post_id)
