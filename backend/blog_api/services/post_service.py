# 게시글 서비스 레이어
# - 초안 생성 (작성자 이메일 → 사용자 id)
# - 조회 / 검색 + 페이지네이션
# - 공개(publish), 부분 수정, 삭제
#
# 주니어 개발자님께: 쓰기 작업은 모두 먼저 조회해서 존재 여부를 확인합니다.
# 조회와 쓰기 사이에 다른 요청이 글을 지울 수 있는데, 그 경우 저장소가
# RecordNotFound 를 발생시키고 여기서 PostNotFoundError 로 바꿔 줍니다.

import logging
from typing import List

from fastapi import Depends

from ..core.exceptions import AuthorNotFoundError, PostNotFoundError
from ..repositories.base import PostQuery, PostRecord, PostRepository, RecordNotFound, UserRepository
from ..repositories.factory import get_post_repository, get_user_repository
from ..schemas.post_schema import DeleteResult, PostPatch, PostPublic

logger = logging.getLogger(__name__)


def _to_public(post: PostRecord) -> PostPublic:
    return PostPublic(
        id=post.id,
        title=post.title,
        content=post.content,
        published=post.published,
        author_id=post.author_id,
    )


class PostService:
    def __init__(self, posts: PostRepository, users: UserRepository):
        self.posts = posts
        self.users = users

    async def create_draft(self, title: str, content: str, author_email: str) -> PostPublic:
        author = await self.users.get_by_email(author_email)
        if not author:
            raise AuthorNotFoundError()
        post = await self.posts.create(title=title, content=content, author_id=author.id)
        logger.info(f"[PostService] 초안 생성: post_id={post.id}, author_id={author.id}")
        return _to_public(post)

    async def get_by_id(self, post_id: int) -> PostPublic:
        return _to_public(await self._get_or_404(post_id))

    async def list(self, query: PostQuery) -> List[PostPublic]:
        return [_to_public(p) for p in await self.posts.find(query)]

    async def publish(self, post_id: int) -> PostPublic:
        # 이미 공개된 글을 다시 publish 해도 에러가 아닙니다
        await self._get_or_404(post_id)
        post = await self._write(post_id, {"published": True})
        logger.info(f"[PostService] 게시글 공개: post_id={post_id}")
        return post

    async def update(self, post_id: int, patch: PostPatch) -> PostPublic:
        existing = await self._get_or_404(post_id)
        changes = patch.changes()
        if not changes:
            return _to_public(existing)
        return await self._write(post_id, changes)

    async def delete(self, post_id: int) -> DeleteResult:
        await self._get_or_404(post_id)
        try:
            await self.posts.delete(post_id)
        except RecordNotFound:
            raise PostNotFoundError(post_id)
        logger.info(f"[PostService] 게시글 삭제: post_id={post_id}")
        return DeleteResult(id=post_id, message=f"Successfully deleted post with id {post_id}")

    async def _get_or_404(self, post_id: int) -> PostRecord:
        post = await self.posts.get(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def _write(self, post_id: int, changes: dict) -> PostPublic:
        try:
            return _to_public(await self.posts.update(post_id, changes))
        except RecordNotFound:
            raise PostNotFoundError(post_id)


def get_post_service(
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
) -> PostService:
    return PostService(posts, users)
