# 게시글 저장소 레이어 (MongoDB)
# - 조회/검색/페이지네이션/부분 수정/삭제
# - 검색은 title 또는 content 에 대한 대소문자 구분 부분 문자열 매칭

import re
from datetime import datetime
from typing import List, Optional

from beanie.operators import Or, RegEx

from ..models.counter import next_sequence
from ..models.post import Post
from .base import PostQuery, PostRecord, PostRepository, RecordNotFound


def _to_record(post: Post) -> PostRecord:
    return PostRecord(
        id=post.id,
        title=post.title,
        content=post.content,
        published=post.published,
        author_id=post.author_id,
    )


class MongoPostRepository(PostRepository):
    async def create(self, title: str, content: str, author_id: int) -> PostRecord:
        post = Post(id=await next_sequence("posts"), title=title, content=content, author_id=author_id)
        await post.insert()
        return _to_record(post)

    async def get(self, post_id: int) -> Optional[PostRecord]:
        post = await Post.get(post_id)
        return _to_record(post) if post else None

    async def find(self, query: PostQuery) -> List[PostRecord]:
        # 주니어 개발자님께: MongoDB 의 limit(0) 은 "제한 없음" 이라서 take=0 은 따로 처리합니다.
        if query.take == 0:
            return []

        if query.search_string:
            # 사용자가 보낸 문자열은 정규식이 아니라 리터럴로 취급합니다 (options 없음 = 대소문자 구분)
            pattern = re.escape(query.search_string)
            cursor = Post.find(Or(RegEx(Post.title, pattern), RegEx(Post.content, pattern)))
        else:
            cursor = Post.find_all()

        cursor = cursor.sort(+Post.id)
        if query.skip:
            cursor = cursor.skip(query.skip)
        if query.take is not None:
            cursor = cursor.limit(query.take)
        return [_to_record(p) for p in await cursor.to_list()]

    async def update(self, post_id: int, changes: dict) -> PostRecord:
        collection = Post.get_motor_collection()
        result = await collection.update_one(
            {"_id": post_id},
            {"$set": {**changes, "updated_at": datetime.utcnow()}},
        )
        if result.matched_count == 0:
            raise RecordNotFound("post", post_id)
        post = await Post.get(post_id)
        if post is None:
            # update 직후 다른 요청이 삭제한 경우
            raise RecordNotFound("post", post_id)
        return _to_record(post)

    async def delete(self, post_id: int) -> None:
        result = await Post.get_motor_collection().delete_one({"_id": post_id})
        if result.deleted_count == 0:
            raise RecordNotFound("post", post_id)
