# 게시글 라우터 (모든 엔드포인트 인증 필요)
# - POST   /post                : 초안 생성
# - PUT    /post/publish/{id}   : 공개
# - GET    /post/{id}           : 단건 조회
# - GET    /post                : 목록 (skip, take, searchString)
# - PUT    /post/{id}           : 부분 수정
# - DELETE /post/{id}           : 삭제

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..core.security import get_current_user
from ..repositories.base import PostQuery
from ..schemas.post_schema import DeleteResult, PostCreate, PostPatch, PostPublic
from ..services.post_service import PostService, get_post_service

# 라우터 단위 의존성: 핸들러보다 먼저 Auth Guard 가 실행됩니다
router = APIRouter(prefix="/post", tags=["posts"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=PostPublic, summary="게시글 초안 생성")
async def create_post_draft(payload: PostCreate, service: PostService = Depends(get_post_service)):
    return await service.create_draft(payload.title, payload.content, payload.author_email)


@router.put("/publish/{post_id}", response_model=PostPublic, summary="게시글 공개")
async def publish_post(post_id: int, service: PostService = Depends(get_post_service)):
    return await service.publish(post_id)


@router.get("/{post_id}", response_model=PostPublic, summary="게시글 단건 조회")
async def get_post_by_id(post_id: int, service: PostService = Depends(get_post_service)):
    return await service.get_by_id(post_id)


@router.get("", response_model=List[PostPublic], summary="게시글 목록 (검색/페이지네이션)")
async def get_posts(
    skip: Optional[int] = Query(None, ge=0),
    take: Optional[int] = Query(None, ge=0),
    search_string: Optional[str] = Query(None, alias="searchString"),
    service: PostService = Depends(get_post_service),
):
    return await service.list(PostQuery(skip=skip, take=take, search_string=search_string))


@router.put("/{post_id}", response_model=PostPublic, summary="게시글 부분 수정")
async def update_post(post_id: int, patch: PostPatch, service: PostService = Depends(get_post_service)):
    return await service.update(post_id, patch)


@router.delete("/{post_id}", response_model=DeleteResult, summary="게시글 삭제")
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    return await service.delete(post_id)
