# Post 도메인 모델 (Beanie Document)
# - 초안(published=False)으로 생성되고 publish 로만 공개 상태가 됩니다
# - author_id 는 생성 시점에 정해지며 이후 바뀌지 않습니다

from datetime import datetime
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field


class Post(Document):
    id: Optional[int] = None  # counters 컬렉션에서 발급
    title: str
    content: str
    published: bool = False
    author_id: Indexed(int)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "posts"
