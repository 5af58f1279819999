# User 도메인 모델 (Beanie Document)
# - 정수 id, 이메일, 이름, 비밀번호 해시, 생성일
# - 이메일은 unique 인덱스 (대소문자 구분)

from datetime import datetime
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field


class User(Document):
    id: Optional[int] = None  # counters 컬렉션에서 발급
    email: Indexed(str, unique=True)  # 중복 방지 인덱스
    name: str
    hashed_password: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"  # 컬렉션명
