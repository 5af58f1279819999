# 저장소 인터페이스 정의
# - 서비스 레이어는 이 추상 클래스에만 의존합니다
# - 구현체: user_repository.py / post_repository.py (MongoDB), memory.py (프로세스 내부)
#
# 저장소 구현체가 지켜야 할 규칙
# - 이메일 유일성 위반은 UniqueViolation 으로 알린다
# - 쓰기 대상이 이미 없으면 RecordNotFound 를 발생시킨다
# - 목록 조회는 id 오름차순, 검색어는 title/content 에 대한 대소문자 구분 부분 문자열 매칭

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field


class UniqueViolation(Exception):
    """유니크 제약 위반 (예: 이미 존재하는 이메일)"""

    def __init__(self, field: str, value: str = None):
        self.field = field
        self.value = value
        super().__init__(f"unique constraint violated on '{field}'")


class RecordNotFound(Exception):
    """쓰기 시점에 대상 레코드가 존재하지 않음"""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} does not exist")


class UserRecord(BaseModel):
    id: int
    email: str
    name: str
    hashed_password: str = Field(repr=False)


class PostRecord(BaseModel):
    id: int
    title: str
    content: str
    published: bool = False
    author_id: int


class PostQuery(BaseModel):
    """목록 조회 조건. None 인 값은 적용하지 않습니다."""
    skip: Optional[int] = Field(default=None, ge=0)
    take: Optional[int] = Field(default=None, ge=0)
    search_string: Optional[str] = None


class UserRepository(ABC):
    @abstractmethod
    async def create(self, email: str, name: str, hashed_password: str) -> UserRecord:
        """새 사용자를 저장합니다. 이메일이 중복되면 UniqueViolation."""

    @abstractmethod
    async def get(self, user_id: int) -> Optional[UserRecord]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...


class PostRepository(ABC):
    @abstractmethod
    async def create(self, title: str, content: str, author_id: int) -> PostRecord:
        ...

    @abstractmethod
    async def get(self, post_id: int) -> Optional[PostRecord]:
        ...

    @abstractmethod
    async def find(self, query: PostQuery) -> List[PostRecord]:
        ...

    @abstractmethod
    async def update(self, post_id: int, changes: dict) -> PostRecord:
        """changes 에 들어 있는 필드만 바꿉니다. 대상이 없으면 RecordNotFound."""

    @abstractmethod
    async def delete(self, post_id: int) -> None:
        """대상이 없으면 RecordNotFound."""
