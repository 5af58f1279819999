# 사용자 저장소 레이어 (MongoDB)
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)

from typing import Optional

from pymongo.errors import DuplicateKeyError

from ..models.counter import next_sequence
from ..models.user import User
from .base import UniqueViolation, UserRecord, UserRepository


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        email=user.email,
        name=user.name,
        hashed_password=user.hashed_password,
    )


class MongoUserRepository(UserRepository):
    async def create(self, email: str, name: str, hashed_password: str) -> UserRecord:
        user = User(id=await next_sequence("users"), email=email, name=name, hashed_password=hashed_password)
        try:
            await user.insert()
        except DuplicateKeyError as e:
            # users.email unique 인덱스 위반. insert 가 실패했으므로 남는 문서는 없습니다.
            raise UniqueViolation("email", email) from e
        return _to_record(user)

    async def get(self, user_id: int) -> Optional[UserRecord]:
        user = await User.get(user_id)
        return _to_record(user) if user else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        user = await User.find_one(User.email == email)
        return _to_record(user) if user else None
