# 게시글 요청/응답 스키마 (Pydantic 모델)
# - 응답 필드명은 camelCase (authorId) 로 직렬화됩니다

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .user_schema import EmailAddress


class PostCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    author_email: EmailAddress = Field(alias="authorEmail")


class PostPatch(BaseModel):
    """부분 수정 요청

    주니어 개발자님께: 본문에 없는 필드는 model_fields_set 에 들어가지 않으므로
    "보내지 않음" 과 "null 로 보냄" 을 구분할 수 있습니다. null 은 허용하지 않습니다.
    """
    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator("title", "content")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value

    def changes(self) -> dict:
        return self.model_dump(include=self.model_fields_set)


class PostPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    content: str
    published: bool
    author_id: int = Field(alias="authorId")


class DeleteResult(BaseModel):
    id: int
    message: str
