# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTPException 대신 아래 예외들을 발생시키고,
# api/error_handlers.py 가 각 예외를 HTTP 상태 코드와 응답 본문으로 바꿔 줍니다.
# 이렇게 하면 서비스 로직을 FastAPI 없이도 테스트할 수 있습니다.


class BlogAPIError(Exception):
    """블로그 API 의 모든 도메인 예외의 기본 클래스

    Attributes:
        code: 클라이언트에 노출되는 에러 코드 (예: "POST_NOT_FOUND")
        message: 클라이언트에 노출되는 메시지
        status_code: 매핑될 HTTP 상태 코드
    """
    code = "BLOG_API_ERROR"
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class DuplicateEmailError(BlogAPIError):
    """회원가입 시 이미 등록된 이메일"""
    code = "DUPLICATE_EMAIL"
    status_code = 409
    default_message = "Email already registered, please provide another one"


class InvalidCredentialsError(BlogAPIError):
    """로그인 실패

    주니어 개발자님께: 이메일이 없는 경우와 비밀번호가 틀린 경우 모두 이 예외를 씁니다.
    메시지가 같아야 어떤 이메일이 가입되어 있는지 외부에서 알 수 없습니다.
    """
    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Invalid email or password"


class InvalidTokenError(BlogAPIError):
    """서명 불일치, 형식 오류, 만료된 토큰"""
    code = "INVALID_TOKEN"
    status_code = 401
    default_message = "Could not validate credentials"


class UnauthenticatedError(BlogAPIError):
    """보호된 라우트에 유효한 인증 없이 접근"""
    code = "UNAUTHENTICATED"
    status_code = 401
    default_message = "Could not validate credentials"


class AuthorNotFoundError(BlogAPIError):
    code = "AUTHOR_NOT_FOUND"
    status_code = 404
    default_message = "Author not found"


class PostNotFoundError(BlogAPIError):
    code = "POST_NOT_FOUND"
    status_code = 404
    default_message = "Post not found"

    def __init__(self, post_id: int = None, message: str = None):
        self.post_id = post_id
        super().__init__(message)


class InternalFailureError(BlogAPIError):
    """예상하지 못한 저장소 오류

    주니어 개발자님께: 상세 내용은 서버 로그에만 남기고,
    클라이언트에는 항상 같은 메시지만 돌려줍니다.
    """
    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Something went wrong"
