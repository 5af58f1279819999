# 인증 라우터
# - 회원가입: POST /register
# - 로그인: POST /login
# - 내 정보: GET /me (인증 필요)

from fastapi import APIRouter, Depends

from ..core.security import get_current_user
from ..schemas.user_schema import AccessToken, AuthContext, LoginRequest, UserCreate, UserPublic
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserPublic, summary="회원가입 (이메일 중복 체크 포함)")
async def register(payload: UserCreate, service: AuthService = Depends(get_auth_service)):
    return await service.register(payload.name, payload.email, payload.password)


@router.post("/login", response_model=AccessToken, summary="로그인 (JWT Access 토큰 발급)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return await service.login(payload.email, payload.password)


@router.get("/me", response_model=UserPublic, summary="현재 로그인한 사용자")
async def me(auth: AuthContext = Depends(get_current_user)):
    return auth.user
