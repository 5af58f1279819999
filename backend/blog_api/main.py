# FastAPI 진입점
# - 로깅 설정
# - Beanie ODM 초기화 (MongoDB, STORAGE_BACKEND=mongo 인 경우)
# - 라우터 / 예외 핸들러 등록
# - CORS 설정

import logging
from datetime import datetime

from beanie import init_beanie
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient

from .api.auth import router as auth_router
from .api.error_handlers import register_error_handlers
from .api.posts import router as posts_router
from .core.config import settings
from .core.retry import create_db_retry_decorator
from .models.counter import Counter
from .models.post import Post
from .models.user import User

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="Blog API",
    description="회원가입/로그인과 게시글 초안·공개·검색 API",
    version=settings.APP_VERSION
)

# CORS 허용 도메인 세팅
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@create_db_retry_decorator(max_attempts=settings.MONGODB_CONNECT_ATTEMPTS)
async def _connect_mongo() -> AsyncIOMotorClient:
    # 주니어 개발자님께: serverSelectionTimeoutMS 안에 서버를 찾지 못하면
    # ServerSelectionTimeoutError 가 발생하고, 재시도 데코레이터가 다시 시도합니다.
    client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=5000)
    await client.admin.command("ping")
    return client


# Beanie 초기화 (앱 시작 시 1회)
@app.on_event("startup")
async def app_init():
    if settings.STORAGE_BACKEND == "memory":
        logger.warning("STORAGE_BACKEND=memory: 데이터는 프로세스 메모리에만 저장됩니다.")
        return
    try:
        client = await _connect_mongo()
        db = client.get_default_database()
        await init_beanie(database=db, document_models=[User, Post, Counter])
        logger.info(f"MongoDB 연결 성공: {settings.MONGODB_URI}")
    except Exception as e:
        # MongoDB 연결 실패 시에도 서버는 시작됩니다 (헬스체크는 계속 응답)
        logger.warning(f"MongoDB 연결 실패: {e}")
        logger.warning(f"MongoDB URI를 확인하세요: {settings.MONGODB_URI}")


# 간단한 헬스체크
@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.utcnow().isoformat()}


@app.get("/health")  # 배포 환경 헬스 체크용 엔드포인트
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}


app.include_router(auth_router)
app.include_router(posts_router)
