"""
Tagihan Intake Backend 메인 애플리케이션
채권 신고 폼 접수 및 이메일 인증 링크 발급 서비스
"""
import logging
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from core.config import settings
from core.database import dispose_engine
from core.errors import AuthorizationError
from services.service_container import service_container
from api import health, sifat_tagihan, user, tagihan

# 로깅 설정 (애플리케이션 시작 시)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# 특정 로거 레벨 조정 (SQLAlchemy는 WARNING으로)
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    # 시작 시
    logger.info("🚀 Tagihan Intake 애플리케이션 시작")
    logger.info(f"📊 데이터베이스: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else 'Not configured'}")
    logger.info(f"📁 업로드 디렉터리: {settings.UPLOAD_DIR}")

    # 메일 발송기는 시작 시 한 번 생성하여 요청 간 공유
    service_container.get_mailer()

    yield

    # 종료 시
    await dispose_engine()
    logger.info("👋 Tagihan Intake 애플리케이션 종료")


async def authorization_error_handler(request: Request, exc: AuthorizationError):
    """Authorization 헤더 누락 시 401 응답"""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": "Unauthorized"}
    )


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성"""
    app = FastAPI(
        title="Tagihan Intake",
        description="채권 신고 폼 접수 및 이메일 인증 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS 미들웨어 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthorizationError, authorization_error_handler)

    # 라우터 등록 (경로 파라미터로 시작하는 tagihan 라우터는 마지막)
    app.include_router(health.router, tags=["Health"])
    app.include_router(sifat_tagihan.router)
    app.include_router(user.router)
    app.include_router(tagihan.router)

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return {
            "service": "Tagihan Intake",
            "version": "1.0.0",
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info"
    )
