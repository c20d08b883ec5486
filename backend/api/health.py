"""
헬스 체크 API
"""
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from core.database import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(db: SessionDep):
    """
    헬스 체크 엔드포인트
    데이터베이스 연결 상태 확인 (오류 상세는 로그에만 남김)
    """
    try:
        result = await db.execute(text("SELECT 1"))
        result.fetchone()
    except Exception as e:
        logger.error(f"헬스 체크 DB 오류: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "disconnected"}
        )

    return {
        "status": "healthy",
        "database": "connected"
    }
