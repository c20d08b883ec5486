"""
채권 성격(SifatTagihan) 조회 API
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_reference_repository
from core.security import TokenDep
from services.repositories import ReferenceRepository

router = APIRouter(prefix="/api/sifattagihan", tags=["SifatTagihan"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_sifat_tagihan(
    token: TokenDep,
    repository: ReferenceRepository = Depends(get_reference_repository)
):
    """
    채권 성격 목록 전체를 반환합니다.

    Returns:
        채권 성격 목록 (필터링/페이지네이션 없음)
    """
    try:
        items = await repository.list_sifat_tagihan()
    except Exception as e:
        logger.error(f"채권 성격 조회 오류: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Error Unexpected"}
        )

    return [item.to_dict() for item in items]
