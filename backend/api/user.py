"""
사용자 API
- GET: 사용자 목록 조회 (Bearer 토큰 필요)
- POST: 이메일 인증 링크 발송
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_reference_repository, get_verification_service
from core.security import TokenDep
from services.repositories import ReferenceRepository
from services.verification import VerificationService

router = APIRouter(prefix="/api/user", tags=["User"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_users(
    token: TokenDep,
    repository: ReferenceRepository = Depends(get_reference_repository)
):
    """
    사용자 목록 전체를 반환합니다.

    저장소 오류도 401로 응답합니다 (기존 클라이언트 호환).
    """
    try:
        users = await repository.list_users()
    except Exception as e:
        logger.error(f"사용자 목록 조회 오류: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Error Unexpected"}
        )

    return [user.to_dict() for user in users]


def extract_email(payload: Any) -> Any:
    """요청 본문(JSON 문자열 또는 {"email": ...})에서 이메일을 꺼냅니다."""
    if isinstance(payload, dict):
        return payload.get("email")
    return payload


@router.post("")
async def request_verification(
    request: Request,
    service: VerificationService = Depends(get_verification_service)
):
    """
    이메일로 폼 접근 링크를 발송합니다.

    본문은 이메일 주소를 담은 JSON 문자열입니다. (예: "user@example.com")

    Returns:
        {success, message} 또는 {success: false, errors: [{field, message}]}
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    result = await service.request_verification(extract_email(payload))
    return result.model_dump()
