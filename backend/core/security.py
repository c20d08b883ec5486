"""
Bearer 토큰 확인
읽기 전용 API 앞단의 간단한 접근 게이트입니다.

토큰 값 자체는 어떤 저장소와도 대조하지 않습니다.
비어 있지 않은 토큰이 있는지만 확인합니다.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header

from core.errors import AuthorizationError

BEARER_PREFIX = "Bearer "


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """
    Authorization 헤더에서 토큰을 추출합니다.

    "Bearer " 접두사가 있으면 제거하고, 없으면 헤더 값 전체를 토큰으로 봅니다.

    Args:
        authorization: Authorization 헤더 값

    Returns:
        토큰 문자열 (없으면 None)
    """
    token = authorization
    if token and token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    return token or None


async def require_bearer_token(
    authorization: Annotated[Optional[str], Header()] = None
) -> str:
    """토큰이 없으면 AuthorizationError를 발생시키는 의존성"""
    token = extract_token(authorization)
    if not token:
        raise AuthorizationError()
    return token


TokenDep = Annotated[str, Depends(require_bearer_token)]
