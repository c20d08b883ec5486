"""
고유 코드 생성기
영문 대소문자와 숫자(62자)로 구성된 임의 코드를 생성합니다.
"""
import logging
import secrets
import string
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def random_code(length: int) -> str:
    """길이 length의 임의 코드를 반환합니다."""
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


async def generate_unique_code(
    length: int,
    exists: Callable[[str], Awaitable[bool]]
) -> str:
    """
    저장소에 없는 코드가 나올 때까지 생성을 반복합니다.

    재시도 횟수에 상한은 없습니다. 길이 25 기준 후보 공간이 62^25(약 6.4e44)이므로
    기존 코드 n개에 대해 한 번 충돌할 확률은 n / 62^25 이고, 실제로는 첫 시도에 끝납니다.

    Args:
        length: 코드 길이
        exists: 후보 코드가 이미 저장되어 있는지 확인하는 비동기 함수

    Returns:
        고유 코드
    """
    if length <= 0:
        raise ValueError(f"code length must be positive: {length}")

    attempts = 0
    while True:
        attempts += 1
        candidate = random_code(length)
        if not await exists(candidate):
            if attempts > 1:
                logger.warning(f"고유 코드 생성: {attempts}회 시도 후 성공")
            return candidate
