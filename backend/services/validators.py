"""
공통 입력 검증 유틸리티
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_blank(value: Any) -> bool:
    """None, 빈 문자열, 공백 문자열이면 True"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_valid_email(value: str) -> bool:
    # fullmatch: $ 는 끝의 "\n" 앞에서도 일치하므로 match 사용 불가
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_missing(value: Any) -> bool:
    """None 또는 빈 문자열이면 True (공백 문자열은 값이 있는 것으로 봄)"""
    return value is None or value == ""


def unformat_price(price: str) -> str:
    """천 단위 구분자(,)를 제거합니다. 예: "1,000,000" -> "1000000" """
    return price.replace(",", "")


def parse_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None


def is_decimal(value: str) -> bool:
    try:
        return Decimal(unformat_price(value).strip()).is_finite()
    except (InvalidOperation, AttributeError):
        return False
