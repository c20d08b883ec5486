"""
오류 정의
요청 처리 중 발생하는 오류 유형을 정의합니다.

필드 검증 오류(FieldError)는 예외가 아닌 데이터로 누적되어 반환되고,
나머지 오류는 각 작업의 최상위 핸들러에서 로깅 후 일반 메시지로 변환됩니다.
"""
from typing import Optional


class IntakeError(Exception):
    """모든 처리 오류의 기본 클래스"""

    def __init__(self, message: str, original_exception: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class UniquenessConflict(IntakeError):
    """고유 제약 조건 위반 (예: 크레디터 이메일 중복)"""

    def __init__(self, field: str, original_exception: Optional[BaseException] = None):
        super().__init__(f"duplicate value for unique field '{field}'", original_exception)
        self.field = field


class DeliveryError(IntakeError):
    """메일 발송 실패"""


class StorageError(IntakeError):
    """데이터베이스 또는 파일 시스템 오류"""


class AuthorizationError(IntakeError):
    """Authorization 헤더 누락"""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
