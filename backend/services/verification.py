"""
이메일 인증 서비스
이메일별 인증 코드를 발급/갱신하고 폼 접근 링크를 메일로 보냅니다.

처리 흐름:
1. 이메일로 기존 인증 레코드 조회
2. 없으면 새 코드 생성 후 레코드 생성 (만료: 현재 + 24시간)
3. 만료되었으면 코드 재생성 및 만료 시각 재설정
4. 유효하면 기존 코드 재사용
5. 모든 경우에 링크 메일 발송

메일 발송이 실패해도 이미 저장된 인증 레코드는 되돌리지 않습니다.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Union

from models.forms import ActionResult, FieldError, ValidationFailure
from services.code_generator import generate_unique_code
from services.mailer import Mailer, MailMessage
from services.repositories import VerificationRepository
from services.validators import is_missing, is_valid_email

logger = logging.getLogger(__name__)

MESSAGE_SENT = "Email berhasil terkirim!"
MESSAGE_FAILED = "Email gagal dikirim"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(value: datetime) -> datetime:
    # 시간대 정보가 없는 값은 UTC로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_email_field(email) -> List[FieldError]:
    """이메일 필드를 검증합니다."""
    if is_missing(email):
        return [FieldError(field="email", message="Email tidak boleh kosong!")]
    if not isinstance(email, str) or not is_valid_email(email):
        return [FieldError(field="email", message="Format email tidak valid!")]
    return []


@dataclass
class IssuedCode:
    """발급 결과"""
    code: str
    is_new: bool
    expiration_date: datetime


class VerificationService:
    """이메일 인증 서비스"""

    def __init__(
        self,
        repository: VerificationRepository,
        mailer: Mailer,
        site_url: str,
        sender: str,
        subject: str,
        bcc: Optional[str] = None,
        code_length: int = 25,
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow
    ):
        """
        초기화

        Args:
            repository: 인증 레코드 저장소
            mailer: 메일 발송기 (애플리케이션 시작 시 생성된 인스턴스)
            site_url: 링크 기준 URL
            sender: 발신자
            subject: 메일 제목
            bcc: 숨은 참조 (선택)
            code_length: 코드 길이
            ttl: 코드 유효 기간
            clock: 현재 시각 함수 (테스트용 주입)
        """
        self.repository = repository
        self.mailer = mailer
        self.site_url = site_url.rstrip("/")
        self.sender = sender
        self.subject = subject
        self.bcc = bcc
        self.code_length = code_length
        self.ttl = ttl
        self.clock = clock

    async def _new_code(self) -> str:
        return await generate_unique_code(self.code_length, self.repository.code_exists)

    async def issue_code(self, email: str) -> IssuedCode:
        """
        이메일에 대한 인증 코드를 발급하거나 재사용합니다.

        Raises:
            StorageError: 저장소 오류
        """
        now = self.clock()
        expiration_date = now + self.ttl
        record = await self.repository.find_by_email(email)

        if record is None:
            code = await self._new_code()
            await self.repository.create(email, code, expiration_date)
            logger.info(f"인증 코드 생성: email={email}")
            return IssuedCode(code=code, is_new=True, expiration_date=expiration_date)

        if _as_aware(record.expiration_date) < now:
            code = await self._new_code()
            await self.repository.refresh(record, code, expiration_date)
            logger.info(f"만료된 인증 코드 재발급: email={email}")
            return IssuedCode(code=code, is_new=True, expiration_date=expiration_date)

        logger.info(f"유효한 인증 코드 재사용: email={email}")
        return IssuedCode(
            code=record.unique_code,
            is_new=False,
            expiration_date=_as_aware(record.expiration_date)
        )

    def build_link(self, code: str) -> str:
        return f"{self.site_url}/verify/{code}"

    def build_message(self, email: str, link: str) -> MailMessage:
        html = (
            "<h2>Hi!</h2>"
            f'<p>Click the following link to access the form: <a href="{link}">{link}</a></p>'
        )
        return MailMessage(
            sender=self.sender,
            to=email,
            bcc=self.bcc,
            subject=self.subject,
            text=f"Hi! Click the following link to access the form: {link}",
            html=html
        )

    async def request_verification(self, email) -> Union[ValidationFailure, ActionResult]:
        """
        인증 링크 메일을 요청합니다.

        Args:
            email: 이메일 주소

        Returns:
            검증 실패 시 ValidationFailure, 그 외 ActionResult
        """
        errors = validate_email_field(email)
        if errors:
            return ValidationFailure(errors=errors)

        try:
            issued = await self.issue_code(email)
            link = self.build_link(issued.code)
            await self.mailer.send(self.build_message(email, link))
        except Exception as e:
            logger.error(f"인증 메일 처리 실패: email={email}, error={e}", exc_info=True)
            return ActionResult(success=False, message=MESSAGE_FAILED)

        return ActionResult(success=True, message=MESSAGE_SENT)
