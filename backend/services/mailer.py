"""
메일 발송 서비스
SMTP로 인증 링크 메일을 발송합니다.

애플리케이션 시작 시 한 번 생성되어 인증 서비스에 주입됩니다.
"""
import asyncio
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional, Protocol

from core.errors import DeliveryError

logger = logging.getLogger(__name__)


@dataclass
class MailMessage:
    """발송할 메일"""
    sender: str
    to: str
    subject: str
    text: str
    html: str
    bcc: Optional[str] = None


class Mailer(Protocol):
    async def send(self, message: MailMessage) -> None: ...


class SmtpMailer:
    """SMTP 메일 발송기"""

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: int = 30
    ):
        """
        초기화

        Args:
            host: SMTP 서버 호스트
            port: SMTP 서버 포트
            username: 로그인 계정 (없으면 로그인 생략)
            password: 로그인 비밀번호
            use_tls: STARTTLS 사용 여부
            timeout: 연결 타임아웃 (초)
        """
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        logger.info(f"SmtpMailer 초기화: {host}:{port} (tls={use_tls})")

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = message.sender
        email["To"] = message.to
        if message.bcc:
            email["Bcc"] = message.bcc
        email["Subject"] = message.subject
        email.set_content(message.text)
        email.add_alternative(message.html, subtype="html")
        return email

    def _send_sync(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password or "")
            smtp.send_message(email)

    async def send(self, message: MailMessage) -> None:
        """
        메일을 발송합니다.

        Raises:
            DeliveryError: SMTP 전송 실패
        """
        email = self._build(message)
        try:
            await asyncio.to_thread(self._send_sync, email)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"메일 발송 실패: to={message.to}, error={e}", exc_info=True)
            raise DeliveryError("mail delivery failed", e) from e

        logger.info(f"메일 발송 완료: to={message.to}")
