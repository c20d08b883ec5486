"""
서비스 컨테이너
요청 간에 공유되는 인스턴스(메일 발송기, 문서 저장소, 폼 검증기)를 관리합니다.
"""
import logging
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """공유 인스턴스를 싱글톤으로 관리하는 컨테이너"""

    _instance: Optional['ServiceContainer'] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """서비스 컨테이너 초기화 (한 번만 실행)"""
        if self._initialized:
            return

        self._mailer = None
        self._document_storage = None
        self._intake_validator = None

        self._initialized = True
        logger.info("ServiceContainer 초기화 완료")

    def get_mailer(self):
        """SmtpMailer 싱글톤 인스턴스 반환"""
        if self._mailer is None:
            from services.mailer import SmtpMailer
            self._mailer = SmtpMailer(
                host=settings.SMTP_HOST,
                port=settings.SMTP_PORT,
                username=settings.SMTP_USERNAME,
                password=settings.SMTP_PASSWORD,
                use_tls=settings.SMTP_USE_TLS,
                timeout=settings.SMTP_TIMEOUT
            )
            logger.info("SmtpMailer 싱글톤 인스턴스 생성")
        return self._mailer

    def get_document_storage(self):
        """LocalDocumentStorage 싱글톤 인스턴스 반환"""
        if self._document_storage is None:
            from services.document_storage import LocalDocumentStorage
            self._document_storage = LocalDocumentStorage(settings.UPLOAD_DIR)
            logger.info(f"LocalDocumentStorage 싱글톤 인스턴스 생성: {settings.UPLOAD_DIR}")
        return self._document_storage

    def get_intake_validator(self):
        """IntakeValidator 싱글톤 인스턴스 반환"""
        if self._intake_validator is None:
            from services.intake_validator import IntakeValidator
            self._intake_validator = IntakeValidator(
                max_file_size=settings.MAX_FILE_SIZE,
                allowed_file_types=settings.ALLOWED_FILE_TYPES
            )
            logger.info("IntakeValidator 싱글톤 인스턴스 생성")
        return self._intake_validator


# 전역 서비스 컨테이너 인스턴스
service_container = ServiceContainer()
