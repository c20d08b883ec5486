"""
애플리케이션 설정 관리
환경 변수(.env 파일)에서 설정을 로드합니다.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    애플리케이션 설정

    환경 변수 우선순위:
    1. 시스템 환경 변수
    2. .env 파일
    3. 기본값 (개발 환경용)
    """

    # 데이터베이스 (필수: .env에서 설정 필요)
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600  # 초
    DB_POOL_TIMEOUT: int = 30

    # 인증 링크의 기준 URL ({SITE_URL}/verify/{code})
    SITE_URL: str = "http://localhost:5173"

    # SMTP 메일 발송
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT: int = 30
    MAIL_FROM: str = '"pkpu.co.id" <noreply@pkpu.co.id>'
    MAIL_BCC: Optional[str] = None
    MAIL_SUBJECT: str = "Link to access Form Tagihan"

    # 인증 코드
    VERIFICATION_CODE_LENGTH: int = 25
    VERIFICATION_TTL_HOURS: int = 24

    # 애플리케이션
    APP_ENV: str = "development"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # 파일 업로드 (PDF, 2MB)
    MAX_FILE_SIZE: int = 2 * 1024 * 1024
    ALLOWED_FILE_TYPES: List[str] = ["application/pdf"]
    UPLOAD_DIR: str = "static/doc"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )


# 싱글톤 인스턴스
settings = Settings()
