"""
API 의존성
요청마다 세션에 묶인 저장소와 서비스를 조립합니다.
테스트에서는 app.dependency_overrides로 교체합니다.
"""
from datetime import timedelta

from fastapi import Depends

from core.config import settings
from core.database import SessionDep
from services.kreditor_service import KreditorService
from services.mailer import Mailer
from services.repositories import (
    KreditorRepository,
    ReferenceRepository,
    TagihanRepository,
    VerificationRepository,
)
from services.service_container import service_container
from services.tagihan_service import TagihanService
from services.verification import VerificationService


def get_mailer() -> Mailer:
    return service_container.get_mailer()


def get_reference_repository(session: SessionDep) -> ReferenceRepository:
    return ReferenceRepository(session)


def get_verification_service(
    session: SessionDep,
    mailer: Mailer = Depends(get_mailer)
) -> VerificationService:
    return VerificationService(
        repository=VerificationRepository(session),
        mailer=mailer,
        site_url=settings.SITE_URL,
        sender=settings.MAIL_FROM,
        subject=settings.MAIL_SUBJECT,
        bcc=settings.MAIL_BCC,
        code_length=settings.VERIFICATION_CODE_LENGTH,
        ttl=timedelta(hours=settings.VERIFICATION_TTL_HOURS)
    )


def get_tagihan_service(session: SessionDep) -> TagihanService:
    return TagihanService(
        repository=TagihanRepository(session),
        storage=service_container.get_document_storage(),
        validator=service_container.get_intake_validator()
    )


def get_kreditor_service(session: SessionDep) -> KreditorService:
    return KreditorService(KreditorRepository(session))
