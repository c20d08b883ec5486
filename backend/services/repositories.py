"""
저장소 서비스
SQLAlchemy 세션을 감싸 각 테이블의 조회/저장을 담당합니다.

SQLAlchemy 오류는 StorageError(고유 제약 위반은 UniquenessConflict)로 변환됩니다.
"""
from datetime import datetime
from typing import List, Optional, Sequence, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, exists
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from core.errors import StorageError, UniquenessConflict
from models.forms import ClaimSubmission
from models.kreditor import Kreditor
from models.reference import SifatTagihan, TipeDokumen
from models.tagihan import Tagihan, DokumenTagihan
from models.user import User, UserVerify

logger = logging.getLogger(__name__)


def _is_duplicate_email(error: IntegrityError) -> bool:
    # 예: duplicate key value violates unique constraint "ix_kreditor_email"
    message = str(error.orig).lower()
    return ("duplicate" in message or "unique" in message) and "email" in message


class ReferenceRepository:
    """참조 데이터 및 사용자 조회"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _all(self, model) -> list:
        try:
            result = await self.session.execute(select(model).order_by(model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list {model.__tablename__}", e) from e

    async def list_kreditor(self) -> List[Kreditor]:
        return await self._all(Kreditor)

    async def list_sifat_tagihan(self) -> List[SifatTagihan]:
        return await self._all(SifatTagihan)

    async def list_tipe_dokumen(self) -> List[TipeDokumen]:
        return await self._all(TipeDokumen)

    async def list_users(self) -> List[User]:
        return await self._all(User)

    async def find_user_by_unique_code(self, unique_code: str) -> Optional[User]:
        try:
            stmt = select(User).where(User.unique_code == unique_code)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("failed to look up user", e) from e


class VerificationRepository:
    """이메일 인증 레코드 저장소"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email(self, email: str) -> Optional[UserVerify]:
        try:
            stmt = select(UserVerify).where(UserVerify.email == email)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("failed to look up verification record", e) from e

    async def code_exists(self, code: str) -> bool:
        try:
            stmt = select(exists().where(UserVerify.unique_code == code))
            return bool((await self.session.execute(stmt)).scalar())
        except SQLAlchemyError as e:
            raise StorageError("failed to check verification code", e) from e

    async def create(self, email: str, unique_code: str, expiration_date: datetime) -> UserVerify:
        record = UserVerify(
            email=email,
            unique_code=unique_code,
            expiration_date=expiration_date
        )
        try:
            self.session.add(record)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError("failed to create verification record", e) from e
        return record

    async def refresh(self, record: UserVerify, unique_code: str, expiration_date: datetime) -> UserVerify:
        record.unique_code = unique_code
        record.expiration_date = expiration_date
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError("failed to update verification record", e) from e
        return record


class KreditorRepository:
    """채권자 저장소"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, nama: str, email: str, no_telp: str, alamat: str) -> Kreditor:
        """
        채권자를 생성합니다.

        Raises:
            UniquenessConflict: 이메일 중복
            StorageError: 기타 DB 오류
        """
        kreditor = Kreditor(nama=nama, email=email, no_telp=no_telp, alamat=alamat)
        try:
            self.session.add(kreditor)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if _is_duplicate_email(e):
                raise UniquenessConflict("email", e) from e
            raise StorageError("failed to create kreditor", e) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError("failed to create kreditor", e) from e
        return kreditor


class TagihanRepository:
    """
    채권 신고 저장소

    add_claim / add_documents는 flush만 수행하고,
    commit / rollback은 호출 측에서 하나의 트랜잭션으로 결정합니다.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_claim(self, submission: ClaimSubmission) -> int:
        tagihan = Tagihan(
            kreditor_id=submission.kreditor_id,
            pertanggal=submission.pertanggal,
            hutang_pokok=submission.hutang_pokok,
            bunga=submission.bunga,
            denda=submission.denda,
            sifat_tagihan_id=submission.sifat_tagihan_id,
            jumlah_tagihan=submission.jumlah_tagihan,
            mulai_tertunggak=submission.mulai_tertunggak,
            jumlah_hari=submission.jumlah_hari
        )
        try:
            self.session.add(tagihan)
            await self.session.flush()  # commit 전에 flush로 ID 생성
        except SQLAlchemyError as e:
            raise StorageError("failed to create tagihan", e) from e
        return tagihan.id

    async def add_documents(self, tagihan_id: int, documents: Sequence[Tuple[int, str]]) -> int:
        """
        문서 메타데이터를 추가합니다.

        Args:
            tagihan_id: 채권 신고 ID
            documents: (문서 유형 ID, 파일명) 리스트

        Returns:
            추가된 행 수
        """
        rows = [
            DokumenTagihan(tipe_dokumen_id=tipe_dokumen_id, dokumen=filename, tagihan_id=tagihan_id)
            for tipe_dokumen_id, filename in documents
        ]
        try:
            self.session.add_all(rows)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StorageError("failed to create dokumen_tagihan", e) from e
        return len(rows)

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StorageError("failed to commit tagihan", e) from e

    async def rollback(self) -> None:
        await self.session.rollback()
