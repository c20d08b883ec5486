"""
채권 신고 서비스
검증을 통과한 채권 신고와 첨부 문서를 저장합니다.

채권 행, 문서 메타데이터 행은 하나의 트랜잭션으로 저장하고,
파일은 commit 전에 임시 파일로 기록했다가 commit 후 최종 위치로 옮깁니다.
commit 전에 실패하면 트랜잭션을 롤백하고 임시 파일을 모두 삭제합니다.
"""
import logging
from typing import List, Mapping, Optional, Sequence, Union

from core.errors import StorageError
from models.forms import ActionResult, DocumentUpload, ClaimSubmission, UploadedFile, ValidationFailure
from services.document_storage import LocalDocumentStorage, StagedFile, safe_filename
from services.intake_validator import IntakeValidator
from services.repositories import TagihanRepository
from services.validators import parse_int

logger = logging.getLogger(__name__)

MESSAGE_CREATED = "Tagihan berhasil ditambahkan"
MESSAGE_FAILED = "Tagihan gagal ditambahkan"


class TagihanService:
    """채권 신고 서비스"""

    def __init__(
        self,
        repository: TagihanRepository,
        storage: LocalDocumentStorage,
        validator: IntakeValidator
    ):
        self.repository = repository
        self.storage = storage
        self.validator = validator

    async def create_claim(
        self,
        submission: ClaimSubmission,
        documents: Sequence[DocumentUpload]
    ) -> int:
        """
        채권 신고와 문서를 저장합니다.

        Args:
            submission: 검증된 채권 신고
            documents: (문서 유형 ID, 파일) 쌍 목록

        Returns:
            생성된 채권 신고 ID

        Raises:
            StorageError: DB 또는 파일 저장 실패 (롤백 완료 상태)
        """
        staged: List[StagedFile] = []
        try:
            tagihan_id = await self.repository.add_claim(submission)
            await self.repository.add_documents(
                tagihan_id,
                [
                    (parse_int(doc.tipe_dokumen_id), safe_filename(doc.file.filename))
                    for doc in documents
                ]
            )
            for doc in documents:
                staged.append(self.storage.stage(doc.file.filename, doc.file.content))
            await self.repository.commit()
        except Exception:
            await self.repository.rollback()
            for staged_file in staged:
                self.storage.discard(staged_file)
            raise

        # commit 이후 실패는 되돌릴 수 없으므로 남은 임시 파일만 정리
        for index, staged_file in enumerate(staged):
            try:
                self.storage.promote(staged_file)
            except StorageError:
                for remaining in staged[index:]:
                    self.storage.discard(remaining)
                raise

        logger.info(f"채권 신고 저장 완료: tagihan_id={tagihan_id}, 문서 {len(documents)}개")
        return tagihan_id

    async def add_tagihan(
        self,
        fields: Mapping[str, Optional[str]],
        tipe_dokumen_ids: Sequence[str],
        files: Sequence[UploadedFile]
    ) -> Union[ValidationFailure, ActionResult]:
        """
        채권 신고 폼을 처리합니다.

        Returns:
            검증 실패 시 ValidationFailure, 그 외 ActionResult
        """
        validation = self.validator.validate(fields, tipe_dokumen_ids, files)
        if not validation.is_valid:
            return ValidationFailure(errors=validation.errors)

        try:
            await self.create_claim(validation.submission, validation.documents)
        except StorageError as e:
            logger.error(f"채권 신고 저장 실패: {e.message}", exc_info=True)
            return ActionResult(success=False, message=MESSAGE_FAILED)
        except Exception as e:
            logger.error(f"채권 신고 처리 중 예기치 않은 오류: {e}", exc_info=True)
            return ActionResult(success=False, message=MESSAGE_FAILED)

        return ActionResult(success=True, message=MESSAGE_CREATED)
