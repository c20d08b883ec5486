"""
채권 신고 폼 검증기
필수 필드, 숫자 형식, 첨부 문서(PDF, 2MB 이하)를 검증합니다.

모든 검사를 끝까지 수행하고 오류를 누적해서 반환합니다.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from models.forms import ClaimSubmission, DocumentUpload, FieldError, UploadedFile
from services.validators import is_blank, is_decimal, parse_int, unformat_price

logger = logging.getLogger(__name__)

# (폼 필드명, ClaimSubmission 속성명)
REQUIRED_CLAIM_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("kreditorId", "kreditor_id"),
    ("pertanggal", "pertanggal"),
    ("hutangPokok", "hutang_pokok"),
    ("denda", "denda"),
    ("bunga", "bunga"),
    ("sifatTagihanId", "sifat_tagihan_id"),
    ("jumlahTagihan", "jumlah_tagihan"),
    ("mulaiTertunggak", "mulai_tertunggak"),
    ("jumlahHari", "jumlah_hari"),
)

INTEGER_FIELDS = ("kreditorId", "sifatTagihanId", "jumlahHari")
AMOUNT_FIELDS = ("hutangPokok", "bunga", "denda", "jumlahTagihan")
# 구분자를 제거해서 저장하는 금액 필드
NORMALIZED_AMOUNT_FIELDS = ("hutangPokok", "bunga", "denda")

MESSAGE_REQUIRED = "required"
MESSAGE_NOT_A_NUMBER = "harus berupa angka"
MESSAGE_TOO_LARGE = "File terlalu besar"
MESSAGE_NOT_PDF = "File harus berformat PDF"
MESSAGE_COUNT_MISMATCH = "Jumlah tipe dokumen tidak sesuai dengan jumlah dokumen"


@dataclass
class ClaimValidation:
    """검증 결과"""
    errors: List[FieldError] = field(default_factory=list)
    submission: Optional[ClaimSubmission] = None
    documents: List[DocumentUpload] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def pair_documents(
    tipe_dokumen_ids: Sequence[str],
    files: Sequence[UploadedFile]
) -> List[DocumentUpload]:
    """문서 유형 ID와 파일을 순서대로 짝지어 반환합니다."""
    return [
        DocumentUpload(tipe_dokumen_id=tipe_dokumen_id, file=file)
        for tipe_dokumen_id, file in zip(tipe_dokumen_ids, files)
    ]


class IntakeValidator:
    """채권 신고 폼 검증기"""

    def __init__(self, max_file_size: int, allowed_file_types: Sequence[str]):
        """
        Args:
            max_file_size: 파일당 최대 크기 (bytes)
            allowed_file_types: 허용 MIME 타입 목록
        """
        self.max_file_size = max_file_size
        self.allowed_file_types = list(allowed_file_types)

    def _check_fields(self, fields: Mapping[str, Optional[str]]) -> List[FieldError]:
        errors = []
        for name, _ in REQUIRED_CLAIM_FIELDS:
            if is_blank(fields.get(name)):
                errors.append(FieldError(field=name, message=MESSAGE_REQUIRED))

        for name in INTEGER_FIELDS:
            value = fields.get(name)
            if not is_blank(value) and parse_int(value) is None:
                errors.append(FieldError(field=name, message=MESSAGE_NOT_A_NUMBER))

        for name in AMOUNT_FIELDS:
            value = fields.get(name)
            if not is_blank(value) and not is_decimal(value):
                errors.append(FieldError(field=name, message=MESSAGE_NOT_A_NUMBER))
        return errors

    def _check_documents(
        self,
        tipe_dokumen_ids: Sequence[str],
        files: Sequence[UploadedFile],
        documents: Sequence[DocumentUpload]
    ) -> List[FieldError]:
        errors = []
        if not files:
            errors.append(FieldError(field="dokumen", message=MESSAGE_REQUIRED))
        elif len(tipe_dokumen_ids) != len(files):
            errors.append(FieldError(field="tipeDokumenId", message=MESSAGE_COUNT_MISMATCH))

        for index, document in enumerate(documents):
            if parse_int(document.tipe_dokumen_id) is None:
                errors.append(FieldError(field=f"tipeDokumenId.{index}", message=MESSAGE_NOT_A_NUMBER))
            if document.file.size > self.max_file_size:
                errors.append(FieldError(field=f"dokumen.{index}", message=MESSAGE_TOO_LARGE))
            if document.file.content_type not in self.allowed_file_types:
                errors.append(FieldError(field=f"dokumen.{index}", message=MESSAGE_NOT_PDF))
        return errors

    def build_submission(self, fields: Mapping[str, Optional[str]]) -> ClaimSubmission:
        """검증된 필드로 ClaimSubmission을 만듭니다 (금액 구분자 제거)."""
        values = {}
        for name, attr in REQUIRED_CLAIM_FIELDS:
            value = fields[name].strip()
            if name in NORMALIZED_AMOUNT_FIELDS:
                value = unformat_price(value)
            values[attr] = value
        values["kreditor_id"] = parse_int(values["kreditor_id"])
        values["sifat_tagihan_id"] = parse_int(values["sifat_tagihan_id"])
        return ClaimSubmission(**values)

    def validate(
        self,
        fields: Mapping[str, Optional[str]],
        tipe_dokumen_ids: Sequence[str],
        files: Sequence[UploadedFile]
    ) -> ClaimValidation:
        """
        채권 신고 폼을 검증합니다.

        Args:
            fields: 스칼라 폼 필드 (폼 필드명 -> 값)
            tipe_dokumen_ids: 문서 유형 ID 목록 (files와 같은 순서)
            files: 업로드 파일 목록

        Returns:
            ClaimValidation (오류가 없을 때만 submission이 채워짐)
        """
        documents = pair_documents(tipe_dokumen_ids, files)
        errors = self._check_fields(fields)
        errors.extend(self._check_documents(tipe_dokumen_ids, files, documents))

        if errors:
            logger.info(f"채권 신고 검증 실패: {len(errors)}개 오류")
            return ClaimValidation(errors=errors)

        return ClaimValidation(
            submission=self.build_submission(fields),
            documents=documents
        )
