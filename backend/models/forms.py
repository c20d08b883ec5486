"""
폼 처리 데이터 모델

폼 검증 결과와 검증을 통과한 채권 신고 데이터를 담는 Pydantic 모델입니다.
"""
from dataclasses import dataclass
from typing import List, Optional
from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """필드 단위 검증 오류"""

    field: str = Field(..., description="오류가 발생한 필드명 (예: dokumen.0)")
    message: str = Field(..., description="사용자에게 표시할 메시지")


class ValidationFailure(BaseModel):
    """검증 실패 응답"""

    success: bool = False
    errors: List[FieldError] = Field(default_factory=list)


class ActionResult(BaseModel):
    """폼 처리 결과 응답"""

    success: bool
    message: str


class ClaimSubmission(BaseModel):
    """
    검증을 통과한 채권 신고 데이터

    Attributes:
        kreditor_id: 채권자 ID
        pertanggal: 기준 일자
        hutang_pokok: 원금 (구분자 제거된 숫자 문자열)
        bunga: 이자 (구분자 제거된 숫자 문자열)
        denda: 연체료 (구분자 제거된 숫자 문자열)
        sifat_tagihan_id: 채권 성격 ID
        jumlah_tagihan: 총 청구액 (입력값 그대로)
        mulai_tertunggak: 연체 시작일
        jumlah_hari: 연체 일수
    """

    kreditor_id: int
    pertanggal: str
    hutang_pokok: str
    bunga: str
    denda: str
    sifat_tagihan_id: int
    jumlah_tagihan: str
    mulai_tertunggak: str
    jumlah_hari: str


@dataclass
class UploadedFile:
    """업로드된 파일 (요청 처리 중에만 메모리에 유지)"""
    filename: str
    content_type: Optional[str]
    content: bytes
    # 내용을 메모리로 읽지 않은 경우 업로드 파서가 기록한 크기
    declared_size: Optional[int] = None

    @property
    def size(self) -> int:
        if self.declared_size is not None:
            return self.declared_size
        return len(self.content)


@dataclass
class DocumentUpload:
    """문서 유형 ID와 업로드 파일의 쌍"""
    tipe_dokumen_id: str
    file: UploadedFile
