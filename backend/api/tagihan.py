"""
채권 신고 폼 API
- GET  /{id}/{uniquecode}/tagihan: 폼 참조 데이터 로드 (고유 코드 확인)
- POST /{id}/{uniquecode}/tagihan/addTagihan: 채권 신고 등록 (multipart)
- POST /{id}/{uniquecode}/tagihan/addKreditor: 채권자 등록 (multipart)
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile
import logging

from core.config import settings
from api.dependencies import get_kreditor_service, get_reference_repository, get_tagihan_service
from models.forms import UploadedFile
from services.intake_validator import REQUIRED_CLAIM_FIELDS
from services.kreditor_service import KreditorService
from services.repositories import ReferenceRepository
from services.tagihan_service import TagihanService

router = APIRouter(prefix="/{id}/{uniquecode}/tagihan", tags=["Tagihan"])
logger = logging.getLogger(__name__)

KREDITOR_FIELDS = ("nama", "email", "noTelp", "alamat")


def form_fields(form: FormData, names) -> Dict[str, Optional[str]]:
    """문자열 폼 필드만 추출합니다 (파일 파트는 None)."""
    fields = {}
    for name in names:
        value = form.get(name)
        fields[name] = value if isinstance(value, str) else None
    return fields


async def read_uploads(form: FormData, name: str, max_size: Optional[int] = None) -> List[UploadedFile]:
    """
    업로드 파일을 읽어 UploadedFile 목록으로 반환합니다.

    파일을 선택하지 않은 입력(파일명 없음, 0바이트)은 건너뜁니다.
    max_size를 넘는 파일은 내용을 메모리로 읽지 않고 크기만 기록합니다 (검증 단계에서 거부).
    """
    uploads = []
    for item in form.getlist(name):
        if not isinstance(item, UploadFile):
            continue
        if max_size is not None and item.size is not None and item.size > max_size:
            logger.info(f"업로드 크기 초과: {item.filename} ({item.size} bytes)")
            uploads.append(UploadedFile(
                filename=item.filename or "",
                content_type=item.content_type,
                content=b"",
                declared_size=item.size
            ))
            continue
        content = await item.read()
        if not item.filename and not content:
            continue
        uploads.append(UploadedFile(
            filename=item.filename or "",
            content_type=item.content_type,
            content=content
        ))
    return uploads


@router.get("")
async def load_form(
    id: str,
    uniquecode: str,
    repository: ReferenceRepository = Depends(get_reference_repository)
):
    """
    고유 코드가 유효하면 폼에 필요한 참조 데이터를 반환합니다.

    Returns:
        kreditorData, sifatTagihanData, tipeDokumenData
    """
    try:
        user = await repository.find_user_by_unique_code(uniquecode)
        if user is None:
            logger.info(f"유효하지 않은 고유 코드: {uniquecode}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Invalid uniquecode"}
            )

        kreditor = await repository.list_kreditor()
        sifat_tagihan = await repository.list_sifat_tagihan()
        tipe_dokumen = await repository.list_tipe_dokumen()
    except Exception as e:
        logger.error(f"폼 데이터 로드 오류: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error Unexpected"}
        )

    return {
        "kreditorData": [item.to_dict() for item in kreditor],
        "sifatTagihanData": [item.to_dict() for item in sifat_tagihan],
        "tipeDokumenData": [item.to_dict() for item in tipe_dokumen],
    }


@router.post("/addTagihan")
async def add_tagihan(
    request: Request,
    service: TagihanService = Depends(get_tagihan_service)
):
    """
    채권 신고를 등록합니다.

    multipart 필드: kreditorId, pertanggal, hutangPokok, bunga, denda, sifatTagihanId,
    jumlahTagihan, mulaiTertunggak, jumlahHari, tipeDokumenId(복수), dokumen(복수, PDF)
    """
    async with request.form() as form:
        fields = form_fields(form, [name for name, _ in REQUIRED_CLAIM_FIELDS])
        tipe_dokumen_ids = [v for v in form.getlist("tipeDokumenId") if isinstance(v, str)]
        files = await read_uploads(form, "dokumen", max_size=settings.MAX_FILE_SIZE)

    result = await service.add_tagihan(fields, tipe_dokumen_ids, files)
    return result.model_dump()


@router.post("/addKreditor")
async def add_kreditor(
    request: Request,
    service: KreditorService = Depends(get_kreditor_service)
):
    """채권자를 등록합니다. (multipart 필드: nama, email, noTelp, alamat)"""
    async with request.form() as form:
        fields = form_fields(form, KREDITOR_FIELDS)

    result = await service.add_kreditor(fields)
    return result.model_dump()
