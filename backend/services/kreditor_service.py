"""
채권자 등록 서비스
"""
import logging
from typing import List, Mapping, Optional, Union

from core.errors import UniquenessConflict
from models.forms import ActionResult, FieldError, ValidationFailure
from services.repositories import KreditorRepository
from services.validators import is_blank, is_missing, is_valid_email

logger = logging.getLogger(__name__)

MESSAGE_CREATED = "Kreditor berhasil ditambahkan"
MESSAGE_FAILED = "Kreditor gagal ditambahkan"
MESSAGE_DUPLICATE_EMAIL = "Email kreditor sudah terdaftar, silahkan periksa kembali"


def validate_kreditor(fields: Mapping[str, Optional[str]]) -> List[FieldError]:
    """채권자 폼 필드를 검증합니다."""
    errors = []
    if is_blank(fields.get("nama")):
        errors.append(FieldError(field="nama", message="Nama tidak boleh kosong!"))

    email = fields.get("email")
    if is_missing(email):
        errors.append(FieldError(field="email", message="Email tidak boleh kosong!"))
    elif not isinstance(email, str) or not is_valid_email(email):
        errors.append(FieldError(field="email", message="Format email tidak valid!"))

    if is_blank(fields.get("noTelp")):
        errors.append(FieldError(field="noTelp", message="No Telepon tidak boleh kosong!"))
    if is_blank(fields.get("alamat")):
        errors.append(FieldError(field="alamat", message="Alamat tidak boleh kosong!"))
    return errors


class KreditorService:
    """채권자 등록 서비스"""

    def __init__(self, repository: KreditorRepository):
        self.repository = repository

    async def add_kreditor(self, fields: Mapping[str, Optional[str]]) -> Union[ValidationFailure, ActionResult]:
        """
        채권자를 등록합니다.

        Args:
            fields: nama, email, noTelp, alamat 폼 필드

        Returns:
            검증 실패 시 ValidationFailure, 그 외 ActionResult
        """
        errors = validate_kreditor(fields)
        if errors:
            return ValidationFailure(errors=errors)

        try:
            kreditor = await self.repository.create(
                nama=fields["nama"].strip(),
                email=fields["email"].strip(),
                no_telp=fields["noTelp"].strip(),
                alamat=fields["alamat"].strip()
            )
        except UniquenessConflict as e:
            logger.warning(f"채권자 이메일 중복: email={fields['email']} ({e.original_exception})")
            return ActionResult(success=False, message=MESSAGE_DUPLICATE_EMAIL)
        except Exception as e:
            logger.error(f"채권자 등록 실패: {e}", exc_info=True)
            return ActionResult(success=False, message=MESSAGE_FAILED)

        logger.info(f"채권자 등록 완료: id={kreditor.id}")
        return ActionResult(success=True, message=MESSAGE_CREATED)
