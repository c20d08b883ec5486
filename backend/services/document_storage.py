"""
문서 파일 저장소
업로드된 PDF를 UPLOAD_DIR 아래에 파일명 그대로 저장합니다.

저장은 두 단계로 나뉩니다:
- stage: 임시 파일로 기록 (DB commit 전)
- promote: 임시 파일을 최종 파일명으로 교체 (DB commit 후)
같은 이름의 파일은 promote 시 덮어씁니다.
"""
import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path

from core.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedFile:
    temp_path: Path
    final_path: Path


def safe_filename(filename: str) -> str:
    """디렉터리 구성 요소를 제거한 파일명을 반환합니다."""
    name = Path(filename.replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise StorageError(f"invalid file name: {filename!r}")
    return name


class LocalDocumentStorage:
    """로컬 파일 시스템 문서 저장소"""

    def __init__(self, root_dir: str):
        self.root = Path(root_dir)

    def stage(self, filename: str, content: bytes) -> StagedFile:
        """
        파일을 임시 이름으로 기록합니다.

        Raises:
            StorageError: 파일 기록 실패
        """
        final_path = self.root / safe_filename(filename)
        temp_path = final_path.with_name(f".{final_path.name}.{uuid.uuid4().hex}.tmp")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(content)
        except OSError as e:
            raise StorageError(f"failed to write {final_path.name}", e) from e
        return StagedFile(temp_path=temp_path, final_path=final_path)

    def promote(self, staged: StagedFile) -> Path:
        """임시 파일을 최종 위치로 옮깁니다 (같은 파일 시스템에서 원자적)."""
        try:
            os.replace(staged.temp_path, staged.final_path)
        except OSError as e:
            raise StorageError(f"failed to store {staged.final_path.name}", e) from e
        logger.info(f"문서 저장: {staged.final_path}")
        return staged.final_path

    def discard(self, staged: StagedFile) -> None:
        """임시 파일을 삭제합니다. 이미 없으면 무시합니다."""
        try:
            staged.temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"임시 파일 삭제 실패: {staged.temp_path} ({e})")
