"""
Tagihan ORM 모델
채권 신고(Tagihan)와 첨부 문서 메타데이터(DokumenTagihan)를 저장합니다.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from core.database import Base


class Tagihan(Base):
    """채권 신고 모델"""

    __tablename__ = "tagihan"

    id = Column(Integer, primary_key=True, index=True)
    kreditor_id = Column(Integer, ForeignKey("kreditor.id"), nullable=False, index=True)
    pertanggal = Column(String(50), nullable=False)
    # 금액은 천 단위 구분자(,)를 제거한 숫자 문자열로 저장
    hutang_pokok = Column(String(50), nullable=False)
    bunga = Column(String(50), nullable=False)
    denda = Column(String(50), nullable=False)
    sifat_tagihan_id = Column(Integer, ForeignKey("sifat_tagihan.id"), nullable=False)
    jumlah_tagihan = Column(String(50), nullable=False)
    mulai_tertunggak = Column(String(50), nullable=False)
    jumlah_hari = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationship
    dokumen = relationship("DokumenTagihan", back_populates="tagihan", cascade="all, delete-orphan")

    def __repr__(self):
        return (
            f"<Tagihan(id={self.id}, kreditor_id={self.kreditor_id}, "
            f"jumlah_tagihan={self.jumlah_tagihan})>"
        )


class DokumenTagihan(Base):
    """채권 첨부 문서 메타데이터"""

    __tablename__ = "dokumen_tagihan"

    id = Column(Integer, primary_key=True, index=True)
    tipe_dokumen_id = Column(Integer, ForeignKey("tipe_dokumen.id"), nullable=False)
    dokumen = Column(String(255), nullable=False)  # 저장된 파일명
    tagihan_id = Column(Integer, ForeignKey("tagihan.id", ondelete="CASCADE"), nullable=False, index=True)

    tagihan = relationship("Tagihan", back_populates="dokumen")

    def __repr__(self):
        return f"<DokumenTagihan(id={self.id}, tagihan_id={self.tagihan_id}, dokumen='{self.dokumen}')>"
