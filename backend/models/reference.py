"""
참조 데이터 ORM 모델
채권 성격(SifatTagihan)과 문서 유형(TipeDokumen) 열거 테이블입니다.
"""
from sqlalchemy import Column, Integer, String

from core.database import Base


class SifatTagihan(Base):
    """채권 성격 분류"""

    __tablename__ = "sifat_tagihan"

    id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(100), nullable=False)

    def to_dict(self):
        return {"id": self.id, "nama": self.nama}

    def __repr__(self):
        return f"<SifatTagihan(id={self.id}, nama='{self.nama}')>"


class TipeDokumen(Base):
    """업로드 문서 유형 분류"""

    __tablename__ = "tipe_dokumen"

    id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(100), nullable=False)

    def to_dict(self):
        return {"id": self.id, "nama": self.nama}

    def __repr__(self):
        return f"<TipeDokumen(id={self.id}, nama='{self.nama}')>"
