"""
Kreditor ORM 모델
채권자 정보를 저장합니다.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from core.database import Base


class Kreditor(Base):
    """채권자(Kreditor) 모델"""

    __tablename__ = "kreditor"

    id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    no_telp = Column(String(50), nullable=False)
    alamat = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "nama": self.nama,
            "email": self.email,
            "noTelp": self.no_telp,
            "alamat": self.alamat,
        }

    def __repr__(self):
        return f"<Kreditor(id={self.id}, nama='{self.nama}', email='{self.email}')>"
