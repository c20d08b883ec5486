"""
사용자 ORM 모델

User: 폼 접근용 고유 코드를 가진 사용자
UserVerify: 이메일 인증 코드와 만료 시각

두 테이블은 이름이 비슷하지만 별개의 엔티티로 유지합니다.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from core.database import Base


class User(Base):
    """폼 접근 사용자"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(255))
    email = Column(String(255), index=True)
    unique_code = Column(String(64), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "nama": self.nama,
            "email": self.email,
            "uniqueCode": self.unique_code,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class UserVerify(Base):
    """이메일 인증 레코드"""

    __tablename__ = "user_verify"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    unique_code = Column(String(64), unique=True, nullable=False, index=True)
    expiration_date = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (
            f"<UserVerify(id={self.id}, email='{self.email}', "
            f"expiration_date={self.expiration_date})>"
        )
