"""
ORM 모델 패키지
"""
from models.kreditor import Kreditor
from models.reference import SifatTagihan, TipeDokumen
from models.tagihan import Tagihan, DokumenTagihan
from models.user import User, UserVerify

__all__ = [
    "Kreditor",
    "SifatTagihan",
    "TipeDokumen",
    "Tagihan",
    "DokumenTagihan",
    "User",
    "UserVerify",
]
