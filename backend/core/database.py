"""
데이터베이스 연결 및 세션 관리

엔진과 세션 팩토리는 첫 사용 시 생성하고, 종료 시 dispose_engine()으로 함께 정리합니다.
요청 단위 세션은 get_db()가 열고 커밋/롤백합니다.
"""
import os
import sys
from typing import Annotated, Any, AsyncGenerator, Dict, Optional

from fastapi import Depends
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from core.config import settings

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


class Base(DeclarativeBase):
    """ORM 모델 Base 클래스"""
    pass


def is_testing() -> bool:
    return os.getenv("TESTING", "false").lower() == "true" or "pytest" in sys.modules


def engine_options(testing: bool) -> Dict[str, Any]:
    """
    create_async_engine 옵션을 만듭니다.

    테스트에서는 이벤트 루프마다 연결이 바뀌므로 풀을 쓰지 않습니다.
    """
    if testing:
        return {"echo": settings.DEBUG, "poolclass": NullPool}
    return {
        "echo": settings.DEBUG,
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }


def get_engine() -> AsyncEngine:
    global _engine

    if _engine is None:
        _engine = create_async_engine(settings.DATABASE_URL, **engine_options(is_testing()))
    return _engine


def get_session_factory() -> async_sessionmaker:
    global _session_factory

    if _session_factory is None:
        # 커밋 후에도 생성된 id 등을 읽을 수 있도록 expire 하지 않음
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def dispose_engine() -> None:
    """엔진 연결을 모두 닫고 전역 엔진/세션 팩토리를 초기화합니다."""
    global _engine, _session_factory

    engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()


async def create_tables() -> list:
    """
    모든 ORM 테이블을 생성하고 현재 테이블 이름 목록을 반환합니다.

    models 패키지가 먼저 import 되어 있어야 메타데이터에 테이블이 등록됩니다.
    """
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    요청 단위 세션 의존성

    핸들러가 정상 종료하면 커밋, 예외가 나면 롤백 후 다시 던집니다.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


SessionDep = Annotated[AsyncSession, Depends(get_db)]
