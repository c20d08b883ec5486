"""
데이터베이스 초기화 스크립트
ORM 메타데이터로 테이블 생성
"""
import asyncio
import sys
from pathlib import Path

# backend 루트 디렉토리를 Python 경로에 추가
backend_root = Path(__file__).parent.parent
sys.path.insert(0, str(backend_root))

from core.database import create_tables, dispose_engine
import models  # noqa: F401  테이블 등록


async def init_database():
    """데이터베이스 스키마 초기화"""
    print("📊 데이터베이스 연결 중...")

    try:
        print("🔧 테이블 생성 중...")
        tables = await create_tables()

        print(f"\n📋 테이블 ({len(tables)}개):")
        for table in sorted(tables):
            print(f"  - {table}")

        print("\n🎉 데이터베이스 초기화 완료!")

    except Exception as e:
        print(f"❌ 오류 발생: {e}")
        raise
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(init_database())
