"""
목적: MongoDB 스키마 관리 모듈을 제공한다.
설명: 식별자 필드 유니크 인덱스 보장과 컬렉션 삭제를 담당한다.
디자인 패턴: 매니저 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/engine.py
"""

from __future__ import annotations

from pymongo import ASCENDING


class MongoSchemaManager:
    """MongoDB 스키마 관리자."""

    def ensure_unique_index(self, database, collection: str, field: str) -> str:
        """필드 오름차순 유니크 인덱스를 보장하고 인덱스 이름을 반환한다.

        동일 정의의 인덱스가 이미 있으면 서버가 생성 요청을 무시하므로 반복 호출해도 안전하다.
        """

        return database[collection].create_index(
            [(field, ASCENDING)],
            unique=True,
            name=f"{field}_unique",
        )

    def delete_collection(self, database, name: str) -> None:
        """컬렉션을 삭제한다."""

        database.drop_collection(name)
