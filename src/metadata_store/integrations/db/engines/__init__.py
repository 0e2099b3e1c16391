"""
목적: DB 엔진 구현 공개 API를 제공한다.
설명: MongoDB 저장소 엔진을 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/integrations/db/engines/mongodb/engine.py
"""

from metadata_store.integrations.db.engines.mongodb import MongoStore

__all__ = ["MongoStore"]
