"""
목적: MongoDB 엔진 공개 API를 제공한다.
설명: 저장소 엔진, 필터/매퍼/저장소 기반 클래스, 배치 쓰기와 세션 구현을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/integrations/db/engines/mongodb/engine.py, src/metadata_store/integrations/db/engines/mongodb/repository.py
"""

from metadata_store.integrations.db.engines.mongodb.batch_writer import (
    MongoBatchWriter,
    PreparedDocument,
)
from metadata_store.integrations.db.engines.mongodb.datetime_codec import DateTimeCodec
from metadata_store.integrations.db.engines.mongodb.document_mapper import MongoDocumentMapper
from metadata_store.integrations.db.engines.mongodb.engine import MongoStore
from metadata_store.integrations.db.engines.mongodb.filter_builder import (
    MongoFilterBuilder,
    RawFilterInput,
)
from metadata_store.integrations.db.engines.mongodb.raw_filter import RawFilter
from metadata_store.integrations.db.engines.mongodb.repository import MongoRepository
from metadata_store.integrations.db.engines.mongodb.session import MongoTransactionSession

__all__ = [
    "MongoStore",
    "MongoRepository",
    "MongoFilterBuilder",
    "MongoDocumentMapper",
    "MongoBatchWriter",
    "MongoTransactionSession",
    "PreparedDocument",
    "DateTimeCodec",
    "RawFilter",
    "RawFilterInput",
]
