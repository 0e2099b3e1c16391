"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: MongoDB 저장소 엔진, 저장소 기반 클래스, 배치 쓰기 결과 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/integrations/db/engines/mongodb, src/metadata_store/integrations/db/base
"""

from metadata_store.integrations.db.base import (
    DiagnosticKind,
    InsertDiagnostic,
    InsertOutcome,
    TransactionState,
)
from metadata_store.integrations.db.engines.mongodb import (
    MongoBatchWriter,
    MongoStore,
    MongoRepository,
    RawFilter,
)

__all__ = [
    "MongoStore",
    "MongoRepository",
    "MongoBatchWriter",
    "RawFilter",
    "DiagnosticKind",
    "InsertDiagnostic",
    "InsertOutcome",
    "TransactionState",
]
