"""
목적: 트랜잭션 기반 배치 쓰기 모듈을 제공한다.
설명: 세션/트랜잭션을 열고 레코드를 문서로 준비한 뒤, 유니크 인덱스를 보장하고 다건 삽입을 원자적으로 커밋 또는 중단한다.
디자인 패턴: 작업 단위(Unit of Work), 템플릿 메서드
참조: src/metadata_store/integrations/db/engines/mongodb/session.py, src/metadata_store/integrations/db/base/models.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from pymongo.errors import BulkWriteError, DuplicateKeyError, PyMongoError

from metadata_store.integrations.db.base.session import TransactionState
from metadata_store.integrations.db.base.models import (
    DiagnosticKind,
    InsertDiagnostic,
    InsertOutcome,
)
from metadata_store.integrations.db.engines.mongodb.engine import MongoStore
from metadata_store.integrations.db.engines.mongodb.session import MongoTransactionSession
from metadata_store.shared.exceptions import ConversionError
from metadata_store.shared.logging import LogContext, Logger, create_default_logger

RecordT = TypeVar("RecordT")

_DUPLICATE_KEY_CODES = {11000, 11001, 12582}


@dataclass(frozen=True)
class PreparedDocument:
    """삽입 준비가 끝난 문서와 그 식별자."""

    identifier: str
    document: Dict[str, Any]


class MongoBatchWriter(Generic[RecordT]):
    """MongoDB 트랜잭션 배치 쓰기 구현체.

    재시도하지 않으며, 어떤 실패든 배치 전체를 중단한다.

    Args:
        store: 공유 MongoDB 저장소 엔진.
        logger: 주입 가능한 로거.
    """

    def __init__(self, store: MongoStore, logger: Optional[Logger] = None) -> None:
        self._store = store
        self._logger = logger or create_default_logger("MongoBatchWriter")

    def insert_batch(
        self,
        collection: str,
        records: Sequence[RecordT],
        prepare: Callable[[RecordT], PreparedDocument],
        unique_field: str,
    ) -> InsertOutcome:
        """레코드 배치를 하나의 트랜잭션으로 삽입한다.

        Raises:
            StoreConnectionError: 세션 또는 트랜잭션을 시작할 수 없을 때.
        """

        log = self._logger.with_context(
            LogContext(collection=collection, operation="insert_batch")
        )
        if not records:
            log.info("빈 배치라 삽입을 건너뜁니다.")
            return InsertOutcome.created([])

        with MongoTransactionSession(self._store, logger=log) as session:
            try:
                prepared = [prepare(record) for record in records]
            except ConversionError as error:
                session.rollback()
                log.warning(f"문서 변환 실패로 배치를 중단합니다: {error.message}")
                return InsertOutcome.rejected([self._conversion_diagnostic(error)])

            identifiers = [item.identifier for item in prepared]
            diagnostics = self._write(collection, prepared, unique_field, session)
            if diagnostics:
                session.rollback()
                log.warning(
                    "배치 삽입 실패로 트랜잭션을 중단합니다.",
                    metadata={"diagnostics": [item.model_dump() for item in diagnostics]},
                )
                return InsertOutcome.rejected(diagnostics)

            try:
                session.commit()
            except PyMongoError as error:
                if session.state == TransactionState.COMMIT_UNKNOWN:
                    log.error(
                        f"트랜잭션 커밋 결과를 알 수 없습니다: error={error}",
                        metadata={"identifiers": identifiers},
                    )
                    return InsertOutcome.rejected(
                        [self._commit_unknown_diagnostic(error, identifiers)]
                    )
                log.error(f"트랜잭션 커밋 실패: error={error}")
                return InsertOutcome.rejected([self._write_diagnostic(error)])

        log.info(f"배치 삽입 커밋 완료: count={len(identifiers)}")
        return InsertOutcome.created(identifiers)

    def _write(
        self,
        collection: str,
        prepared: List[PreparedDocument],
        unique_field: str,
        session: MongoTransactionSession,
    ) -> List[InsertDiagnostic]:
        try:
            self._store.ensure_unique_index(collection, unique_field)
            self._store.collection(collection).insert_many(
                [item.document for item in prepared],
                session=session.handle,
            )
        except BulkWriteError as error:
            return self._bulk_diagnostics(error, prepared)
        except DuplicateKeyError as error:
            return [self._constraint_diagnostic(error.code, str(error), None)]
        except PyMongoError as error:
            return [self._write_diagnostic(error)]
        return []

    def _bulk_diagnostics(
        self,
        error: BulkWriteError,
        prepared: List[PreparedDocument],
    ) -> List[InsertDiagnostic]:
        write_errors = (error.details or {}).get("writeErrors") or []
        if not write_errors:
            return [self._write_diagnostic(error)]
        diagnostics: List[InsertDiagnostic] = []
        for item in write_errors:
            index = item.get("index")
            identifier = None
            if isinstance(index, int) and 0 <= index < len(prepared):
                identifier = prepared[index].identifier
            code = item.get("code")
            message = str(item.get("errmsg") or "문서 쓰기 실패")
            if code in _DUPLICATE_KEY_CODES:
                diagnostics.append(self._constraint_diagnostic(code, message, identifier))
            else:
                diagnostics.append(
                    InsertDiagnostic(
                        kind=DiagnosticKind.WRITE_ERROR,
                        message=message,
                        identifier=identifier,
                        code=code,
                    )
                )
        return diagnostics

    def _constraint_diagnostic(
        self,
        code: Optional[int],
        message: str,
        identifier: Optional[str],
    ) -> InsertDiagnostic:
        return InsertDiagnostic(
            kind=DiagnosticKind.CONSTRAINT_VIOLATION,
            message=f"유니크 제약 위반으로 배치가 거부되었습니다 - {message}",
            identifier=identifier,
            code=code,
        )

    def _write_diagnostic(self, error: PyMongoError) -> InsertDiagnostic:
        return InsertDiagnostic(
            kind=DiagnosticKind.WRITE_ERROR,
            message=f"데이터가 거부되었습니다 - {error}",
            code=getattr(error, "code", None),
        )

    def _commit_unknown_diagnostic(
        self,
        error: PyMongoError,
        identifiers: List[str],
    ) -> InsertDiagnostic:
        return InsertDiagnostic(
            kind=DiagnosticKind.COMMIT_UNKNOWN,
            message=f"커밋 반영 여부를 알 수 없습니다. 식별자로 다시 조회해 확인하세요 - {error}",
            code=getattr(error, "code", None),
            metadata={"identifiers": list(identifiers)},
        )

    def _conversion_diagnostic(self, error: ConversionError) -> InsertDiagnostic:
        return InsertDiagnostic(
            kind=DiagnosticKind.CONVERSION_ERROR,
            message=error.message,
            identifier=error.detail.metadata.get("identifier"),
            metadata=dict(error.detail.metadata),
        )
