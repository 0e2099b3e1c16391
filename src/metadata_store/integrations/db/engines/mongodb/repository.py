"""
목적: 엔티티 공통 MongoDB 저장소 기반 클래스를 제공한다.
설명: 필터 생성 → 페이지 조회/건수 조회 → 문서 매핑 흐름과 트랜잭션 배치 삽입을 한 곳에 묶는다.
디자인 패턴: 저장소 패턴, 템플릿 메서드
참조: src/metadata_store/integrations/db/engines/mongodb/filter_builder.py, src/metadata_store/integrations/db/engines/mongodb/batch_writer.py
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, TypeVar

from pymongo import ASCENDING

from metadata_store.integrations.db.base.models import InsertOutcome
from metadata_store.integrations.db.engines.mongodb.batch_writer import (
    MongoBatchWriter,
    PreparedDocument,
)
from metadata_store.integrations.db.engines.mongodb.document_mapper import MongoDocumentMapper
from metadata_store.integrations.db.engines.mongodb.engine import MongoStore
from metadata_store.integrations.db.engines.mongodb.filter_builder import (
    MongoFilterBuilder,
    RawFilterInput,
)
from metadata_store.shared.const import SharedConst
from metadata_store.shared.logging import LogContext, Logger, create_default_logger

RecordT = TypeVar("RecordT")
CriteriaT = TypeVar("CriteriaT")


class MongoRepository(Generic[RecordT, CriteriaT]):
    """MongoDB 엔티티 저장소 기반 클래스.

    Args:
        store: 공유 MongoDB 저장소 엔진.
        collection: 엔티티 컬렉션 이름.
        filter_builder: 검색 조건 필터 빌더.
        mapper: 문서 매퍼.
        unique_field: 유니크 인덱스를 보장할 식별자 필드.
        default_page_size: 페이지 크기 기본값.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        store: MongoStore,
        collection: str,
        filter_builder: MongoFilterBuilder[CriteriaT],
        mapper: MongoDocumentMapper[RecordT],
        unique_field: str = "uri",
        default_page_size: int = SharedConst.DEFAULT_PAGE_SIZE,
        logger: Optional[Logger] = None,
    ) -> None:
        if not collection:
            raise ValueError("컬렉션 이름이 필요합니다.")
        self._store = store
        self._collection = collection
        self._filter_builder = filter_builder
        self._mapper = mapper
        self._unique_field = unique_field
        self._default_page_size = default_page_size
        self._logger = (logger or create_default_logger(type(self).__name__)).with_context(
            LogContext(collection=collection)
        )
        self._writer: MongoBatchWriter[RecordT] = MongoBatchWriter(store, logger=self._logger)

    @property
    def collection_name(self) -> str:
        return self._collection

    def build_filter(
        self,
        criteria: Optional[CriteriaT] = None,
        raw_filter: Optional[RawFilterInput] = None,
    ) -> Dict[str, Any]:
        """검색 조건과 원시 필터를 MongoDB 필터로 변환한다."""

        return self._filter_builder.build(criteria, raw_filter)

    @contextmanager
    def stream(
        self,
        criteria: Optional[CriteriaT] = None,
        raw_filter: Optional[RawFilterInput] = None,
        page: int = 0,
        page_size: Optional[int] = None,
    ) -> Iterator[Iterator[RecordT]]:
        """페이지 결과를 지연 변환 이터레이터로 제공한다.

        with 블록을 벗어나면 소비 여부와 관계없이 커서를 닫는다.
        """

        size = self._resolve_page_size(page, page_size)
        query = self.build_filter(criteria, raw_filter)
        self._logger.with_context(LogContext(operation="find")).debug(
            f"페이지 조회: page={page}, page_size={size}",
            metadata={"query": query},
        )
        cursor = (
            self._store.collection(self._collection)
            .find(query)
            .sort("_id", ASCENDING)
            .skip(page * size)
            .limit(size)
        )
        records = self._mapper.map_batch(cursor)
        try:
            yield records
        finally:
            records.close()
            cursor.close()

    def find(
        self,
        criteria: Optional[CriteriaT] = None,
        raw_filter: Optional[RawFilterInput] = None,
        page: int = 0,
        page_size: Optional[int] = None,
    ) -> List[RecordT]:
        """검색 조건에 맞는 레코드 한 페이지를 반환한다."""

        with self.stream(criteria, raw_filter, page, page_size) as records:
            return list(records)

    def count(
        self,
        criteria: Optional[CriteriaT] = None,
        raw_filter: Optional[RawFilterInput] = None,
    ) -> int:
        """검색 조건에 맞는 전체 건수를 반환한다."""

        return self._count_query(self.build_filter(criteria, raw_filter))

    def insert_batch(self, records: Sequence[RecordT]) -> InsertOutcome:
        """레코드 배치를 원자적으로 삽입한다."""

        return self._writer.insert_batch(
            self._collection,
            records,
            prepare=self._prepare_insert,
            unique_field=self._unique_field,
        )

    def _prepare_insert(self, record: RecordT) -> PreparedDocument:
        """삽입 직전 레코드를 문서로 준비한다. 서버 할당 필드는 하위 클래스에서 채운다."""

        document = self._mapper.to_document(record)
        return PreparedDocument(identifier=str(document[self._unique_field]), document=document)

    def _count_query(self, query: Dict[str, Any]) -> int:
        self._logger.with_context(LogContext(operation="count")).debug(
            "건수 조회",
            metadata={"query": query},
        )
        return int(self._store.collection(self._collection).count_documents(query))

    def _resolve_page_size(self, page: int, page_size: Optional[int]) -> int:
        size = self._default_page_size if page_size is None else page_size
        if page < 0:
            raise ValueError("page는 0 이상이어야 합니다.")
        if size < 1:
            raise ValueError("page_size는 1 이상이어야 합니다.")
        return size
