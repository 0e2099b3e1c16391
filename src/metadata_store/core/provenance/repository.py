"""
목적: 프로비넌스 저장소를 제공한다.
설명: 검색/건수 조회와, 식별자를 서버에서 생성해 채운 뒤 수행하는 원자적 배치 삽입을 담당한다.
디자인 패턴: 저장소 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/repository.py, src/metadata_store/core/ports.py
"""

from __future__ import annotations

from typing import Optional, Sequence

from metadata_store.core.ports import IdentifierGenerator
from metadata_store.core.provenance.const import PROVENANCE_CONCEPT
from metadata_store.core.provenance.document_mapper import ProvenanceDocumentMapper
from metadata_store.core.provenance.filter_builder import ProvenanceFilterBuilder
from metadata_store.core.provenance.models import Provenance, ProvenanceSearch
from metadata_store.integrations.db.base import InsertOutcome
from metadata_store.integrations.db.engines.mongodb import (
    MongoRepository,
    MongoStore,
    PreparedDocument,
)
from metadata_store.shared.const import SharedConst
from metadata_store.shared.logging import Logger


class ProvenanceRepository(MongoRepository[Provenance, ProvenanceSearch]):
    """프로비넌스 저장소.

    Args:
        store: 공유 MongoDB 저장소 엔진.
        collection: 프로비넌스 컬렉션 이름.
        identifier_generator: 삽입 시 식별자를 생성하는 포트.
        default_page_size: 페이지 크기 기본값.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        store: MongoStore,
        collection: str,
        identifier_generator: IdentifierGenerator,
        default_page_size: int = SharedConst.DEFAULT_PAGE_SIZE,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(
            store=store,
            collection=collection,
            filter_builder=ProvenanceFilterBuilder(logger=logger),
            mapper=ProvenanceDocumentMapper(),
            unique_field="uri",
            default_page_size=default_page_size,
            logger=logger,
        )
        self._identifier_generator = identifier_generator

    def check_and_insert(self, records: Sequence[Provenance]) -> InsertOutcome:
        """프로비넌스는 모델 검증만으로 충분하므로 바로 삽입한다."""

        return self.insert_batch(records)

    def _prepare_insert(self, record: Provenance) -> PreparedDocument:
        identified = record.model_copy(
            update={"uri": self._identifier_generator.new_identifier(PROVENANCE_CONCEPT)}
        )
        return super()._prepare_insert(identified)
