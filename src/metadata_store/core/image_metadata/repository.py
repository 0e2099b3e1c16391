"""
목적: 이미지 메타데이터 저장소를 제공한다.
설명: 검색/건수/올해 등록 건수 조회와, 저장 시각을 채운 뒤 수행하는 원자적 배치 삽입을 담당한다.
디자인 패턴: 저장소 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/repository.py, src/metadata_store/core/image_metadata/validator.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from metadata_store.core.image_metadata.document_mapper import ImageMetadataDocumentMapper
from metadata_store.core.image_metadata.filter_builder import ImageMetadataFilterBuilder
from metadata_store.core.image_metadata.models import ImageMetadata, ImageMetadataSearch
from metadata_store.core.image_metadata.validator import ImageMetadataValidator
from metadata_store.integrations.db.base import InsertOutcome
from metadata_store.integrations.db.engines.mongodb import (
    DateTimeCodec,
    MongoRepository,
    MongoStore,
    PreparedDocument,
)
from metadata_store.shared.const import SharedConst
from metadata_store.shared.logging import Logger


class ImageMetadataRepository(MongoRepository[ImageMetadata, ImageMetadataSearch]):
    """이미지 메타데이터 저장소.

    Args:
        store: 공유 MongoDB 저장소 엔진.
        collection: 이미지 컬렉션 이름.
        namespace_root: 이미지 식별자 네임스페이스 루트.
        validator: 삽입 전 검증기. 없으면 `check()`를 사용할 수 없다.
        datetime_codec: 날짜 코덱.
        strict_date_filter: 날짜 검색 조건 해석 실패를 예외로 처리할지 여부.
        default_page_size: 페이지 크기 기본값.
        clock: 현재 시각 공급 함수(연도 계산, 저장 시각 할당).
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        store: MongoStore,
        collection: str,
        namespace_root: str,
        validator: Optional[ImageMetadataValidator] = None,
        datetime_codec: Optional[DateTimeCodec] = None,
        strict_date_filter: bool = False,
        default_page_size: int = SharedConst.DEFAULT_PAGE_SIZE,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        codec = datetime_codec or DateTimeCodec()
        super().__init__(
            store=store,
            collection=collection,
            filter_builder=ImageMetadataFilterBuilder(
                datetime_codec=codec,
                strict_dates=strict_date_filter,
                logger=logger,
            ),
            mapper=ImageMetadataDocumentMapper(datetime_codec=codec),
            unique_field="uri",
            default_page_size=default_page_size,
            logger=logger,
        )
        self._namespace_root = namespace_root
        self._validator = validator
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def count_current_year(self) -> int:
        """올해 네임스페이스에 속한 이미지 건수를 반환한다."""

        builder: ImageMetadataFilterBuilder = self._filter_builder
        query = builder.build_year_filter(self._namespace_root, self._clock().year)
        return self._count_query(query)

    def check(self, records: Sequence[ImageMetadata]) -> InsertOutcome:
        """이미지 타입과 관련 항목의 존재 여부를 검증한다."""

        if self._validator is None:
            raise RuntimeError("이미지 메타데이터 검증기가 설정되지 않았습니다.")
        return self._validator.check(records)

    def check_and_insert(self, records: Sequence[ImageMetadata]) -> InsertOutcome:
        """검증을 통과한 경우에만 배치를 삽입한다."""

        checked = self.check(records)
        if not checked.success:
            return checked
        return self.insert_batch(records)

    def _prepare_insert(self, record: ImageMetadata) -> PreparedDocument:
        stamped = record
        if record.configuration is not None:
            stamped = record.model_copy(
                update={
                    "configuration": record.configuration.model_copy(
                        update={"timestamp": self._now_ms()}
                    )
                }
            )
        return super()._prepare_insert(stamped)

    def _now_ms(self) -> int:
        return int(self._clock().timestamp() * 1000)
