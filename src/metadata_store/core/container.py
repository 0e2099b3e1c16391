"""
목적: 저장 계층 조립 컨테이너를 제공한다.
설명: 설정으로부터 공유 MongoDB 엔진, 날짜 코덱, 엔티티 저장소를 조립하고 엔진 수명주기를 함께 관리한다.
디자인 패턴: 컴포지션 루트, 컨텍스트 매니저
참조: src/metadata_store/shared/config/settings.py, src/metadata_store/integrations/db/engines/mongodb/engine.py
"""

from __future__ import annotations

from typing import Optional

from pymongo import MongoClient

from metadata_store.core.identifiers import TimestampIdentifierGenerator
from metadata_store.core.image_metadata import ImageMetadataRepository, ImageMetadataValidator
from metadata_store.core.ports import ExistenceChecker, IdentifierGenerator
from metadata_store.core.provenance import ProvenanceRepository
from metadata_store.integrations.db.engines.mongodb import DateTimeCodec, MongoStore
from metadata_store.shared.config import StoreSettings
from metadata_store.shared.logging import Logger, create_default_logger


class RepositoryContainer:
    """엔티티 저장소 묶음.

    두 저장소는 하나의 `MongoStore`를 공유한다. 사용 전 `open()`, 종료 시 `close()`를
    호출하거나 with 문으로 사용한다.
    """

    def __init__(
        self,
        store: MongoStore,
        images: ImageMetadataRepository,
        provenance: ProvenanceRepository,
        logger: Optional[Logger] = None,
    ) -> None:
        self._store = store
        self._images = images
        self._provenance = provenance
        self._logger = logger or create_default_logger("RepositoryContainer")

    @classmethod
    def from_settings(
        cls,
        settings: StoreSettings,
        existence_checker: Optional[ExistenceChecker] = None,
        identifier_generator: Optional[IdentifierGenerator] = None,
        mongo_client_cls=MongoClient,
        logger: Optional[Logger] = None,
    ) -> "RepositoryContainer":
        """설정으로 저장소 묶음을 조립한다.

        Args:
            settings: 저장 계층 설정.
            existence_checker: 이미지 검증용 존재 확인 포트. 없으면 `check()`를 쓸 수 없다.
            identifier_generator: 프로비넌스 식별자 생성 포트. 없으면 타임스탬프 생성기를 쓴다.
            mongo_client_cls: MongoDB 클라이언트 클래스(테스트 주입용).
            logger: 공용 로거.
        """

        logger = logger or create_default_logger("RepositoryContainer")

        # 1) 공유 엔진/코덱
        store = MongoStore.from_settings(
            settings.mongodb,
            logger=logger,
            mongo_client_cls=mongo_client_cls,
        )
        codec = DateTimeCodec(settings.date_timezone)

        # 2) 엔티티 저장소
        validator = None
        if existence_checker is not None:
            validator = ImageMetadataValidator(existence_checker, logger=logger)
        images = ImageMetadataRepository(
            store=store,
            collection=settings.collections.images,
            namespace_root=settings.namespace_root,
            validator=validator,
            datetime_codec=codec,
            strict_date_filter=settings.strict_date_filter,
            default_page_size=settings.default_page_size,
            logger=logger,
        )
        provenance = ProvenanceRepository(
            store=store,
            collection=settings.collections.provenance,
            identifier_generator=identifier_generator
            or TimestampIdentifierGenerator(settings.namespace_root),
            default_page_size=settings.default_page_size,
            logger=logger,
        )
        return cls(store=store, images=images, provenance=provenance, logger=logger)

    @property
    def store(self) -> MongoStore:
        return self._store

    @property
    def images(self) -> ImageMetadataRepository:
        return self._images

    @property
    def provenance(self) -> ProvenanceRepository:
        return self._provenance

    def open(self) -> None:
        self._store.connect()
        self._logger.info("저장소 컨테이너가 열렸습니다.")

    def close(self) -> None:
        self._store.close()
        self._logger.info("저장소 컨테이너가 닫혔습니다.")

    def __enter__(self) -> "RepositoryContainer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
