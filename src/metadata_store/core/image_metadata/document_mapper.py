"""
목적: 이미지 메타데이터 문서 매퍼를 제공한다.
설명: ImageMetadata 모델과 MongoDB 문서(concern/shootingConfiguration/storage 하위 문서) 간 변환을 담당한다.
디자인 패턴: 매퍼 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/document_mapper.py, src/metadata_store/core/image_metadata/const.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from metadata_store.core.image_metadata.const import ImageMetadataFields as F
from metadata_store.core.image_metadata.models import (
    ConcernItem,
    FileInformations,
    ImageMetadata,
    ShootingConfiguration,
)
from metadata_store.integrations.db.engines.mongodb import DateTimeCodec, MongoDocumentMapper
from metadata_store.shared.exceptions import ConversionError, MalformedInputError


class ImageMetadataDocumentMapper(MongoDocumentMapper[ImageMetadata]):
    """이미지 메타데이터 문서 매퍼."""

    def __init__(self, datetime_codec: Optional[DateTimeCodec] = None) -> None:
        self._datetime_codec = datetime_codec or DateTimeCodec()

    def to_document(self, record: ImageMetadata) -> Dict[str, Any]:
        if not record.uri:
            raise ConversionError("이미지 식별자(uri)가 필요합니다.")
        if record.configuration is None:
            raise self._missing(record.uri, "configuration")
        if record.file_informations is None:
            raise self._missing(record.uri, "file_informations")
        configuration = record.configuration
        storage = record.file_informations
        return {
            F.URI: record.uri,
            F.RDF_TYPE: record.rdf_type,
            F.CONCERN: [
                {F.CONCERN_URI: item.uri, F.CONCERN_RDF_TYPE: item.rdf_type}
                for item in record.concerned_items
            ],
            F.SHOOTING_CONFIGURATION: {
                F.DATE: self._parse_date(record.uri, configuration.date),
                F.TIMESTAMP: configuration.timestamp,
                F.SENSOR_POSITION: configuration.position,
            },
            F.STORAGE: {
                F.EXTENSION: storage.extension,
                F.CHECKSUM: storage.checksum,
                F.SERVER_FILE_PATH: storage.server_file_path,
            },
        }

    def from_document(self, data: Mapping[str, Any]) -> ImageMetadata:
        return ImageMetadata(
            uri=self._string(data, F.URI),
            rdf_type=self._string(data, F.RDF_TYPE),
            concerned_items=self._concerned_items(data),
            configuration=self._configuration(self._sub_document(data, F.SHOOTING_CONFIGURATION)),
            file_informations=self._storage(self._sub_document(data, F.STORAGE)),
        )

    def _concerned_items(self, data: Mapping[str, Any]) -> List[ConcernItem]:
        items: List[ConcernItem] = []
        for item in self._sub_documents(data, F.CONCERN):
            uri = self._string(item, F.CONCERN_URI)
            if uri is None:
                continue
            items.append(ConcernItem(uri=uri, rdf_type=self._string(item, F.CONCERN_RDF_TYPE)))
        return items

    def _configuration(
        self, data: Optional[Mapping[str, Any]]
    ) -> Optional[ShootingConfiguration]:
        if data is None:
            return None
        raw_date = data.get(F.DATE)
        raw_timestamp = data.get(F.TIMESTAMP)
        return ShootingConfiguration(
            date=self._datetime_codec.render(raw_date) if isinstance(raw_date, datetime) else None,
            position=self._string(data, F.SENSOR_POSITION),
            timestamp=int(raw_timestamp) if raw_timestamp is not None else None,
        )

    def _storage(self, data: Optional[Mapping[str, Any]]) -> Optional[FileInformations]:
        if data is None:
            return None
        return FileInformations(
            checksum=self._string(data, F.CHECKSUM),
            extension=self._string(data, F.EXTENSION),
            server_file_path=self._string(data, F.SERVER_FILE_PATH),
        )

    def _parse_date(self, uri: str, text: Optional[str]) -> datetime:
        if text is None:
            raise self._missing(uri, "configuration.date")
        try:
            return self._datetime_codec.parse(text)
        except MalformedInputError as error:
            raise ConversionError(
                f"촬영 시각을 해석할 수 없습니다: {text}",
                cause=error.detail.cause,
                hint=error.detail.hint,
                metadata={"identifier": uri, "field": "configuration.date"},
                original=error,
            ) from error

    def _missing(self, uri: str, field: str) -> ConversionError:
        return ConversionError(
            f"필수 하위 레코드가 없습니다: {field}",
            metadata={"identifier": uri, "field": field},
        )
