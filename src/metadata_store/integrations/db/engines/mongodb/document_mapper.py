"""
목적: MongoDB 문서 매퍼 기반 클래스를 제공한다.
설명: 도메인 레코드와 MongoDB 문서 간 변환 계약과 커서 기반 지연 배치 변환을 담당한다.
디자인 패턴: 매퍼 패턴, 템플릿 메서드
참조: src/metadata_store/core/image_metadata/document_mapper.py, src/metadata_store/core/provenance/document_mapper.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

RecordT = TypeVar("RecordT")


class MongoDocumentMapper(ABC, Generic[RecordT]):
    """MongoDB 문서 매퍼."""

    @abstractmethod
    def to_document(self, record: RecordT) -> Dict[str, Any]:
        """레코드를 삽입용 문서로 변환한다. 변환 불가 시 `ConversionError`를 낸다."""

    @abstractmethod
    def from_document(self, data: Mapping[str, Any]) -> RecordT:
        """MongoDB 문서를 레코드로 변환한다."""

    def map_batch(self, cursor) -> Iterator[RecordT]:
        """커서를 지연 변환하는 1회성 이터레이터를 반환한다.

        소진되거나 중간에 닫히면(예외 포함) 커서를 닫는다.
        """

        try:
            for data in cursor:
                yield self.from_document(data)
        finally:
            cursor.close()

    def _sub_document(self, data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
        value = data.get(key)
        if isinstance(value, Mapping):
            return value
        return None

    def _sub_documents(self, data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
        value = data.get(key)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, Mapping)]

    def _string(self, data: Mapping[str, Any], key: str) -> Optional[str]:
        value = data.get(key)
        if value is None:
            return None
        return str(value)
