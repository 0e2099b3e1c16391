"""
목적: 프로비넌스 문서 매퍼를 제공한다.
설명: Provenance 모델과 MongoDB 문서 간 변환을 담당하며 메타데이터 키를 검증한다.
디자인 패턴: 매퍼 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/document_mapper.py
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

from metadata_store.core.provenance.const import ProvenanceFields as F
from metadata_store.core.provenance.models import Provenance
from metadata_store.integrations.db.engines.mongodb import MongoDocumentMapper
from metadata_store.shared.exceptions import ConversionError


class ProvenanceDocumentMapper(MongoDocumentMapper[Provenance]):
    """프로비넌스 문서 매퍼."""

    def to_document(self, record: Provenance) -> Dict[str, Any]:
        if not record.uri:
            raise ConversionError("프로비넌스 식별자(uri)가 할당되지 않았습니다.")
        if not record.label:
            raise ConversionError(
                "프로비넌스 label이 필요합니다.",
                metadata={"identifier": record.uri, "field": "label"},
            )
        self._check_keys(record.uri, record.metadata, F.METADATA)
        return {
            F.URI: record.uri,
            F.LABEL: record.label,
            F.COMMENT: record.comment,
            F.METADATA: copy.deepcopy(record.metadata),
        }

    def from_document(self, data: Mapping[str, Any]) -> Provenance:
        metadata = self._sub_document(data, F.METADATA)
        return Provenance(
            uri=self._string(data, F.URI),
            label=self._string(data, F.LABEL),
            comment=self._string(data, F.COMMENT),
            metadata=dict(metadata) if metadata is not None else {},
        )

    def _check_keys(self, uri: str, value: Any, path: str) -> None:
        if isinstance(value, Mapping):
            for key, item in value.items():
                if not isinstance(key, str) or key.startswith("$"):
                    raise ConversionError(
                        f"메타데이터 키가 올바르지 않습니다: {path}.{key}",
                        hint="키는 문자열이어야 하며 '$'로 시작할 수 없습니다.",
                        metadata={"identifier": uri, "field": f"{path}.{key}"},
                    )
                self._check_keys(uri, item, f"{path}.{key}")
        elif isinstance(value, list):
            for index, item in enumerate(value):
                self._check_keys(uri, item, f"{path}[{index}]")
