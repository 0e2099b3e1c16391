"""
목적: 이미지 메타데이터 필터 빌더를 제공한다.
설명: 식별자/타입 일치, 관련 항목 동시 포함, 촬영 시각, 연도별 식별자 접두사 조건을 MongoDB 필터로 변환한다.
디자인 패턴: 빌더 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/filter_builder.py
"""

from __future__ import annotations

from typing import Any, Dict

from metadata_store.core.image_metadata.const import ImageMetadataFields as F
from metadata_store.core.image_metadata.models import ImageMetadataSearch
from metadata_store.integrations.db.engines.mongodb import MongoFilterBuilder


class ImageMetadataFilterBuilder(MongoFilterBuilder[ImageMetadataSearch]):
    """이미지 메타데이터 필터 빌더."""

    def _apply_criteria(self, query: Dict[str, Any], criteria: ImageMetadataSearch) -> None:
        self._append_equals(query, F.URI, criteria.uri)
        self._append_equals(query, F.RDF_TYPE, criteria.rdf_type)
        self._append_all_elem_match(query, F.CONCERN, F.CONCERN_URI, criteria.concerned_items)
        self._append_date_equals(query, F.SHOOTING_DATE, criteria.date)

    def build_year_filter(self, namespace_root: str, year: int) -> Dict[str, Any]:
        """`<네임스페이스 루트>/<연도>`로 시작하는 식별자 필터를 생성한다."""

        prefix = f"{namespace_root.rstrip('/')}/{year}"
        return {F.URI: self.prefix_regex(prefix)}
