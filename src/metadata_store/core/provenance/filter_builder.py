"""
목적: 프로비넌스 필터 빌더를 제공한다.
설명: 식별자 일치와 label/comment 정규식 조건을 원시 필터 조각 위에 덧붙인다.
디자인 패턴: 빌더 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/filter_builder.py
"""

from __future__ import annotations

from typing import Any, Dict

from metadata_store.core.provenance.const import ProvenanceFields as F
from metadata_store.core.provenance.models import ProvenanceSearch
from metadata_store.integrations.db.engines.mongodb import MongoFilterBuilder


class ProvenanceFilterBuilder(MongoFilterBuilder[ProvenanceSearch]):
    """프로비넌스 필터 빌더.

    예: `{"metadata.SensingDevice": "…/s001", "uri": "…/1551805521606",
    "label": {"$regex": "PROV2019-LEAF"}, "comment": {"$regex": "plant"}}`
    """

    def _apply_criteria(self, query: Dict[str, Any], criteria: ProvenanceSearch) -> None:
        self._append_equals(query, F.URI, criteria.uri)
        self._append_regex(query, F.LABEL, criteria.label)
        self._append_regex(query, F.COMMENT, criteria.comment)
