"""
목적: 프로비넌스 모듈 공개 API를 제공한다.
설명: 도메인 모델, 필터 빌더, 매퍼, 저장소를 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/core/provenance/repository.py
"""

from metadata_store.core.provenance.const import PROVENANCE_CONCEPT
from metadata_store.core.provenance.document_mapper import ProvenanceDocumentMapper
from metadata_store.core.provenance.filter_builder import ProvenanceFilterBuilder
from metadata_store.core.provenance.models import Provenance, ProvenanceSearch
from metadata_store.core.provenance.repository import ProvenanceRepository

__all__ = [
    "PROVENANCE_CONCEPT",
    "Provenance",
    "ProvenanceSearch",
    "ProvenanceDocumentMapper",
    "ProvenanceFilterBuilder",
    "ProvenanceRepository",
]
