"""
목적: 프로비넌스 문서 필드 이름과 개념 타입을 제공한다.
설명: 저장 문서 키와 식별자 생성에 쓰는 온톨로지 개념 URI를 정의한다.
디자인 패턴: 상수 객체
참조: src/metadata_store/core/provenance/document_mapper.py, src/metadata_store/core/provenance/repository.py
"""


class ProvenanceFields:
    """프로비넌스 문서 필드 이름."""

    URI = "uri"
    LABEL = "label"
    COMMENT = "comment"
    METADATA = "metadata"


PROVENANCE_CONCEPT = "http://www.opensilex.org/vocabulary/oeso#Provenance"


__all__ = ["ProvenanceFields", "PROVENANCE_CONCEPT"]
