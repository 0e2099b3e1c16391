"""
목적: 프로비넌스 도메인 모델을 정의한다.
설명: 프로비넌스 레코드와 검색 조건 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/metadata_store/core/provenance/document_mapper.py, src/metadata_store/core/provenance/filter_builder.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Provenance(BaseModel):
    """프로비넌스 레코드.

    Args:
        uri: 식별자. 삽입 시 서버가 할당한다.
        label: 사람이 읽는 이름.
        comment: 자유 설명.
        metadata: 스키마가 고정되지 않은 중첩 메타데이터.
    """

    uri: Optional[str] = None
    label: Optional[str] = None
    comment: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ProvenanceSearch(BaseModel):
    """프로비넌스 검색 조건. label/comment는 정규식으로 비교한다."""

    uri: Optional[str] = None
    label: Optional[str] = None
    comment: Optional[str] = None
