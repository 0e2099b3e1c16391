"""
목적: 저장 계층이 소비하는 외부 협력자 포트를 정의한다.
설명: 존재 여부 확인기와 식별자 생성기 인터페이스를 Protocol로 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/metadata_store/core/image_metadata/validator.py, src/metadata_store/core/identifiers.py
"""

from __future__ import annotations

from typing import Protocol


class ExistenceChecker(Protocol):
    """식별자 존재 여부 확인 포트(예: 트리플스토어 조회)."""

    def exists(self, identifier: str) -> bool:
        """식별자가 외부 저장소에 존재하는지 반환한다."""


class IdentifierGenerator(Protocol):
    """서버 할당 식별자 생성 포트."""

    def new_identifier(self, entity_type: str) -> str:
        """엔티티 타입에 맞는 새 식별자를 반환한다."""
