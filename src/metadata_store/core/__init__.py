"""
목적: 도메인 저장 계층 공개 API를 제공한다.
설명: 엔티티 저장소, 외부 협력자 포트, 기본 식별자 생성기, 조립 컨테이너를 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/core/container.py
"""

from metadata_store.core.container import RepositoryContainer
from metadata_store.core.identifiers import TimestampIdentifierGenerator
from metadata_store.core.ports import ExistenceChecker, IdentifierGenerator

__all__ = [
    "RepositoryContainer",
    "TimestampIdentifierGenerator",
    "ExistenceChecker",
    "IdentifierGenerator",
]
