"""
목적: metadata_store 패키지 공개 API를 제공한다.
설명: 저장소 컨테이너, 설정, 엔티티 저장소를 최상위에서 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/core/container.py, src/metadata_store/shared/config/settings.py
"""

from metadata_store.core.container import RepositoryContainer
from metadata_store.core.image_metadata import ImageMetadataRepository
from metadata_store.core.provenance import ProvenanceRepository
from metadata_store.shared.config import StoreSettings, load_settings

__all__ = [
    "RepositoryContainer",
    "ImageMetadataRepository",
    "ProvenanceRepository",
    "StoreSettings",
    "load_settings",
]
