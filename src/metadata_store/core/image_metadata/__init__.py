"""
목적: 이미지 메타데이터 모듈 공개 API를 제공한다.
설명: 도메인 모델, 필터 빌더, 매퍼, 검증기, 저장소를 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/core/image_metadata/repository.py
"""

from metadata_store.core.image_metadata.document_mapper import ImageMetadataDocumentMapper
from metadata_store.core.image_metadata.filter_builder import ImageMetadataFilterBuilder
from metadata_store.core.image_metadata.models import (
    ConcernItem,
    FileInformations,
    ImageMetadata,
    ImageMetadataSearch,
    ShootingConfiguration,
)
from metadata_store.core.image_metadata.repository import ImageMetadataRepository
from metadata_store.core.image_metadata.validator import ImageMetadataValidator

__all__ = [
    "ConcernItem",
    "FileInformations",
    "ImageMetadata",
    "ImageMetadataSearch",
    "ShootingConfiguration",
    "ImageMetadataDocumentMapper",
    "ImageMetadataFilterBuilder",
    "ImageMetadataValidator",
    "ImageMetadataRepository",
]
