"""
목적: 이미지 메타데이터 도메인 모델을 정의한다.
설명: 이미지 메타데이터 레코드, 관련 항목, 촬영 설정, 파일 정보와 검색 조건 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/metadata_store/core/image_metadata/document_mapper.py, src/metadata_store/core/image_metadata/filter_builder.py
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ConcernItem(BaseModel):
    """이미지가 관련된 항목(식별자 + 타입)."""

    uri: str
    rdf_type: Optional[str] = None


class ShootingConfiguration(BaseModel):
    """촬영 설정이다.

    Args:
        date: 촬영 시각 텍스트(`yyyy-MM-dd HH:mm:ssZ`).
        position: 센서 위치.
        timestamp: 저장 시각(epoch 밀리초). 삽입 시 서버가 할당한다.
    """

    date: Optional[str] = None
    position: Optional[str] = None
    timestamp: Optional[int] = None


class FileInformations(BaseModel):
    """서버 파일 저장 정보."""

    checksum: Optional[str] = None
    extension: Optional[str] = None
    server_file_path: Optional[str] = None


class ImageMetadata(BaseModel):
    """이미지 메타데이터 레코드."""

    uri: Optional[str] = None
    rdf_type: Optional[str] = None
    concerned_items: List[ConcernItem] = Field(default_factory=list)
    configuration: Optional[ShootingConfiguration] = None
    file_informations: Optional[FileInformations] = None


class ImageMetadataSearch(BaseModel):
    """이미지 메타데이터 검색 조건. 비어 있는 필드는 조건에서 제외된다.

    Args:
        uri: 이미지 식별자 일치.
        rdf_type: 이미지 타입 일치.
        date: 촬영 시각 일치(`yyyy-MM-dd HH:mm:ssZ`).
        concerned_items: 모두 함께 포함되어야 하는 관련 항목 식별자 목록.
    """

    uri: Optional[str] = None
    rdf_type: Optional[str] = None
    date: Optional[str] = None
    concerned_items: List[str] = Field(default_factory=list)
