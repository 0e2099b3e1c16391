"""
목적: 이미지 메타데이터 문서 필드 이름을 제공한다.
설명: 저장 문서의 키는 하위 호환 조회를 위한 고정 계약이므로 한 곳에서 정의한다.
디자인 패턴: 상수 객체
참조: src/metadata_store/core/image_metadata/document_mapper.py, src/metadata_store/core/image_metadata/filter_builder.py
"""


class ImageMetadataFields:
    """이미지 메타데이터 문서 필드 이름."""

    URI = "uri"
    RDF_TYPE = "rdfType"
    CONCERN = "concern"
    CONCERN_URI = "uri"
    CONCERN_RDF_TYPE = "rdfType"
    SHOOTING_CONFIGURATION = "shootingConfiguration"
    DATE = "date"
    TIMESTAMP = "timestamp"
    SENSOR_POSITION = "sensorPosition"
    STORAGE = "storage"
    EXTENSION = "extension"
    CHECKSUM = "md5sum"
    SERVER_FILE_PATH = "serverFilePath"
    SHOOTING_DATE = f"{SHOOTING_CONFIGURATION}.{DATE}"


__all__ = ["ImageMetadataFields"]
