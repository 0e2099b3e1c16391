"""
목적: 저장소 설정 모델과 로딩 진입점을 제공한다.
설명: 컬렉션 이름, 네임스페이스 루트, MongoDB 연결 정보, 조회/날짜 정책을 Pydantic으로 검증한다.
디자인 패턴: 설정 객체, 팩토리 함수
참조: src/metadata_store/shared/config/loader.py, src/metadata_store/core/container.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from metadata_store.shared.config.loader import ConfigLoader
from metadata_store.shared.const import SharedConst
from metadata_store.shared.logging import Logger


class MongoSettings(BaseModel):
    """MongoDB 연결 설정이다.

    `uri`가 비어 있으면 host/port/user/password로 URI를 조합한다.
    """

    uri: Optional[str] = None
    database: str = "phis"
    host: str = "127.0.0.1"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    auth_source: Optional[str] = None
    replica_set: Optional[str] = None
    server_selection_timeout_ms: int = 5000


class CollectionSettings(BaseModel):
    """엔티티별 컬렉션 이름 설정이다."""

    images: str = "images"
    provenance: str = "provenance"


class StoreSettings(BaseModel):
    """저장 계층 전체 설정이다.

    Args:
        mongodb: MongoDB 연결 설정.
        collections: 엔티티별 컬렉션 이름.
        namespace_root: 식별자 네임스페이스 루트(연도별 집계와 식별자 생성에 사용).
        default_page_size: 페이지 크기 기본값.
        date_timezone: 날짜 텍스트 렌더링 타임존.
        strict_date_filter: 날짜 검색 조건 해석 실패 시 예외를 낼지 여부.
    """

    mongodb: MongoSettings = Field(default_factory=MongoSettings)
    collections: CollectionSettings = Field(default_factory=CollectionSettings)
    namespace_root: str = "http://www.opensilex.org/demo"
    default_page_size: int = SharedConst.DEFAULT_PAGE_SIZE
    date_timezone: str = SharedConst.DEFAULT_TIMEZONE
    strict_date_filter: bool = False

    @field_validator("namespace_root")
    @classmethod
    def _strip_namespace_root(cls, value: str) -> str:
        trimmed = value.strip().rstrip("/")
        if not trimmed:
            raise ValueError("namespace_root는 비어 있을 수 없습니다.")
        return trimmed

    @field_validator("default_page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("default_page_size는 1 이상이어야 합니다.")
        return value


def load_settings(
    env_file: Optional[str | Path] = None,
    json_file: Optional[str | Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> StoreSettings:
    """설정 소스를 병합해 `StoreSettings`를 생성한다.

    우선순위는 JSON 파일 < `.env` 파일 < 프로세스 환경 변수 < overrides 순이다.
    """

    loader = ConfigLoader(logger=logger)
    if json_file is not None:
        loader.add_json_file(str(json_file))
    if env_file is not None:
        loader.add_dotenv(str(env_file))
    loader.add_env()
    return StoreSettings.model_validate(loader.build(overrides))
