"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 저장소 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/shared/config/loader.py, src/metadata_store/shared/config/settings.py
"""

from metadata_store.shared.config.loader import ConfigLoader
from metadata_store.shared.config.settings import (
    CollectionSettings,
    MongoSettings,
    StoreSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "MongoSettings",
    "CollectionSettings",
    "StoreSettings",
    "load_settings",
]
