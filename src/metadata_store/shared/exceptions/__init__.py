"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 예외 모델, 베이스 클래스, 저장 계층 예외 분류를 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/shared/exceptions/models.py, src/metadata_store/shared/exceptions/base.py, src/metadata_store/shared/exceptions/errors.py
"""

from metadata_store.shared.exceptions.base import BaseAppException
from metadata_store.shared.exceptions.errors import (
    ConversionError,
    FilterValidationError,
    MalformedInputError,
    StoreConnectionError,
    StoreError,
)
from metadata_store.shared.exceptions.models import ExceptionDetail

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "StoreError",
    "MalformedInputError",
    "FilterValidationError",
    "StoreConnectionError",
    "ConversionError",
]
