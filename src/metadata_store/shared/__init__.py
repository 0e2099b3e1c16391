"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 예외와 로깅 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/shared/exceptions, src/metadata_store/shared/logging
"""

from metadata_store.shared.exceptions import (
    BaseAppException,
    ConversionError,
    ExceptionDetail,
    FilterValidationError,
    MalformedInputError,
    StoreConnectionError,
)
from metadata_store.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "MalformedInputError",
    "FilterValidationError",
    "StoreConnectionError",
    "ConversionError",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogger",
    "create_default_logger",
]
