"""
목적: 저장 계층 예외 분류 체계를 제공한다.
설명: 필터 입력 오류, 원시 필터 검증 오류, 연결 오류, 변환 오류를 고정 코드로 구분한다.
디자인 패턴: 도메인 예외 계층
참조: src/metadata_store/shared/exceptions/base.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from metadata_store.shared.exceptions.base import BaseAppException
from metadata_store.shared.exceptions.models import ExceptionDetail


class StoreError(BaseAppException):
    """저장 계층 예외의 공통 부모이다.

    하위 클래스는 `CODE`만 재정의하고, 상세 모델은 생성자에서 조립한다.
    """

    CODE = "STORE_ERROR"

    def __init__(
        self,
        message: str,
        cause: Optional[str] = None,
        hint: Optional[str] = None,
        collection: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
    ) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=cause,
            hint=hint,
            collection=collection,
            metadata=metadata or {},
        )
        super().__init__(message, detail, original)


class MalformedInputError(StoreError):
    """구조화된 검색 조건 값을 해석하지 못했을 때 발생한다."""

    CODE = "MALFORMED_INPUT"


class FilterValidationError(StoreError):
    """호출자가 전달한 원시 필터 조각이 허용 문법을 벗어날 때 발생한다."""

    CODE = "FILTER_VALIDATION"


class StoreConnectionError(StoreError):
    """세션 또는 트랜잭션을 시작할 수 없을 때 발생한다."""

    CODE = "STORE_CONNECTION"


class ConversionError(StoreError):
    """도메인 레코드를 저장 문서로 변환할 수 없을 때 발생한다."""

    CODE = "CONVERSION"
