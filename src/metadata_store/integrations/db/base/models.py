"""
목적: 배치 쓰기 결과 모델을 정의한다.
설명: 생성 식별자 목록과 항목별 진단 메시지를 담는 구조화된 결과를 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/metadata_store/integrations/db/engines/mongodb/batch_writer.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class DiagnosticKind(str, Enum):
    """진단 종류."""

    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WRITE_ERROR = "WRITE_ERROR"
    # 커밋 응답을 받지 못해 반영 여부를 알 수 없음. 호출자가 식별자로 다시 조회해 확인한다.
    COMMIT_UNKNOWN = "COMMIT_UNKNOWN"


class InsertDiagnostic(BaseModel):
    """배치 쓰기 실패 진단 항목이다.

    Args:
        kind: 진단 종류.
        message: 사람이 읽을 수 있는 설명.
        identifier: 관련 레코드 식별자(알 수 있는 경우).
        code: 저장소 에러 코드(알 수 있는 경우).
        metadata: 추가 정보.
    """

    kind: DiagnosticKind
    message: str
    identifier: Optional[str] = None
    code: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class InsertOutcome(BaseModel):
    """배치 쓰기 결과이다.

    성공 시 `created_identifiers`에 배치 전체 식별자가 담기고,
    실패 시 식별자 목록은 비어 있으며 `diagnostics`에 원인이 담긴다.
    """

    success: bool
    created_identifiers: List[str] = Field(default_factory=list)
    diagnostics: List[InsertDiagnostic] = Field(default_factory=list)

    @classmethod
    def created(cls, identifiers: List[str]) -> "InsertOutcome":
        """성공 결과를 생성한다."""

        return cls(success=True, created_identifiers=list(identifiers))

    @classmethod
    def rejected(cls, diagnostics: List[InsertDiagnostic]) -> "InsertOutcome":
        """실패 결과를 생성한다."""

        return cls(success=False, diagnostics=list(diagnostics))

    def has(self, kind: DiagnosticKind) -> bool:
        """지정 종류의 진단 존재 여부를 반환한다."""

        return any(item.kind == kind for item in self.diagnostics)
