"""
목적: DB 공통 추상화 공개 API를 제공한다.
설명: 세션 인터페이스와 배치 쓰기 결과 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/metadata_store/integrations/db/base/session.py, src/metadata_store/integrations/db/base/models.py
"""

from metadata_store.integrations.db.base.models import (
    DiagnosticKind,
    InsertDiagnostic,
    InsertOutcome,
)
from metadata_store.integrations.db.base.session import BaseSession, TransactionState

__all__ = [
    "BaseSession",
    "TransactionState",
    "DiagnosticKind",
    "InsertDiagnostic",
    "InsertOutcome",
]
