"""
목적: DB 세션/트랜잭션 추상화를 제공한다.
설명: 세션 수명 상태를 명시하고, with 문 종료 시 열린 트랜잭션 중단과 세션 종료를 보장한다.
디자인 패턴: 템플릿 메서드, 컨텍스트 매니저, 상태 머신
참조: src/metadata_store/integrations/db/engines/mongodb/session.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class TransactionState(str, Enum):
    """세션/트랜잭션 수명 상태."""

    IDLE = "IDLE"
    SESSION_STARTED = "SESSION_STARTED"
    TRANSACTION_OPEN = "TRANSACTION_OPEN"
    COMMITTED = "COMMITTED"
    ABORTED = "ABORTED"
    COMMIT_UNKNOWN = "COMMIT_UNKNOWN"
    CLOSED = "CLOSED"


class BaseSession(ABC):
    """DB 세션 인터페이스.

    상태 전이: IDLE → SESSION_STARTED → TRANSACTION_OPEN → (COMMITTED | ABORTED | COMMIT_UNKNOWN) → CLOSED.
    COMMIT_UNKNOWN은 커밋 응답을 받지 못해 반영 여부를 알 수 없는 상태이다.
    커밋은 항상 명시적으로 호출해야 하며, with 블록을 벗어날 때 열린 트랜잭션은 중단된다.
    """

    def __init__(self) -> None:
        self._state = TransactionState.IDLE

    @property
    def state(self) -> TransactionState:
        """현재 상태를 반환한다."""

        return self._state

    @abstractmethod
    def open(self) -> None:
        """세션을 획득한다."""

    @abstractmethod
    def begin(self) -> None:
        """트랜잭션을 시작한다."""

    @abstractmethod
    def commit(self) -> None:
        """트랜잭션을 커밋한다."""

    @abstractmethod
    def rollback(self) -> None:
        """트랜잭션을 중단한다."""

    @abstractmethod
    def close(self) -> None:
        """세션을 반환한다."""

    def __enter__(self) -> "BaseSession":
        self.open()
        try:
            self.begin()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._state == TransactionState.TRANSACTION_OPEN:
                self.rollback()
        finally:
            self.close()
