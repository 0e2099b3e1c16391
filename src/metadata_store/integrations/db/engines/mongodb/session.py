"""
목적: MongoDB 트랜잭션 세션을 제공한다.
설명: pymongo ClientSession을 감싸 세션 획득/트랜잭션 시작/커밋/중단/종료 상태를 추적한다.
디자인 패턴: 어댑터 패턴, 상태 머신
참조: src/metadata_store/integrations/db/base/session.py, src/metadata_store/integrations/db/engines/mongodb/batch_writer.py
"""

from __future__ import annotations

from typing import Any, Optional

from pymongo.errors import PyMongoError

from metadata_store.integrations.db.base.session import BaseSession, TransactionState
from metadata_store.integrations.db.engines.mongodb.engine import MongoStore
from metadata_store.shared.exceptions import StoreConnectionError
from metadata_store.shared.logging import Logger, create_default_logger

UNKNOWN_COMMIT_LABEL = "UnknownTransactionCommitResult"


class MongoTransactionSession(BaseSession):
    """MongoDB 트랜잭션 세션.

    한 번의 배치 쓰기에만 사용하며 호출자 간에 공유하지 않는다.

    Args:
        store: 공유 MongoDB 저장소 엔진.
        logger: 주입 가능한 로거.
        commit_attempts: 커밋 결과를 알 수 없을 때 커밋을 시도하는 최대 횟수.
    """

    def __init__(
        self,
        store: MongoStore,
        logger: Optional[Logger] = None,
        commit_attempts: int = 3,
    ) -> None:
        if commit_attempts < 1:
            raise ValueError("commit_attempts는 1 이상이어야 합니다.")
        super().__init__()
        self._commit_attempts = commit_attempts
        self._store = store
        self._logger = logger or create_default_logger("MongoTransactionSession")
        self._session: Any | None = None

    @property
    def handle(self):
        """pymongo 세션 객체를 반환한다."""

        if self._session is None:
            raise RuntimeError("세션이 시작되지 않았습니다.")
        return self._session

    def open(self) -> None:
        self._expect(TransactionState.IDLE)
        try:
            self._session = self._store.start_session()
        except (PyMongoError, RuntimeError) as error:
            raise StoreConnectionError(
                "MongoDB 세션을 시작할 수 없습니다.",
                cause=str(error),
                hint="MongoDB 연결 상태와 connect() 호출 여부를 확인하세요.",
                original=error,
            ) from error
        self._state = TransactionState.SESSION_STARTED

    def begin(self) -> None:
        self._expect(TransactionState.SESSION_STARTED)
        try:
            self.handle.start_transaction()
        except PyMongoError as error:
            raise StoreConnectionError(
                "MongoDB 트랜잭션을 시작할 수 없습니다.",
                cause=str(error),
                hint="트랜잭션은 레플리카셋 또는 샤드 클러스터에서만 지원됩니다.",
                original=error,
            ) from error
        self._state = TransactionState.TRANSACTION_OPEN

    def commit(self) -> None:
        """트랜잭션을 커밋한다.

        `UnknownTransactionCommitResult` 레이블이 붙은 실패는 커밋을 다시 시도한다.
        시도를 모두 소진하면 상태를 COMMIT_UNKNOWN으로 두고 예외를 전파한다.
        그 밖의 실패는 트랜잭션을 중단한 뒤 전파한다.
        """

        self._expect(TransactionState.TRANSACTION_OPEN)
        attempt = 1
        while True:
            try:
                self.handle.commit_transaction()
                break
            except PyMongoError as error:
                if not error.has_error_label(UNKNOWN_COMMIT_LABEL):
                    self.rollback()
                    raise
                if attempt >= self._commit_attempts:
                    self._state = TransactionState.COMMIT_UNKNOWN
                    raise
                self._logger.warning(
                    f"커밋 결과를 알 수 없어 다시 시도합니다: attempt={attempt}, error={error}"
                )
                attempt += 1
        self._state = TransactionState.COMMITTED
        self._logger.debug("트랜잭션 커밋 완료")

    def rollback(self) -> None:
        self._expect(TransactionState.TRANSACTION_OPEN)
        try:
            self.handle.abort_transaction()
        except PyMongoError as error:
            # 서버 측에서 이미 중단된 트랜잭션이면 중단 요청 자체가 실패할 수 있다.
            self._logger.warning(f"트랜잭션 중단 요청 실패: {error}")
        self._state = TransactionState.ABORTED
        self._logger.debug("트랜잭션 중단 완료")

    def close(self) -> None:
        if self._state == TransactionState.CLOSED:
            return
        if self._session is not None:
            self._session.end_session()
            self._session = None
        self._state = TransactionState.CLOSED

    def _expect(self, expected: TransactionState) -> None:
        if self._state != expected:
            raise RuntimeError(
                f"잘못된 세션 상태 전이입니다: 현재={self._state.value}, 기대={expected.value}"
            )
