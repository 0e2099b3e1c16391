"""
목적: MongoDB 연결 관리 모듈을 제공한다.
설명: 프로세스 공유 클라이언트의 초기화/종료와 클라이언트·데이터베이스 객체 보장을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/engine.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from metadata_store.shared.logging import Logger


class MongoConnectionManager:
    """MongoDB 연결 관리자."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        logger: Logger,
        mongo_client_cls,
        client_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._logger = logger
        self._mongo_client_cls = mongo_client_cls
        self._client_options = dict(client_options or {})
        self._client: Any | None = None
        self._database: Any | None = None

    @property
    def is_connected(self) -> bool:
        """연결 초기화 여부를 반환한다."""

        return self._client is not None

    def connect(self) -> None:
        """MongoDB 연결을 초기화한다."""

        if self._client is not None:
            return
        self._client = self._mongo_client_cls(self._uri, **self._client_options)
        self._database = self._client[self._database_name]
        self._logger.info(f"MongoDB 연결이 초기화되었습니다: database={self._database_name}")

    def close(self) -> None:
        """MongoDB 연결을 종료한다."""

        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database = None
        self._logger.info("MongoDB 연결이 종료되었습니다.")

    def ensure_client(self):
        """초기화된 MongoDB 클라이언트 객체를 반환한다."""

        if self._client is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._client

    def ensure_database(self):
        """초기화된 MongoDB 데이터베이스 객체를 반환한다."""

        if self._database is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._database
