"""
목적: MongoDB 저장소 엔진을 제공한다.
설명: 공유 클라이언트 수명주기(connect/close), 컬렉션 접근, 세션 생성, 유니크 인덱스 보장을 묶는다.
디자인 패턴: 어댑터 패턴, 퍼사드
참조: src/metadata_store/integrations/db/engines/mongodb/connection.py, src/metadata_store/integrations/db/engines/mongodb/schema_manager.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pymongo import MongoClient

from metadata_store.integrations.db.engines.mongodb.connection import MongoConnectionManager
from metadata_store.integrations.db.engines.mongodb.schema_manager import MongoSchemaManager
from metadata_store.shared.config import MongoSettings
from metadata_store.shared.logging import Logger, create_default_logger


class MongoStore:
    """MongoDB 저장소 엔진.

    서비스 시작 시 `connect()`, 종료 시 `close()`를 호출하거나 with 문으로 사용한다.
    하나의 인스턴스를 여러 저장소가 공유하며, 세션은 호출마다 새로 만든다.
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        database: str = "phis",
        host: str = "127.0.0.1",
        port: int = 27017,
        user: Optional[str] = None,
        password: Optional[str] = None,
        auth_source: Optional[str] = None,
        scheme: str = "mongodb",
        client_options: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None,
        mongo_client_cls=MongoClient,
    ) -> None:
        auth_source = self._normalize_auth_source(auth_source)
        if auth_source is None and (user or password) and database:
            auth_source = database
        if not uri:
            auth = ""
            if user and password:
                auth = f"{user}:{password}@"
            elif user:
                auth = f"{user}@"
            uri = f"{scheme}://{auth}{host}:{port}"
            if auth_source and (user or password):
                uri = f"{uri}/?authSource={auth_source}"
        if not database:
            raise ValueError("database 설정이 필요합니다.")
        self._database_name = database
        self._logger = logger or create_default_logger("MongoStore")
        self._connection = MongoConnectionManager(
            uri=uri,
            database_name=database,
            logger=self._logger,
            mongo_client_cls=mongo_client_cls,
            client_options=client_options,
        )
        self._schema_manager = MongoSchemaManager()

    @classmethod
    def from_settings(
        cls,
        settings: MongoSettings,
        logger: Optional[Logger] = None,
        mongo_client_cls=MongoClient,
    ) -> "MongoStore":
        """연결 설정으로 엔진을 생성한다."""

        options: Dict[str, Any] = {
            "serverSelectionTimeoutMS": settings.server_selection_timeout_ms,
        }
        if settings.replica_set:
            options["replicaSet"] = settings.replica_set
        return cls(
            uri=settings.uri,
            database=settings.database,
            host=settings.host,
            port=settings.port,
            user=settings.user,
            password=settings.password,
            auth_source=settings.auth_source,
            client_options=options,
            logger=logger,
            mongo_client_cls=mongo_client_cls,
        )

    @property
    def database_name(self) -> str:
        """데이터베이스 이름을 반환한다."""

        return self._database_name

    @property
    def client(self):
        """공유 MongoDB 클라이언트를 반환한다."""

        return self._connection.ensure_client()

    @property
    def is_connected(self) -> bool:
        return self._connection.is_connected

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def collection(self, name: str):
        """컬렉션 핸들을 반환한다."""

        return self._connection.ensure_database()[name]

    def start_session(self):
        """새 클라이언트 세션을 시작한다."""

        return self._connection.ensure_client().start_session()

    def ensure_unique_index(self, collection: str, field: str) -> str:
        """컬렉션 필드의 유니크 인덱스를 보장한다."""

        database = self._connection.ensure_database()
        index_name = self._schema_manager.ensure_unique_index(database, collection, field)
        self._logger.debug(f"유니크 인덱스 보장: collection={collection}, field={field}")
        return index_name

    def delete_collection(self, name: str) -> None:
        database = self._connection.ensure_database()
        self._schema_manager.delete_collection(database, name)
        self._logger.info(f"MongoDB 컬렉션 삭제 완료: {name}")

    def __enter__(self) -> "MongoStore":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _normalize_auth_source(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        trimmed = value.strip()
        if not trimmed:
            return None
        return trimmed
