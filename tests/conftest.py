"""
목적: 테스트 공통 환경/픽스처/로깅 훅을 단일화해 제공한다.
설명: .env 로딩, 메모리 MongoDB 대체 객체 기반 저장소 픽스처, 로그 수집 픽스처를 함께 제공한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: tests/_mongo_fakes.py, pyproject.toml
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import pytest
from dotenv import load_dotenv

from _mongo_fakes import FakeMongoClient
from metadata_store.integrations.db.engines.mongodb import MongoStore
from metadata_store.shared.logging import InMemoryLogger, InMemoryLogRepository


_LOGGER = logging.getLogger("tests")
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_NAMESPACE_ROOT = "http://www.opensilex.org/demo"


def _load_env_files() -> None:
    """환경 변수 파일이 있으면 로딩한다. 단위 테스트는 .env 없이도 동작한다."""

    env_path = _PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


class FixedClock:
    """테스트용 고정 시계."""

    def __init__(self, value: datetime) -> None:
        self.value = value

    def __call__(self) -> datetime:
        return self.value


class StaticExistenceChecker:
    """알려진 식별자 집합으로 존재 여부를 답하는 검사기."""

    def __init__(self, known: set[str]) -> None:
        self.known = set(known)
        self.calls: list[str] = []

    def exists(self, identifier: str) -> bool:
        self.calls.append(identifier)
        return identifier in self.known


class SequenceIdentifierGenerator:
    """순번 기반 식별자 생성기."""

    def __init__(self, root: str = _NAMESPACE_ROOT) -> None:
        self.root = root
        self.counter = 0
        self.entity_types: list[str] = []

    def new_identifier(self, entity_type: str) -> str:
        self.counter += 1
        self.entity_types.append(entity_type)
        return f"{self.root}/id/provenance/{1551805521600 + self.counter}"


@pytest.fixture
def namespace_root() -> str:
    return _NAMESPACE_ROOT


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def logger(log_repository: InMemoryLogRepository) -> InMemoryLogger:
    """테스트 간 로그가 섞이지 않도록 저장소를 분리한 로거."""

    return InMemoryLogger(name="test", repository=log_repository, emit_stdout=False)


@pytest.fixture
def store(logger: InMemoryLogger) -> Iterator[MongoStore]:
    """메모리 대체 클라이언트로 연결된 저장소 엔진."""

    engine = MongoStore(database="phis_test", logger=logger, mongo_client_cls=FakeMongoClient)
    engine.connect()
    try:
        yield engine
    finally:
        engine.close()


@pytest.fixture
def fake_client(store: MongoStore) -> FakeMongoClient:
    return store.client


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2019, 3, 5, 17, 5, 21, 606000, tzinfo=timezone.utc))


@pytest.fixture
def existence_checker() -> StaticExistenceChecker:
    return StaticExistenceChecker(
        {
            "http://www.opensilex.org/vocabulary/oeso#HemisphericalImage",
            "http://www.opensilex.org/demo/DMO2018-1",
            "http://www.opensilex.org/demo/DMO2018-2",
        }
    )


@pytest.fixture
def identifier_generator() -> SequenceIdentifierGenerator:
    return SequenceIdentifierGenerator()


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
