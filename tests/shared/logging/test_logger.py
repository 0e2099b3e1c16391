"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 컨텍스트 병합, 저장소 공유, 레벨 필터, 표준 출력 JSON 기록을 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/metadata_store/shared/logging/logger.py, src/metadata_store/shared/logging/models.py
"""

from __future__ import annotations

import json

from metadata_store.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test")
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_logger_with_context_merges_tags() -> None:
    """컨텍스트 병합 규칙이 올바른지 확인한다."""

    base_context = LogContext(collection="images", tags={"service": "store", "env": "dev"})
    logger = InMemoryLogger(name="ctx-test", base_context=base_context, emit_stdout=False)

    logger.info("기본 컨텍스트 로그")

    child_logger = logger.with_context(
        LogContext(operation="insert_batch", tags={"env": "prod", "batch": "b-1"})
    )
    child_logger.error("확장 컨텍스트 로그")

    records = logger.repository.list()

    assert len(records) == 2
    assert records[0].context is not None
    assert records[0].context.operation is None
    assert records[0].context.tags["env"] == "dev"
    assert records[1].context is not None
    assert records[1].context.collection == "images"
    assert records[1].context.operation == "insert_batch"
    assert records[1].context.tags == {"service": "store", "env": "prod", "batch": "b-1"}


def test_repository_find_filters_by_level() -> None:
    logger = InMemoryLogger(name="level-test", emit_stdout=False)
    logger.debug("d")
    logger.warning("w1")
    logger.warning("w2", metadata={"count": 2})

    warnings = logger.repository.find(LogLevel.WARNING)

    assert [record.message for record in warnings] == ["w1", "w2"]
    assert warnings[1].metadata == {"count": 2}


def test_logger_writes_json_to_stdout(capsys) -> None:
    """표준 출력 기록이 켜지면 한 줄 JSON을 출력하는지 확인한다."""

    logger = InMemoryLogger(name="stdout-test", emit_stdout=True)
    logger.info("출력 로그", metadata={"collection": "images"})

    line = capsys.readouterr().out.strip()
    payload = json.loads(line)

    assert payload["level"] == "INFO"
    assert payload["logger"] == "stdout-test"
    assert payload["message"] == "출력 로그"
    assert payload["metadata"] == {"collection": "images"}


def test_stdout_flag_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("METADATA_STORE_LOG_STDOUT", "true")
    logger = create_default_logger("env-test")

    monkeypatch.setenv("METADATA_STORE_LOG_STDOUT", "0")
    quiet = create_default_logger("env-test")

    assert logger._emit_stdout is True
    assert quiet._emit_stdout is False
