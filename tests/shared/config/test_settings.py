"""
목적: 설정 로더와 저장소 설정 모델을 검증한다.
설명: 소스 병합 우선순위, 환경 변수 중첩 키 해석, 값 변환, 설정 검증 규칙을 확인한다.
디자인 패턴: 빌더 패턴, 설정 객체
참조: src/metadata_store/shared/config/loader.py, src/metadata_store/shared/config/settings.py
"""

from __future__ import annotations

import json
import os

import pytest
from pydantic import ValidationError

from metadata_store.shared.config import ConfigLoader, StoreSettings, load_settings


@pytest.fixture(autouse=True)
def _clear_store_env(monkeypatch) -> None:
    """개발자 .env 값이 설정 테스트에 섞이지 않도록 접두사 변수를 지운다."""

    for key in list(os.environ):
        if key.startswith("METADATA_STORE_"):
            monkeypatch.delenv(key, raising=False)


def test_loader_merges_nested_sources_in_order() -> None:
    loader = ConfigLoader()
    loader.add_dict({"mongodb": {"host": "a", "port": 1}, "default_page_size": 10})
    loader.add_dict({"mongodb": {"host": "b"}})

    merged = loader.build(overrides={"strict_date_filter": True})

    assert merged == {
        "mongodb": {"host": "b", "port": 1},
        "default_page_size": 10,
        "strict_date_filter": True,
    }


def test_loader_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("METADATA_STORE_MONGODB__DATABASE", "phis_env")
    monkeypatch.setenv("METADATA_STORE_STRICT_DATE_FILTER", "TRUE")
    monkeypatch.setenv("METADATA_STORE_MONGODB__USER", "")
    monkeypatch.setenv("OTHER_MONGODB__DATABASE", "ignored")

    merged = ConfigLoader().add_env().build()

    assert merged["mongodb"]["database"] == "phis_env"
    assert merged["mongodb"]["user"] is None
    assert merged["strict_date_filter"] is True
    assert "other_mongodb" not in merged


def test_load_settings_priority(tmp_path, monkeypatch) -> None:
    """JSON < .env < 환경 변수 < overrides 우선순위를 검증한다."""

    json_file = tmp_path / "settings.json"
    json_file.write_text(
        json.dumps(
            {
                "namespace_root": "http://json.example/root/",
                "default_page_size": 5,
                "collections": {"images": "json_images"},
            }
        ),
        encoding="utf-8",
    )
    env_file = tmp_path / ".env"
    env_file.write_text(
        "METADATA_STORE_DEFAULT_PAGE_SIZE=7\nMETADATA_STORE_COLLECTIONS__PROVENANCE=dotenv_prov\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("METADATA_STORE_DEFAULT_PAGE_SIZE", "9")

    settings = load_settings(
        env_file=env_file,
        json_file=json_file,
        overrides={"date_timezone": "Europe/Paris"},
    )

    assert settings.namespace_root == "http://json.example/root"
    assert settings.default_page_size == 9
    assert settings.collections.images == "json_images"
    assert settings.collections.provenance == "dotenv_prov"
    assert settings.date_timezone == "Europe/Paris"
    assert "METADATA_STORE_COLLECTIONS__PROVENANCE" not in os.environ


def test_load_settings_defaults_without_sources(tmp_path) -> None:
    settings = load_settings(env_file=tmp_path / "missing.env")

    assert settings == StoreSettings()
    assert settings.mongodb.database == "phis"
    assert settings.collections.images == "images"
    assert settings.default_page_size == 20


@pytest.mark.parametrize(
    "payload",
    [
        {"namespace_root": " / "},
        {"default_page_size": 0},
    ],
)
def test_store_settings_rejects_invalid_values(payload) -> None:
    with pytest.raises(ValidationError):
        StoreSettings.model_validate(payload)


def test_json_file_must_hold_object(tmp_path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader().add_json_file(str(path))
