"""
목적: 실제 MongoDB에서 엔티티 저장소의 삽입/조회/건수 동작을 검증한다.
설명: 레플리카셋 MongoDB에서 원자적 배치 삽입, 중복 시 전체 중단, 페이지 조회, 건수 일관성을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/metadata_store/core/container.py, src/metadata_store/integrations/db/engines/mongodb/batch_writer.py
"""

from __future__ import annotations

import logging
import os
import uuid

import pytest

from metadata_store import RepositoryContainer, StoreSettings
from metadata_store.core.image_metadata import (
    ConcernItem,
    FileInformations,
    ImageMetadata,
    ImageMetadataSearch,
    ShootingConfiguration,
)
from metadata_store.core.provenance import Provenance, ProvenanceSearch
from metadata_store.integrations.db.base import DiagnosticKind


_LOGGER = logging.getLogger("tests.crud")
_ROOT = "http://www.opensilex.org/demo"


def _log_step(action: str, **context) -> None:
    """CRUD 단계별 동작을 로깅한다."""

    if context:
        payload = ", ".join(f"{key}={value}" for key, value in context.items())
        _LOGGER.info("%s | %s", action, payload)
        return
    _LOGGER.info("%s", action)


@pytest.fixture
def container():
    uri = os.getenv("MONGODB_URI")
    db_name = os.getenv("MONGODB_DB")
    if not uri or not db_name:
        pytest.skip("MONGODB_URI와 MONGODB_DB 환경 변수가 필요합니다.")

    suffix = uuid.uuid4().hex[:8]
    settings = StoreSettings.model_validate(
        {
            "mongodb": {"uri": uri, "database": db_name},
            "collections": {"images": f"images_{suffix}", "provenance": f"provenance_{suffix}"},
            "namespace_root": _ROOT,
        }
    )
    _log_step("컨테이너 생성", database=db_name, suffix=suffix)
    instance = RepositoryContainer.from_settings(settings)
    instance.open()
    try:
        yield instance
    finally:
        _log_step("컬렉션 삭제", suffix=suffix)
        instance.store.delete_collection(settings.collections.images)
        instance.store.delete_collection(settings.collections.provenance)
        instance.close()


def _image(uri: str, concern: str) -> ImageMetadata:
    return ImageMetadata(
        uri=uri,
        rdf_type="http://www.opensilex.org/vocabulary/oeso#HemisphericalImage",
        concerned_items=[ConcernItem(uri=concern, rdf_type="http://v#Plant")],
        configuration=ShootingConfiguration(date="2017-06-15 10:51:00+0000", position="p"),
        file_informations=FileInformations(checksum="c", extension="jpg", server_file_path="/f"),
    )


def test_image_batch_is_atomic(container) -> None:
    """중복 식별자가 섞인 배치는 하나도 저장되지 않는지 검증한다."""

    images = container.images
    _log_step("기존 문서 저장", uri="i0")
    assert images.insert_batch([_image(f"{_ROOT}/2019/i0", "http://a/p1")]).success

    batch = [_image(f"{_ROOT}/2019/i{i}", "http://a/p1") for i in (1, 2, 3, 0)]
    _log_step("중복 포함 배치 저장", count=len(batch))
    outcome = images.insert_batch(batch)

    assert outcome.success is False
    assert outcome.has(DiagnosticKind.CONSTRAINT_VIOLATION)
    assert len(outcome.diagnostics) == 1
    assert images.count() == 1
    for i in (1, 2, 3):
        assert images.find(ImageMetadataSearch(uri=f"{_ROOT}/2019/i{i}")) == []


def test_image_paging_and_count(container) -> None:
    """페이지 조회와 건수가 같은 필터에서 일관적인지 검증한다."""

    images = container.images
    batch = [_image(f"{_ROOT}/2019/i{i:02d}", "http://a/p1" if i % 2 else "http://a/p2") for i in range(25)]
    _log_step("문서 배치 저장", count=len(batch))
    assert images.insert_batch(batch).success

    _log_step("페이지 조회", page=2, page_size=10)
    assert len(images.find(page=2, page_size=10)) == 5
    assert images.find(page=3, page_size=10) == []

    criteria = ImageMetadataSearch(concerned_items=["http://a/p1"])
    _log_step("조건 건수 조회", concern="http://a/p1")
    assert images.count(criteria) == len(images.find(criteria, page_size=100)) == 12

    on_date = images.find(ImageMetadataSearch(date="2017-06-15 12:51:00+0200"), page_size=1)
    assert on_date[0].configuration.date == "2017-06-15 10:51:00+0000"


def test_provenance_insert_and_search(container) -> None:
    """프로비넌스 식별자 할당과 원시 필터 검색을 검증한다."""

    provenance = container.provenance
    _log_step("프로비넌스 저장", count=2)
    outcome = provenance.insert_batch(
        [
            Provenance(label="PROV2019-LEAF", metadata={"SensingDevice": f"{_ROOT}/s001"}),
            Provenance(label="PROV2019-EAR", metadata={"SensingDevice": f"{_ROOT}/s002"}),
        ]
    )
    assert outcome.success is True
    assert all(uri.startswith(f"{_ROOT}/id/provenance/") for uri in outcome.created_identifiers)

    _log_step("원시 필터 조회", device="s001")
    records = provenance.find(
        ProvenanceSearch(label="PROV2019"),
        raw_filter={"metadata.SensingDevice": f"{_ROOT}/s001"},
    )
    assert [record.label for record in records] == ["PROV2019-LEAF"]
