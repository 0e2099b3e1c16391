"""
목적: 이미지 메타데이터 필터 생성 규칙을 검증한다.
설명: 식별자/타입 일치, 관련 항목 동시 포함, 촬영 시각, 연도 접두사 필터를 확인한다.
디자인 패턴: 빌더 패턴
참조: src/metadata_store/core/image_metadata/filter_builder.py
"""

from __future__ import annotations

from datetime import datetime, timezone

from metadata_store.core.image_metadata import ImageMetadataFilterBuilder, ImageMetadataSearch


def test_full_criteria(logger) -> None:
    query = ImageMetadataFilterBuilder(logger=logger).build(
        ImageMetadataSearch(
            uri="http://www.opensilex.org/demo/2018/i1",
            rdf_type="http://www.opensilex.org/vocabulary/oeso#HemisphericalImage",
            date="2017-06-15 10:51:00+0000",
            concerned_items=["http://a/p1", "http://a/p2"],
        )
    )

    assert query == {
        "uri": "http://www.opensilex.org/demo/2018/i1",
        "rdfType": "http://www.opensilex.org/vocabulary/oeso#HemisphericalImage",
        "$and": [
            {"concern": {"$elemMatch": {"uri": "http://a/p1"}}},
            {"concern": {"$elemMatch": {"uri": "http://a/p2"}}},
        ],
        "shootingConfiguration.date": datetime(2017, 6, 15, 10, 51, tzinfo=timezone.utc),
    }


def test_empty_concern_list_adds_no_clause(logger) -> None:
    query = ImageMetadataFilterBuilder(logger=logger).build(ImageMetadataSearch(rdf_type="t"))

    assert query == {"rdfType": "t"}


def test_year_filter_is_anchored_prefix(logger) -> None:
    builder = ImageMetadataFilterBuilder(logger=logger)

    assert builder.build_year_filter("http://www.opensilex.org/demo/", 2019) == {
        "uri": {"$regex": "^http://www\\.opensilex\\.org/demo/2019"}
    }
