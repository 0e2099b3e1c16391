"""
목적: 원시 필터 조각 해석과 검증 규칙을 확인한다.
설명: JSON/매핑 입력 해석, 허용 문법(일치/정규식/$and), 거부되는 연산자와 잘못된 정규식을 검증한다.
디자인 패턴: 값 객체, 파서
참조: src/metadata_store/integrations/db/engines/mongodb/raw_filter.py
"""

from __future__ import annotations

import pytest

from metadata_store.integrations.db.engines.mongodb import RawFilter
from metadata_store.shared.exceptions import FilterValidationError


def test_parse_json_text_with_equality_and_regex() -> None:
    raw = RawFilter.parse(
        '{"metadata.SensingDevice": "http://www.opensilex.org/demo/s001",'
        ' "label": {"$regex": "PROV2019", "$options": "i"}}'
    )

    assert raw.to_query() == {
        "metadata.SensingDevice": "http://www.opensilex.org/demo/s001",
        "label": {"$regex": "PROV2019", "$options": "i"},
    }


def test_parse_accepts_nested_conjunction() -> None:
    raw = RawFilter.parse({"$and": [{"a": 1}, {"$and": [{"b": {"$regex": "^x"}}]}]})

    assert raw == RawFilter({"$and": [{"a": 1}, {"$and": [{"b": {"$regex": "^x"}}]}]})


def test_parse_returns_same_instance_and_copies_queries() -> None:
    raw = RawFilter({"a": 1})
    query = RawFilter.parse(raw).to_query()
    query["a"] = 2

    assert RawFilter.parse(raw) is raw
    assert raw.to_query() == {"a": 1}


def test_empty_object_is_allowed() -> None:
    assert RawFilter.parse("{}").to_query() == {}


@pytest.mark.parametrize(
    "value",
    [
        "{not json",
        "[1, 2]",
        42,
        {"$where": "this.a == 1"},
        {"a": {"$gt": 1}},
        {"a": {"$regex": "(unclosed"}},
        {"a": {"$regex": "x", "$options": "g"}},
        {"a": {"$regex": 5}},
        {"a": [1, 2]},
        {"$and": []},
        {"$and": [1]},
        {"$and": {"a": 1}},
        {"": 1},
    ],
)
def test_parse_rejects_unsupported_fragments(value) -> None:
    with pytest.raises(FilterValidationError) as excinfo:
        RawFilter.parse(value)

    assert excinfo.value.code == "FILTER_VALIDATION"


def test_regex_is_checked_with_python_syntax() -> None:
    assert RawFilter.parse({"a": {"$regex": "^\\w+$"}}).to_query() == {"a": {"$regex": "^\\w+$"}}

    with pytest.raises(FilterValidationError):
        RawFilter.parse({"a": {"$regex": "\\p{L}+"}})
