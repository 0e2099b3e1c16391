"""
목적: 호출자가 전달하는 원시 필터 조각을 검증된 값으로 제공한다.
설명: JSON 문자열/매핑을 해석하고 필드 일치·정규식·AND 결합만 허용하는 최소 문법으로 검증한다.
디자인 패턴: 값 객체, 파서
참조: src/metadata_store/integrations/db/engines/mongodb/filter_builder.py
"""

from __future__ import annotations

import copy
import json
import re
from typing import Any, Dict, Mapping, Union

from metadata_store.shared.exceptions import FilterValidationError

_SCALAR_TYPES = (str, int, float, bool, type(None))
_REGEX_KEYS = {"$regex", "$options"}
_REGEX_OPTIONS = set("imsx")


class RawFilter:
    """검증된 원시 필터 조각.

    허용 문법:
    - `"필드.경로": 스칼라` 일치 조건
    - `"필드.경로": {"$regex": "패턴", "$options": "i"}` 정규식 조건
    - `"$and": [조각, ...]` 결합 조건

    `$regex` 패턴은 Python `re`로 컴파일해 검증한다. 서버는 PCRE 문법을 쓰므로
    `\\p{L}` 같은 PCRE 전용 구문은 서버에서 유효하더라도 여기서는 거부된다.

    예:
        {"metadata.SensingDevice": "http://www.opensilex.org/demo/s001",
         "label": {"$regex": "PROV2019"}}
    """

    def __init__(self, clauses: Mapping[str, Any]) -> None:
        self._clauses: Dict[str, Any] = copy.deepcopy(dict(clauses))
        self._validate_fragment(self._clauses, path="$")

    @classmethod
    def parse(cls, value: Union["RawFilter", str, Mapping[str, Any]]) -> "RawFilter":
        """JSON 문자열 또는 매핑을 해석해 원시 필터를 생성한다."""

        if isinstance(value, RawFilter):
            return value
        if isinstance(value, str):
            try:
                payload = json.loads(value)
            except json.JSONDecodeError as error:
                raise FilterValidationError(
                    "원시 필터 JSON을 해석할 수 없습니다.",
                    cause=str(error),
                    metadata={"value": value},
                    original=error,
                ) from error
            value = payload
        if not isinstance(value, Mapping):
            raise FilterValidationError(
                "원시 필터는 JSON 객체여야 합니다.",
                cause=f"type={type(value).__name__}",
            )
        return cls(value)

    def to_query(self) -> Dict[str, Any]:
        """MongoDB 필터 사전 사본을 반환한다."""

        return copy.deepcopy(self._clauses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawFilter):
            return NotImplemented
        return self._clauses == other._clauses

    def __repr__(self) -> str:
        return f"RawFilter({self._clauses!r})"

    def _validate_fragment(self, fragment: Mapping[str, Any], path: str) -> None:
        for key, value in fragment.items():
            if not isinstance(key, str) or not key:
                raise FilterValidationError(f"필드 이름이 올바르지 않습니다: {path}")
            if key == "$and":
                self._validate_conjunction(value, f"{path}.$and")
                continue
            if key.startswith("$"):
                raise FilterValidationError(
                    f"허용되지 않는 연산자입니다: {key}",
                    hint="원시 필터는 필드 일치, $regex, $and만 지원합니다.",
                    metadata={"path": path},
                )
            self._validate_condition(key, value, f"{path}.{key}")

    def _validate_conjunction(self, value: Any, path: str) -> None:
        if not isinstance(value, list) or not value:
            raise FilterValidationError(f"$and는 비어 있지 않은 배열이어야 합니다: {path}")
        for index, item in enumerate(value):
            if not isinstance(item, Mapping):
                raise FilterValidationError(f"$and 항목은 객체여야 합니다: {path}[{index}]")
            self._validate_fragment(item, f"{path}[{index}]")

    def _validate_condition(self, field: str, value: Any, path: str) -> None:
        if isinstance(value, _SCALAR_TYPES):
            return
        if not isinstance(value, Mapping):
            raise FilterValidationError(
                f"필드 조건은 스칼라 또는 정규식 객체여야 합니다: {path}",
                metadata={"field": field},
            )
        keys = set(value.keys())
        if "$regex" not in keys or not keys <= _REGEX_KEYS:
            raise FilterValidationError(
                f"허용되지 않는 필드 조건입니다: {path}",
                hint="{\"$regex\": \"패턴\", \"$options\": \"i\"} 형식만 지원합니다.",
                metadata={"field": field, "keys": sorted(str(key) for key in keys)},
            )
        pattern = value["$regex"]
        if not isinstance(pattern, str):
            raise FilterValidationError(f"$regex 값은 문자열이어야 합니다: {path}")
        try:
            re.compile(pattern)
        except re.error as error:
            raise FilterValidationError(
                f"정규식을 컴파일할 수 없습니다: {path}",
                cause=str(error),
                original=error,
            ) from error
        options = value.get("$options", "")
        if not isinstance(options, str) or not set(options) <= _REGEX_OPTIONS:
            raise FilterValidationError(f"$options 값이 올바르지 않습니다: {path}")
