"""
목적: MongoDB 필터 쿼리 빌더 기반 클래스를 제공한다.
설명: 원시 필터 조각을 기준선으로 병합한 뒤 엔티티별 검색 조건을 일치/정규식/배열 원소 일치/날짜 조건으로 덧붙인다.
디자인 패턴: 빌더 패턴, 템플릿 메서드
참조: src/metadata_store/integrations/db/engines/mongodb/raw_filter.py, src/metadata_store/core/image_metadata/filter_builder.py
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, TypeVar, Union

from metadata_store.integrations.db.engines.mongodb.datetime_codec import DateTimeCodec
from metadata_store.integrations.db.engines.mongodb.raw_filter import RawFilter
from metadata_store.shared.exceptions import MalformedInputError
from metadata_store.shared.logging import Logger, create_default_logger

CriteriaT = TypeVar("CriteriaT")
RawFilterInput = Union[RawFilter, str, Mapping[str, Any]]


class MongoFilterBuilder(ABC, Generic[CriteriaT]):
    """MongoDB 필터 빌더.

    구조화 조건은 원시 필터 다음에 덧붙이므로 같은 필드 키에서는 구조화 조건이 우선한다.
    `$and`는 덮어쓰지 않고 원시 필터의 결합 조건 뒤에 이어 붙인다.

    Args:
        datetime_codec: 날짜 조건 해석 코덱.
        strict_dates: True면 날짜 해석 실패 시 `MalformedInputError`를 전파한다.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        datetime_codec: Optional[DateTimeCodec] = None,
        strict_dates: bool = False,
        logger: Optional[Logger] = None,
    ) -> None:
        self._datetime_codec = datetime_codec or DateTimeCodec()
        self._strict_dates = strict_dates
        self._logger = logger or create_default_logger(type(self).__name__)

    def build(
        self,
        criteria: Optional[CriteriaT] = None,
        raw_filter: Optional[RawFilterInput] = None,
    ) -> Dict[str, Any]:
        """검색 조건과 원시 필터를 MongoDB 필터로 변환한다."""

        query: Dict[str, Any] = {}
        if raw_filter is not None:
            query.update(RawFilter.parse(raw_filter).to_query())
        if criteria is not None:
            self._apply_criteria(query, criteria)
        self._logger.debug("필터 생성 완료", metadata={"query": query})
        return query

    @abstractmethod
    def _apply_criteria(self, query: Dict[str, Any], criteria: CriteriaT) -> None:
        """엔티티별 검색 조건을 필터에 덧붙인다."""

    def _append_equals(self, query: Dict[str, Any], field: str, value: Any) -> None:
        if value is None:
            return
        query[field] = value

    def _append_regex(self, query: Dict[str, Any], field: str, pattern: Optional[str]) -> None:
        if pattern is None:
            return
        query[field] = {"$regex": pattern}

    def _append_all_elem_match(
        self,
        query: Dict[str, Any],
        array_field: str,
        element_field: str,
        values: Optional[Iterable[Any]],
    ) -> None:
        """배열 필드가 값마다 일치 원소를 하나씩 갖도록 AND 조건을 덧붙인다.

        원시 필터에 이미 `$and`가 있으면 그 뒤에 이어 붙인다.
        """

        clauses = [
            {array_field: {"$elemMatch": {element_field: value}}}
            for value in (values or [])
        ]
        if clauses:
            query.setdefault("$and", []).extend(clauses)

    def _append_date_equals(self, query: Dict[str, Any], field: str, text: Optional[str]) -> None:
        if text is None:
            return
        try:
            query[field] = self._datetime_codec.parse(text)
        except MalformedInputError as error:
            if self._strict_dates:
                raise
            self._logger.warning(
                f"날짜 검색 조건을 해석할 수 없어 조건을 제외합니다: {field}={text}",
                metadata=error.to_dict(),
            )

    @staticmethod
    def prefix_regex(prefix: str) -> Dict[str, str]:
        """문자열 접두사 일치 정규식 조건을 생성한다."""

        return {"$regex": f"^{re.escape(prefix)}"}
