"""
목적: 날짜 텍스트와 MongoDB 날짜 값 간 변환을 제공한다.
설명: `yyyy-MM-dd HH:mm:ssZ` 고정 포맷을 해석해 timezone-aware datetime으로 만들고, 저장된 값을 같은 포맷으로 렌더링한다.
디자인 패턴: 코덱
참조: src/metadata_store/shared/const/__init__.py, src/metadata_store/core/image_metadata/document_mapper.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from metadata_store.shared.const import SharedConst
from metadata_store.shared.exceptions import MalformedInputError


class DateTimeCodec:
    """고정 포맷 날짜 코덱.

    BSON 날짜는 밀리초 단위 UTC로 저장되므로 렌더링은 초 단위 텍스트를 만든다.
    저장소에서 읽은 naive datetime은 UTC로 간주한다.

    Args:
        timezone_name: 렌더링 타임존 이름(IANA).
        pattern: strftime/strptime 포맷.
    """

    def __init__(
        self,
        timezone_name: str = SharedConst.DEFAULT_TIMEZONE,
        pattern: str = SharedConst.DATETIME_FORMAT,
    ) -> None:
        try:
            self._zone = ZoneInfo(timezone_name)
        except ZoneInfoNotFoundError as error:
            raise ValueError(f"알 수 없는 타임존입니다: {timezone_name}") from error
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern

    def parse(self, text: str) -> datetime:
        """텍스트를 timezone-aware datetime으로 해석한다."""

        if not isinstance(text, str):
            raise MalformedInputError(
                "날짜 값은 문자열이어야 합니다.",
                cause=f"type={type(text).__name__}",
            )
        try:
            value = datetime.strptime(text.strip(), self._pattern)
        except ValueError as error:
            raise MalformedInputError(
                f"날짜 포맷을 해석할 수 없습니다: {text}",
                cause=str(error),
                hint="yyyy-MM-dd HH:mm:ss+HHMM 형식을 사용하세요. 예: 2017-06-15 10:51:00+0200",
                metadata={"value": text},
                original=error,
            ) from error
        if value.tzinfo is None:
            raise MalformedInputError(
                f"날짜 값에 UTC 오프셋이 없습니다: {text}",
                metadata={"value": text},
            )
        return value

    def render(self, value: datetime) -> str:
        """datetime을 고정 포맷 텍스트로 렌더링한다."""

        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(self._zone).strftime(self._pattern)
