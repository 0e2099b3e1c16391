"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로딩, 날짜 포맷, 저장소 기본값에 쓰는 상수를 정의한다.
디자인 패턴: 상수 객체
참조: src/metadata_store/shared/config/loader.py, src/metadata_store/integrations/db/engines/mongodb/datetime_codec.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        DEFAULT_TIMEZONE: 날짜 렌더링 기본 타임존 이름.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        ENV_PREFIX: 저장소 설정 환경 변수 접두사.
        DATETIME_FORMAT: 날짜 필드의 고정 텍스트 포맷(`yyyy-MM-dd HH:mm:ssZ`).
        DEFAULT_PAGE_SIZE: 페이지 크기 기본값.
    """

    DEFAULT_ENCODING = "utf-8"
    DEFAULT_TIMEZONE = "UTC"
    ENV_NESTED_DELIMITER = "__"
    ENV_PREFIX = "METADATA_STORE_"
    DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S%z"
    DEFAULT_PAGE_SIZE = 20


__all__ = ["SharedConst"]
