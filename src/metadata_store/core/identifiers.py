"""
목적: 기본 식별자 생성기를 제공한다.
설명: `<네임스페이스 루트>/id/<엔티티>/<epoch 밀리초>` 형식의 식별자를 프로세스 내에서 단조 증가하도록 생성한다.
디자인 패턴: 전략 패턴
참조: src/metadata_store/core/ports.py, src/metadata_store/core/provenance/repository.py
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class TimestampIdentifierGenerator:
    """타임스탬프 기반 식별자 생성기.

    같은 밀리초에 여러 번 호출되면 직전 값보다 1 큰 값을 사용한다.

    Args:
        namespace_root: 식별자 네임스페이스 루트.
        clock_ms: 현재 epoch 밀리초 공급 함수.
    """

    def __init__(
        self,
        namespace_root: str,
        clock_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        self._namespace_root = namespace_root.rstrip("/")
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._lock = threading.Lock()
        self._last = 0

    def new_identifier(self, entity_type: str) -> str:
        with self._lock:
            value = max(int(self._clock_ms()), self._last + 1)
            self._last = value
        return f"{self._namespace_root}/id/{self._short_name(entity_type)}/{value}"

    def _short_name(self, entity_type: str) -> str:
        # 온톨로지 개념 URI(…#Provenance, …/Image)는 마지막 조각만 사용한다.
        name = entity_type.rsplit("#", 1)[-1].rsplit("/", 1)[-1].strip()
        if not name:
            raise ValueError(f"엔티티 타입에서 이름을 추출할 수 없습니다: {entity_type}")
        return name.lower()
