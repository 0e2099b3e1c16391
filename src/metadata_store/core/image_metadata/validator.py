"""
목적: 이미지 메타데이터 삽입 전 검증기를 제공한다.
설명: 필수 필드 누락과 이미지 타입·관련 항목의 외부 존재 여부를 확인해 진단 목록을 만든다.
디자인 패턴: 검증기, 포트-어댑터
참조: src/metadata_store/core/ports.py, src/metadata_store/integrations/db/base/models.py
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from metadata_store.core.image_metadata.models import ImageMetadata
from metadata_store.core.ports import ExistenceChecker
from metadata_store.integrations.db.base import DiagnosticKind, InsertDiagnostic, InsertOutcome
from metadata_store.shared.logging import Logger, create_default_logger


class ImageMetadataValidator:
    """이미지 메타데이터 검증기.

    Args:
        existence_checker: 이미지 타입과 관련 항목 존재 여부 확인 포트.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        existence_checker: ExistenceChecker,
        logger: Optional[Logger] = None,
    ) -> None:
        self._existence_checker = existence_checker
        self._logger = logger or create_default_logger("ImageMetadataValidator")

    def check(self, records: Sequence[ImageMetadata]) -> InsertOutcome:
        """레코드 전체를 검증하고 결과를 반환한다. 통과 시 식별자 목록은 비어 있다."""

        diagnostics: List[InsertDiagnostic] = []
        for record in records:
            diagnostics.extend(self._check_record(record))
        if diagnostics:
            self._logger.warning(f"이미지 메타데이터 검증 실패: count={len(diagnostics)}")
            return InsertOutcome.rejected(diagnostics)
        return InsertOutcome(success=True)

    def _check_record(self, record: ImageMetadata) -> List[InsertDiagnostic]:
        missing = [
            name
            for name, value in (
                ("uri", record.uri),
                ("rdf_type", record.rdf_type),
                ("configuration", record.configuration),
                ("file_informations", record.file_informations),
            )
            if not value
        ]
        if missing:
            return [
                self._diagnostic(
                    record.uri,
                    f"필수 필드가 누락되었습니다: {', '.join(missing)}",
                    {"missing": missing},
                )
            ]
        diagnostics: List[InsertDiagnostic] = []
        if not self._existence_checker.exists(record.rdf_type):
            diagnostics.append(
                self._diagnostic(record.uri, f"알 수 없는 이미지 타입입니다: {record.rdf_type}")
            )
        for item in record.concerned_items:
            if not self._existence_checker.exists(item.uri):
                diagnostics.append(
                    self._diagnostic(record.uri, f"알 수 없는 관련 항목입니다: {item.uri}")
                )
        return diagnostics

    def _diagnostic(
        self,
        identifier: Optional[str],
        message: str,
        metadata: Optional[dict] = None,
    ) -> InsertDiagnostic:
        return InsertDiagnostic(
            kind=DiagnosticKind.VALIDATION_ERROR,
            message=message,
            identifier=identifier,
            metadata=metadata or {},
        )
