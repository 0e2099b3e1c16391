"""
목적: 엔티티 공통 저장소의 페이지 조회/건수 조회 흐름을 검증한다.
설명: 페이지 경계, 정렬 안정성, 커서 종료, 잘못된 페이지 인자, 원시 필터와 건수의 일관성을 확인한다.
디자인 패턴: 저장소 패턴
참조: src/metadata_store/integrations/db/engines/mongodb/repository.py
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import pytest
from pydantic import BaseModel

from metadata_store.integrations.db.engines.mongodb import (
    MongoDocumentMapper,
    MongoFilterBuilder,
    MongoRepository,
)
from metadata_store.shared.logging import LogLevel

_COLLECTION = "items"


class Item(BaseModel):
    uri: str
    kind: Optional[str] = None


class ItemSearch(BaseModel):
    kind: Optional[str] = None


class ItemFilterBuilder(MongoFilterBuilder[ItemSearch]):
    def _apply_criteria(self, query: Dict[str, Any], criteria: ItemSearch) -> None:
        self._append_equals(query, "kind", criteria.kind)


class ItemMapper(MongoDocumentMapper[Item]):
    def to_document(self, record: Item) -> Dict[str, Any]:
        return record.model_dump()

    def from_document(self, data: Mapping[str, Any]) -> Item:
        return Item(uri=str(data["uri"]), kind=self._string(data, "kind"))


@pytest.fixture
def repository(store, logger) -> MongoRepository[Item, ItemSearch]:
    return MongoRepository(
        store=store,
        collection=_COLLECTION,
        filter_builder=ItemFilterBuilder(logger=logger),
        mapper=ItemMapper(),
        default_page_size=10,
        logger=logger,
    )


@pytest.fixture
def seeded(store) -> None:
    store.collection(_COLLECTION).insert_many(
        [{"uri": f"u{i:02d}", "kind": "even" if i % 2 == 0 else "odd"} for i in range(25)]
    )


@pytest.mark.usefixtures("seeded")
@pytest.mark.parametrize(
    ("page", "page_size", "expected"),
    [
        (0, 10, [f"u{i:02d}" for i in range(10)]),
        (2, 10, [f"u{i:02d}" for i in range(20, 25)]),
        (3, 10, []),
        (0, None, [f"u{i:02d}" for i in range(10)]),
        (1, 7, [f"u{i:02d}" for i in range(7, 14)]),
    ],
)
def test_find_pages(repository, page, page_size, expected) -> None:
    records = repository.find(page=page, page_size=page_size)

    assert [record.uri for record in records] == expected


@pytest.mark.usefixtures("seeded")
def test_pages_do_not_overlap(repository) -> None:
    seen = []
    for page in range(3):
        seen.extend(record.uri for record in repository.find(page=page, page_size=10))

    assert len(seen) == len(set(seen)) == repository.count()


@pytest.mark.usefixtures("seeded")
def test_count_matches_filtered_find(repository) -> None:
    criteria = ItemSearch(kind="even")

    records = repository.find(criteria, page_size=100)

    assert repository.count(criteria) == len(records) == 13
    assert repository.count(raw_filter='{"kind": "odd"}') == 12
    assert repository.count(ItemSearch(kind="none")) == 0


@pytest.mark.usefixtures("seeded")
def test_stream_closes_cursor_when_partially_consumed(repository, fake_client) -> None:
    with repository.stream(page_size=10) as records:
        first = next(records)

    cursor = fake_client["phis_test"][_COLLECTION].cursors[-1]
    assert first.uri == "u00"
    assert cursor.closed is True


@pytest.mark.usefixtures("seeded")
def test_stream_closes_cursor_on_error(repository, fake_client) -> None:
    with pytest.raises(KeyError):
        with repository.stream() as records:
            next(records)
            raise KeyError("consumer failure")

    assert fake_client["phis_test"][_COLLECTION].cursors[-1].closed is True


@pytest.mark.parametrize(("page", "page_size"), [(-1, 10), (0, 0), (0, -5)])
def test_invalid_paging_is_rejected(repository, page, page_size) -> None:
    with pytest.raises(ValueError):
        repository.find(page=page, page_size=page_size)


def test_insert_batch_uses_unique_field(repository, fake_client) -> None:
    outcome = repository.insert_batch([Item(uri="a", kind="x"), Item(uri="b")])

    assert outcome.created_identifiers == ["a", "b"]
    assert repository.count() == 2
    assert repository.find(ItemSearch(kind="x"))[0].uri == "a"


def test_repository_requires_collection_name(store, logger) -> None:
    with pytest.raises(ValueError):
        MongoRepository(store, "", ItemFilterBuilder(logger=logger), ItemMapper(), logger=logger)


@pytest.mark.usefixtures("seeded")
def test_read_logs_carry_collection_and_operation(repository, log_repository) -> None:
    repository.find(ItemSearch(kind="even"), page=1, page_size=5)
    repository.count()

    contexts = [
        (record.context.collection, record.context.operation)
        for record in log_repository.find(LogLevel.DEBUG)
        if record.context is not None
    ]
    assert (_COLLECTION, "find") in contexts
    assert (_COLLECTION, "count") in contexts
