"""Tests for the portfolio service."""

import asyncio
from datetime import UTC, datetime

import pytest

from photo_studio.domain.errors import BadRequestError, NotFoundError
from photo_studio.domain.portfolio import DEFAULT_CATEGORY, DEFAULT_TITLE
from photo_studio.services.portfolio import PortfolioService
from tests.conftest import (
    InMemoryFileStorage,
    InMemoryPortfolioRepository,
    SequentialIds,
    TickingClock,
    make_upload,
)


def _service() -> tuple[
    PortfolioService, InMemoryPortfolioRepository, InMemoryFileStorage
]:
    repository = InMemoryPortfolioRepository()
    storage = InMemoryFileStorage()
    service = PortfolioService(
        repository=repository,
        storage=storage,
        id_factory=SequentialIds("item"),
        clock=TickingClock(),
    )
    return service, repository, storage


def test_add_items_creates_one_record_per_file_in_one_save() -> None:
    service, repository, storage = _service()

    items = asyncio.run(
        service.add_items("wedding", [make_upload("a.jpg"), make_upload("b.png")])
    )

    assert [item.id for item in items] == ["item-1", "item-2"]
    assert {item.category for item in items} == {"wedding"}
    assert {item.title for item in items} == {DEFAULT_TITLE}
    assert all(item.description == "" for item in items)
    assert len({item.filename for item in items}) == 2
    assert set(storage.files) == {item.filename for item in items}
    assert repository.flush_count == 1


def test_add_items_defaults_category() -> None:
    service, _, _ = _service()

    items = asyncio.run(service.add_items(None, [make_upload()]))
    blank = asyncio.run(service.add_items("  ", [make_upload()]))

    assert items[0].category == DEFAULT_CATEGORY
    assert blank[0].category == DEFAULT_CATEGORY


def test_add_items_without_files_is_rejected() -> None:
    service, repository, _ = _service()

    with pytest.raises(BadRequestError):
        asyncio.run(service.add_items("wedding", []))
    assert repository.flush_count == 0


def test_list_items_filters_by_category_newest_first() -> None:
    service, _, _ = _service()
    asyncio.run(service.add_items("wedding", [make_upload()]))
    asyncio.run(service.add_items("portrait", [make_upload()]))
    asyncio.run(service.add_items("wedding", [make_upload()]))

    weddings = service.list_items("wedding")
    everything = service.list_items("all")

    assert [item.id for item in weddings] == ["item-3", "item-1"]
    assert [item.id for item in everything] == ["item-3", "item-2", "item-1"]
    assert everything[0].created_at > datetime(2024, 1, 1, tzinfo=UTC)


def test_delete_item_removes_record_and_file() -> None:
    service, repository, storage = _service()
    items = asyncio.run(service.add_items("wedding", [make_upload()]))

    report = asyncio.run(service.delete_item(items[0].id))

    assert report.ok
    assert repository.items == []
    assert storage.files == {}


def test_delete_item_with_missing_file_still_removes_record() -> None:
    service, repository, storage = _service()
    items = asyncio.run(service.add_items("wedding", [make_upload()]))
    storage.files.clear()

    report = asyncio.run(service.delete_item(items[0].id))

    assert report.failures[0].missing is True
    assert repository.items == []


def test_delete_unknown_item() -> None:
    service, _, _ = _service()

    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_item("missing"))
