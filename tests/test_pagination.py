import pytest

from fastapi_jsonapify.pagination import OffsetPagination


@pytest.fixture
def pagination() -> OffsetPagination:
    return OffsetPagination()


def test_first_page(pagination: OffsetPagination) -> None:
    links = pagination.get_links(skip=0, limit=2, total=15, path="topics")
    assert links == {"next": "/topics?$skip=2", "last": "/topics?$skip=14"}


def test_second_page_has_all_links(pagination: OffsetPagination) -> None:
    links = pagination.get_links(skip=2, limit=2, total=15, path="topics")
    assert links == {
        "first": "/topics?$skip=0",
        "prev": "/topics?$skip=0",
        "next": "/topics?$skip=4",
        "last": "/topics?$skip=14",
    }


def test_last_page(pagination: OffsetPagination) -> None:
    links = pagination.get_links(skip=4, limit=2, total=6, path="/topics/")
    assert links == {"first": "/topics?$skip=0", "prev": "/topics?$skip=2"}


def test_partial_offset_gets_prev_without_first(pagination: OffsetPagination) -> None:
    links = pagination.get_links(skip=1, limit=2, total=15, path="topics")
    assert "first" not in links
    assert links["prev"] == "/topics?$skip=-1"
    assert links["next"] == "/topics?$skip=3"


@pytest.mark.parametrize(
    "counts",
    [
        {"skip": None, "limit": 2, "total": 15},
        {"skip": 0, "limit": None, "total": 15},
        {"skip": 0, "limit": 2, "total": None},
        {"skip": 0, "limit": 0, "total": 15},
    ],
)
def test_no_links_without_usable_counts(pagination: OffsetPagination, counts: dict) -> None:
    assert pagination.get_links(path="topics", **counts) == {}


def test_custom_skip_param() -> None:
    links = OffsetPagination(skip_param="offset").get_links(skip=0, limit=5, total=6, path="topics")
    assert links == {"next": "/topics?offset=5", "last": "/topics?offset=5"}


def test_counts() -> None:
    assert OffsetPagination.counts({"data": [], "total": 3}) == {"skip": None, "limit": None, "total": 3}
