from fastapi_jsonapify.core.document import JSONAPIDocumentBuilder, extract_meta
from fastapi_jsonapify.core.included import deduplicate_included


def test_extract_meta_moves_extra_members() -> None:
    result = {"data": [], "total": 15, "limit": 2, "skip": 0, "links": {}}
    extract_meta(result)
    assert result == {"data": [], "links": {}, "meta": {"total": 15, "limit": 2, "skip": 0}}


def test_extract_meta_dash_cases_keys() -> None:
    result = {"data": [], "queryTime": 12}
    assert extract_meta(result) == {"data": [], "meta": {"query-time": 12}}


def test_extract_meta_is_a_no_op_without_extra_members() -> None:
    result = {"data": {"type": "topics", "id": "1"}, "included": []}
    assert extract_meta(result) == {"data": {"type": "topics", "id": "1"}, "included": []}
    assert "meta" not in result


def test_build_single_omits_empty_members() -> None:
    builder = JSONAPIDocumentBuilder()
    resource = {"type": "topics", "id": "1", "attributes": {}}
    assert builder.build_single(resource, included=[], links=None) == {"data": resource}
    assert builder.build_single(None) == {"data": None}


def test_build_collection() -> None:
    builder = JSONAPIDocumentBuilder()
    document = builder.build_collection(
        [{"type": "topics", "id": "1"}],
        links={"next": "/topics?$skip=2"},
        meta={"total": 3},
    )
    assert document == {
        "data": [{"type": "topics", "id": "1"}],
        "links": {"next": "/topics?$skip=2"},
        "meta": {"total": 3},
    }


def test_deduplicate_included_last_write_wins() -> None:
    first = {"type": "users", "id": "7", "attributes": {"name": "old"}}
    other = {"type": "users", "id": "8", "attributes": {"name": "Bob"}}
    last = {"type": "users", "id": "7", "attributes": {"name": "new"}}
    unique = deduplicate_included([first, other, last])
    assert len(unique) == 2
    by_id = {resource["id"]: resource for resource in unique}
    assert by_id["7"]["attributes"] == {"name": "new"}


def test_deduplicate_included_keeps_distinct_types() -> None:
    unique = deduplicate_included([{"type": "users", "id": "1"}, {"type": "topics", "id": "1"}])
    assert len(unique) == 2
