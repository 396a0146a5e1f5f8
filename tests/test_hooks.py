import asyncio

import pytest

from fastapi_jsonapify.config import HookOptions
from fastapi_jsonapify.hooks import HookContext, JSONAPIHook, ServiceInfo
from fastapi_jsonapify.schemas import JSONAPIDocument
from fastapi_jsonapify.schemas.model import ModelMetadata
from fastapi_jsonapify.utils import derived_identity


@pytest.fixture
def hook() -> JSONAPIHook:
    return JSONAPIHook(HookOptions())


def make_context(method: str, result, model: ModelMetadata | None = None, **params) -> HookContext:
    return HookContext(
        method=method,
        path="topics",
        result=result,
        service=ServiceInfo(name="topics", model=model),
        params=params,
    )


def test_get_round_trip(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    context = hook.apply(make_context("get", {"id": 1, "title": "Hello"}, topics))
    assert context.result == {
        "data": {
            "type": "topics",
            "id": "1",
            "attributes": {"title": "Hello"},
            "links": {"self": "/topics/1"},
        },
        "links": {"self": "/topics/1", "parent": "/topics"},
    }
    JSONAPIDocument.model_validate(context.result)


def test_get_with_include(hook: JSONAPIHook, topics: ModelMetadata, ann: dict) -> None:
    record = {"id": 1, "title": "Hello", "userId": 7, "user": ann}
    document = hook.apply(make_context("get", record, topics, include=["user"])).result
    assert document["data"]["relationships"] == {"user": {"data": {"type": "users", "id": "7"}}}
    assert [(resource["type"], resource["id"]) for resource in document["included"]] == [("users", "7")]


def test_find_with_pagination(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    result = {
        "data": [{"id": 1, "title": "a"}, {"id": 2, "title": "b"}],
        "total": 15,
        "limit": 2,
        "skip": 0,
    }
    document = hook.apply(make_context("find", result, topics)).result
    assert [resource["id"] for resource in document["data"]] == ["1", "2"]
    assert document["links"] == {
        "self": "/topics",
        "next": "/topics?$skip=2",
        "last": "/topics?$skip=14",
    }
    assert document["meta"] == {"total": 15, "limit": 2, "skip": 0}
    for key in ("total", "limit", "skip", "included"):
        assert key not in document
    JSONAPIDocument.model_validate(document)


def test_find_without_pagination(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    document = hook.apply(make_context("find", [{"id": 1, "title": "a"}], topics)).result
    assert document == {
        "data": [
            {"type": "topics", "id": "1", "attributes": {"title": "a"}, "links": {"self": "/topics/1"}}
        ],
        "links": {"self": "/topics"},
    }


def test_find_deduplicates_included(hook: JSONAPIHook, topics: ModelMetadata, ann: dict) -> None:
    result = {
        "data": [
            {"id": 1, "title": "a", "userId": 7, "user": ann},
            {"id": 2, "title": "b", "userId": 7, "user": ann},
        ]
    }
    document = hook.apply(make_context("find", result, topics, include=["user"])).result
    assert document["included"] == [
        {
            "type": "users",
            "id": "7",
            "attributes": {"name": "Ann", "created-at": "2023-01-01"},
            "links": {"self": "/users/7"},
        }
    ]
    for resource in document["data"]:
        assert resource["relationships"] == {"user": {"data": {"type": "users", "id": "7"}}}


def test_find_empty_collection(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    document = hook.apply(make_context("find", {"data": []}, topics)).result
    assert document == {"data": [], "links": {"self": "/topics"}}


def test_find_without_model_uses_plain_serializer(hook: JSONAPIHook) -> None:
    record = {"text": "hi", "sentAt": "noon"}
    document = hook.apply(make_context("find", [record])).result
    assert document["data"] == [
        {
            "type": "topics",
            "id": derived_identity(record),
            "attributes": {"text": "hi", "sent-at": "noon"},
            "links": {"self": f"/topics/{derived_identity(record)}"},
        }
    ]
    assert document["links"] == {"self": "/topics"}


def test_get_without_model_uses_configured_keys() -> None:
    hook = JSONAPIHook({"identifierKey": "uuid", "typeKey": "kind"})
    record = {"uuid": "abc", "kind": "notes", "text": "t"}
    document = hook.apply(make_context("get", record)).result
    assert document == {
        "data": {
            "type": "notes",
            "id": "abc",
            "attributes": {"text": "t"},
            "links": {"self": "/topics/abc"},
        },
        "links": {"self": "/topics/abc", "parent": "/topics"},
    }


def test_other_methods_pass_through(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    result = {"id": 1, "title": "created"}
    context = hook.apply(make_context("create", result, topics))
    assert context.result is result


def test_hook_is_awaitable(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    context = asyncio.run(hook(make_context("get", {"id": 3, "title": "x"}, topics)))
    assert context.result["data"]["id"] == "3"


def test_custom_skip_param(topics: ModelMetadata) -> None:
    hook = JSONAPIHook(HookOptions(skip_param="offset"))
    result = {"data": [{"id": 3, "title": "c"}], "total": 3, "limit": 1, "skip": 2}
    document = hook.apply(make_context("find", result, topics)).result
    assert document["links"] == {
        "self": "/topics",
        "first": "/topics?offset=0",
        "prev": "/topics?offset=1",
    }


def test_options_default_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from fastapi_jsonapify.config import get_settings

    monkeypatch.setenv("JSONAPIFY_IDENTIFIER_KEY", "uuid")
    get_settings.cache_clear()
    try:
        hook = JSONAPIHook()
        assert hook.options.identifier_key == "uuid"
        assert hook.options.skip_param == "$skip"
    finally:
        get_settings.cache_clear()


def test_find_keeps_result_links_next_to_self(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    result = {
        "data": [{"id": 1, "title": "a"}],
        "links": {"describedby": "/schemas/topics"},
        "total": 3,
        "limit": 1,
        "skip": 0,
    }
    document = hook.apply(make_context("find", result, topics)).result
    assert document["links"] == {
        "describedby": "/schemas/topics",
        "self": "/topics",
        "next": "/topics?$skip=1",
        "last": "/topics?$skip=3",
    }


def test_get_without_model_many_records_links_to_collection(hook: JSONAPIHook) -> None:
    document = hook.apply(make_context("get", [{"text": "a"}, {"text": "b"}])).result
    assert len(document["data"]) == 2
    assert document["links"] == {"self": "/topics", "parent": "/topics"}


@pytest.mark.parametrize(
    ("include", "expected"),
    [
        ("user", ["user"]),
        ("user, comments", ["user", "comments"]),
        (["user"], ["user"]),
        (None, []),
    ],
)
def test_include_param_forms(include, expected) -> None:
    assert make_context("get", {}, include=include).include == expected


def test_get_with_include_string(hook: JSONAPIHook, topics: ModelMetadata, ann: dict) -> None:
    record = {"id": 1, "title": "Hello", "userId": 7, "user": ann}
    document = hook.apply(make_context("get", record, topics, include="user")).result
    assert document["data"]["relationships"] == {"user": {"data": {"type": "users", "id": "7"}}}
    assert [(resource["type"], resource["id"]) for resource in document["included"]] == [("users", "7")]


def test_find_moves_extra_members_to_meta_without_pagination(
    hook: JSONAPIHook, topics: ModelMetadata
) -> None:
    result = {"data": [{"id": 1, "title": "a"}], "queryTime": 3}
    document = hook.apply(make_context("find", result, topics)).result
    assert document["meta"] == {"query-time": 3}
    assert "queryTime" not in document
    assert document["links"] == {"self": "/topics"}


def test_find_merges_result_meta(hook: JSONAPIHook, topics: ModelMetadata) -> None:
    result = {"data": [], "meta": {"source": "cache"}, "total": 0}
    document = hook.apply(make_context("find", result, topics)).result
    assert document["meta"] == {"source": "cache", "total": 0}
