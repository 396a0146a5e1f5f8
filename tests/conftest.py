import pytest

from fastapi_jsonapify.schemas.model import AssociationDescriptor, ModelMetadata


def build_models() -> dict[str, ModelMetadata]:
    users = ModelMetadata.build("users", ["id", "name", "createdAt"])
    comments = ModelMetadata.build("comments", ["id", "body", "topicId"])
    topics = ModelMetadata.build(
        "topics", ["id", "title", "createdAt", "userId", "parentTopicId"]
    )
    topics.associations = [
        AssociationDescriptor(as_="user", target=users, foreign_key="userId", singular=True),
        AssociationDescriptor(
            as_="parentTopic",
            target=topics,
            foreign_key="parentTopicId",
            underscored=True,
            singular=True,
        ),
        AssociationDescriptor(as_="comments", target=comments, foreign_key="topicId"),
    ]
    return {"users": users, "comments": comments, "topics": topics}


@pytest.fixture
def models() -> dict[str, ModelMetadata]:
    return build_models()


@pytest.fixture
def topics(models: dict[str, ModelMetadata]) -> ModelMetadata:
    return models["topics"]


@pytest.fixture
def ann() -> dict:
    return {"id": 7, "name": "Ann", "createdAt": "2023-01-01"}
