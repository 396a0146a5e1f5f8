"""Example FastAPI app serving SQLAlchemy rows as JSON:API documents.

Run with:
    uvicorn examples.jsonapify_example_app:app --reload

Then try:
    GET /articles?$skip=0&include=author
    GET /articles/1?include=author,comments
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional

from fastapi import Depends, FastAPI
from sqlalchemy import ForeignKey, create_engine, func, select
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    selectinload,
    sessionmaker,
)
from sqlalchemy.pool import StaticPool

from fastapi_jsonapify.middleware import ErrorHandlerMiddleware
from fastapi_jsonapify.routers import JSONAPIRouter
from fastapi_jsonapify.sqlalchemy import instance_to_record, reflect_model
from fastapi_jsonapify.viewsets import JSONAPIViewSet

engine = create_engine(
    "sqlite://",
    echo=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

PAGE_SIZE = 2


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True)
    body: Mapped[str]
    article_id: Mapped[int] = mapped_column(ForeignKey("articles.id"))


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str]
    author_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"))
    author: Mapped[Optional[User]] = relationship()
    comments: Mapped[List[Comment]] = relationship()


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


class ArticleViewSet(JSONAPIViewSet):
    name = "articles"
    model = reflect_model(Article)

    def __init__(self, session: Session) -> None:
        self.session = session

    def _statement(self, params: dict[str, Any]) -> Any:
        statement = select(Article).order_by(Article.id)
        for name in params.get("include", []):
            statement = statement.options(selectinload(getattr(Article, name)))
        return statement

    async def find(self, params: dict[str, Any]) -> Any:
        skip = int(params.get("$skip", 0))
        total = self.session.scalar(select(func.count()).select_from(Article))
        rows = self.session.scalars(self._statement(params).offset(skip).limit(PAGE_SIZE))
        return {
            "data": [instance_to_record(row) for row in rows],
            "skip": skip,
            "limit": PAGE_SIZE,
            "total": total,
        }

    async def get(self, resource_id: str, params: dict[str, Any]) -> Any:
        row = self.session.scalars(
            self._statement(params).where(Article.id == int(resource_id))
        ).first()
        return None if row is None else instance_to_record(row)


def get_article_viewset(session: Session = Depends(get_session)) -> ArticleViewSet:
    return ArticleViewSet(session)


def seed() -> None:
    Base.metadata.create_all(engine)
    with SessionLocal() as session:
        ann = User(id=1, name="Ann")
        session.add(ann)
        for index in range(1, 6):
            session.add(
                Article(
                    id=index,
                    title=f"Article {index}",
                    author=ann,
                    comments=[Comment(body=f"Comment on {index}")],
                )
            )
        session.commit()


seed()

router = JSONAPIRouter()
router.register_viewset("/articles", get_article_viewset)

app = FastAPI(title="jsonapify example")
app.include_router(router)
app.add_middleware(ErrorHandlerMiddleware)
