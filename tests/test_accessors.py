from dataclasses import dataclass

import pytest
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import joinedload, selectinload

from models import Author, Post
from reshaper import ABSENT, Resource, as_record, get_field, when_loaded


class PostOrmResource(Resource):
    @classmethod
    def transform(cls, post, options):
        return cls.merge(
            cls.pick(post, ["id", "title"]),
            {"author": cls.when_loaded(post, "author", AuthorOrmResource.make)},
        )


class AuthorOrmResource(Resource):
    @classmethod
    def transform(cls, author, options):
        return cls.clean({
            "id": author.id,
            "name": author.name,
            "avatar": cls.when_not_null(author.avatar),
            "posts": cls.when_loaded(author, "posts", PostOrmResource.collection),
        })


def test_get_field_on_mappings():
    assert get_field({"a": None}, "a") is None
    assert get_field({}, "a") is ABSENT


@pytest.mark.parametrize("entity", [None, ABSENT, [1], (1,), "text", b"raw"])
def test_get_field_on_non_records(entity):
    assert get_field(entity, "count") is ABSENT


def test_get_field_ignores_methods():
    class Box:
        value = 1

        def size(self):
            return 3

    assert get_field(Box(), "value") == 1
    assert get_field(Box(), "size") is ABSENT


def test_unloaded_relationship_is_absent(seeded_session):
    author = seeded_session.query(Author).filter_by(id=1).one()

    assert get_field(author, "posts") is ABSENT
    assert when_loaded(author, "posts") is ABSENT
    # No lazy load was emitted
    assert "posts" in sa_inspect(author).unloaded


def test_eager_loaded_relationship_is_present(seeded_session):
    author = (
        seeded_session.query(Author)
        .options(selectinload(Author.posts))
        .filter_by(id=1)
        .one()
    )

    posts = when_loaded(author, "posts")
    assert [post.title for post in posts] == ["First", "Second"]


def test_columns_are_read_normally(seeded_session):
    author = seeded_session.query(Author).filter_by(id=1).one()
    assert get_field(author, "name") == "Ada"
    assert get_field(author, "avatar") is None


def test_transient_instance_relationships():
    assert get_field(Author(name="New"), "posts") is ABSENT
    assert get_field(Author(name="New", posts=[]), "posts") == []


def test_as_record_on_mapped_instance(seeded_session):
    author = seeded_session.query(Author).filter_by(id=1).one()
    assert as_record(author) == {"id": 1, "name": "Ada", "email": "ada@example.com", "avatar": None}


def test_as_record_includes_loaded_relationships(seeded_session):
    author = (
        seeded_session.query(Author)
        .options(selectinload(Author.posts))
        .filter_by(id=1)
        .one()
    )
    record = as_record(author)
    assert [post.id for post in record["posts"]] == [10, 11]


def test_as_record_on_other_inputs():
    @dataclass
    class Point:
        x: int

    assert as_record({"a": 1}) == {"a": 1}
    assert as_record(Point(3)) == {"x": 3}
    assert as_record(None) is None
    assert as_record(ABSENT) is None
    assert as_record(42) is None
    assert as_record([1, 2]) is None


def test_resource_omits_unloaded_relations(seeded_session):
    author = seeded_session.query(Author).filter_by(id=1).one()
    assert AuthorOrmResource.make(author) == {"id": 1, "name": "Ada"}


def test_resource_includes_eager_loaded_relations(seeded_session):
    author = (
        seeded_session.query(Author)
        .options(selectinload(Author.posts))
        .filter_by(id=1)
        .one()
    )

    assert AuthorOrmResource.make(author) == {
        "id": 1,
        "name": "Ada",
        "posts": [{"id": 10, "title": "First"}, {"id": 11, "title": "Second"}],
    }


def test_resource_with_many_to_one_relation(seeded_session):
    posts = (
        seeded_session.query(Post)
        .options(joinedload(Post.author))
        .order_by(Post.id)
        .all()
    )

    result = PostOrmResource.collection(posts)
    assert result[0] == {"id": 10, "title": "First", "author": {"id": 1, "name": "Ada"}}
    assert len(result) == 2


def test_paginate_orm_rows(seeded_session):
    query = seeded_session.query(Post).order_by(Post.id)
    rows = query.offset(1).limit(1).all()

    result = PostOrmResource.paginate({"rows": rows, "count": query.count()}, {"page": 2, "per_page": 1})
    assert result == {
        "data": [{"id": 11, "title": "Second"}],
        "meta": {"current_page": 2, "per_page": 1, "total": 2, "last_page": 2},
    }


def test_as_record_on_plain_object_skips_private_attributes():
    class Box:
        kind = "class-level"

        def __init__(self):
            self.value = 1
            self._hidden = 2

    assert as_record(Box()) == {"value": 1}
    assert as_record(Box) is None
