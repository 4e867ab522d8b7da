import sys
from pathlib import Path

# Add project root to Python path FIRST
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from models import Base, Author, Post
from reshaper import Resource


class PostResource(Resource):
    @classmethod
    def transform(cls, post, options):
        return {"id": post["id"], "title": post["title"]}


class UserResource(Resource):
    @classmethod
    def transform(cls, user, options):
        return cls.clean({
            "id": user["id"],
            "name": user["name"],
            "email": cls.when(options.get("is_admin"), user.get("email")),
            "avatar": cls.when_not_null(user.get("avatar")),
            "posts": cls.when_loaded(user, "posts", PostResource.collection),
        })


class IdResource(Resource):
    @classmethod
    def transform(cls, item, options):
        return {"id": item["id"]}


@pytest.fixture
def user_resource():
    return UserResource


@pytest.fixture
def id_resource():
    return IdResource


@pytest.fixture(autouse=True)
def clear_pagination_env(monkeypatch):
    """Keep host environment from changing pagination defaults under test"""
    monkeypatch.delenv("RESHAPER_DEFAULT_PER_PAGE", raising=False)
    monkeypatch.delenv("RESHAPER_MAX_PER_PAGE", raising=False)


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def seeded_session(db_session):
    """Session holding one author with two posts; identity map cleared"""
    author = Author(id=1, name="Ada", email="ada@example.com", avatar=None)
    author.posts = [Post(id=10, title="First"), Post(id=11, title="Second")]
    db_session.add(author)
    db_session.commit()
    db_session.expunge_all()
    return db_session
