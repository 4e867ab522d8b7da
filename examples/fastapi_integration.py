"""
FastAPI integration example for reshaper, backed by SQLAlchemy.

Run with: uvicorn examples.fastapi_integration:app --reload
"""
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, relationship, selectinload, sessionmaker
from sqlalchemy.pool import StaticPool

from reshaper import Resource
from reshaper.dtos.response import PaginatedResponse, WrappedResponse
from reshaper.integrations.fastapi import PaginationParams, handle_resource_errors

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    avatar = Column(String)

    posts = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    title = Column(String, nullable=False)

    author = relationship("User", back_populates="posts")


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================
# Resources
# ============================================

class PostResource(Resource):
    @classmethod
    def transform(cls, post, options):
        return cls.pick(post, ["id", "title"])


class UserResource(Resource):
    @classmethod
    def transform(cls, user, options):
        return cls.clean({
            "id": user.id,
            "name": user.name,
            "email": cls.when(options.get("is_admin"), user.email),
            "avatar": cls.when_not_null(user.avatar),
            # Only present when the query eager-loaded posts
            "posts": cls.when_loaded(user, "posts", PostResource.collection),
        })


# ============================================
# Routes
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create and seed the in-memory database on startup"""
    Base.metadata.create_all(engine)
    with SessionLocal() as db:
        if db.query(User).count() == 0:
            for i in range(1, 31):
                user = User(id=i, name=f"User {i}", email=f"user{i}@example.com")
                user.posts = [Post(title=f"Post {i}.{n}") for n in range(1, 3)]
                db.add(user)
            db.commit()
    yield


app = FastAPI(title="reshaper example", lifespan=lifespan)


@app.get("/users", response_model=PaginatedResponse[Dict[str, Any]])
@handle_resource_errors("List users")
def list_users(params: PaginationParams = Depends(), db: Session = Depends(get_db)):
    query = db.query(User).order_by(User.id)
    rows = query.offset(params.offset).limit(params.limit).all()
    return UserResource.paginate({"rows": rows, "count": query.count()}, params.as_options())


@app.get("/users/{user_id}", response_model=WrappedResponse[Dict[str, Any]], response_model_exclude_none=True)
@handle_resource_errors("Get user")
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = (
        db.query(User)
        .options(selectinload(User.posts))
        .filter(User.id == user_id)
        .first()
    )
    if not user:
        raise HTTPException(status_code=404, detail=f"User '{user_id}' not found")
    return UserResource.wrap(UserResource.make(user, {"is_admin": True}))
