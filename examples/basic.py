"""
Basic usage of reshaper with plain dict entities.

Run with: python examples/basic.py
"""
import json

from reshaper import Resource, define

USERS = [
    {
        "id": 1,
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "password": "hashed_password",
        "created_at": "2024-01-15T10:30:00Z",
        "profile": {"bio": "Software developer", "avatar": "avatars/john.jpg"},
        "posts": [
            {"id": 1, "title": "Hello World", "content": "My first post"},
            {"id": 2, "title": "Second Post", "content": "Another post"},
        ],
    },
    {
        # No profile or posts loaded
        "id": 2,
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane@example.com",
        "password": "hashed_password",
        "created_at": "2024-02-20T14:00:00Z",
    },
]


class PostResource(Resource):
    @classmethod
    def transform(cls, post, options):
        return {"id": post["id"], "title": post["title"], "excerpt": post["content"][:50]}


class UserResource(Resource):
    @classmethod
    def transform(cls, user, options):
        is_admin = options.get("is_admin", False)

        return cls.merge(
            {
                "id": user["id"],
                "name": f"{user['first_name']} {user['last_name']}",
                "email": cls.when(is_admin or options.get("include_email"), user["email"]),
                "profile": cls.when_loaded(user, "profile", lambda profile: cls.clean({
                    "bio": profile["bio"],
                    "avatar_url": cls.when_not_null(
                        profile.get("avatar"), lambda url: f"https://cdn.example.com/{url}"
                    ),
                })),
                "posts": cls.when_loaded(user, "posts", PostResource.collection),
            },
            # Audit fields only for admins
            cls.when(is_admin, lambda: {
                "created_at": user["created_at"],
                "has_password": bool(user["password"]),
            }),
        )


SimpleUser = define(lambda user: {"id": user["id"], "email": user["email"]})


def show(title, payload):
    print(f"=== {title} ===")
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    show("Single user (public view)", UserResource.wrap(UserResource.make(USERS[0])))
    show("Single user (admin view)", UserResource.wrap(UserResource.make(USERS[0], {"is_admin": True})))
    show("Collection", UserResource.wrap(UserResource.collection(USERS), {"count": len(USERS)}))
    show("Paginated", UserResource.paginate({"results": USERS, "total": 50}, {"page": 1, "per_page": 2}))
    show("Defined resource", SimpleUser.collection(USERS))
    show("Pick / omit / rename", {
        "pick": Resource.pick(USERS[0], ["id", "email"]),
        "omit": sorted(Resource.omit(USERS[1], ["password"])),
        "rename": Resource.rename({"first_name": "John"}, {"first_name": "firstName"}),
    })
