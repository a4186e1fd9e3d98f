import json

import httpx
import pytest

from client.api import create_api_client
from client.models import CreatePostData, CreateTodoData, CreateUserData
from client.resources import (
    create_post,
    create_todo,
    create_user,
    delete_todo,
    fetch_all_posts,
    fetch_all_todos,
    fetch_all_users,
    fetch_post_by_id,
    fetch_todo_by_id,
    fetch_user_by_id,
)

USER = {
    "id": 1,
    "firstName": "Emily",
    "lastName": "Johnson",
    "email": "emily.johnson@x.dummyjson.com",
    "phone": "+81 965-431-3024",
    "username": "emilys",
    "hair": {"color": "Brown", "type": "Curly"},
    "address": {
        "address": "626 Main Street",
        "city": "Phoenix",
        "coordinates": {"lat": -77.16213, "lng": -92.084824},
        "postalCode": "29112",
        "state": "Mississippi",
        "country": "United States",
    },
}


def _client(routes: dict[tuple[str, str], httpx.Response], seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return routes.get((request.method, request.url.path), httpx.Response(404, json={}))

    return create_api_client("http://bff.local/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_client_targets_mount_point():
    client = create_api_client("http://bff.local")
    assert str(client.base_url) == "http://bff.local/api/server/"
    assert client.timeout.read == 10.0
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_all_posts_unwraps_object():
    post = {"id": 1, "userId": 5, "title": "t", "body": "b", "tags": ["x"]}
    routes = {("GET", "/api/server/posts"): httpx.Response(200, json={"posts": [post], "total": 1})}

    async with _client(routes) as client:
        posts = await fetch_all_posts(client)

    assert [p.id for p in posts] == [1]
    assert posts[0].model_extra == {"tags": ["x"]}


@pytest.mark.asyncio
async def test_fetch_all_todos_accepts_bare_array():
    todo = {"id": 2, "todo": "walk", "completed": True, "userId": 3}
    routes = {("GET", "/api/server/todos"): httpx.Response(200, json=[todo])}

    async with _client(routes) as client:
        todos = await fetch_all_todos(client)

    assert todos[0].todo == "walk"
    assert todos[0].completed is True


@pytest.mark.asyncio
async def test_fetch_all_users_parses_nested_fields():
    routes = {("GET", "/api/server/users"): httpx.Response(200, json={"users": [USER]})}

    async with _client(routes) as client:
        users = await fetch_all_users(client)

    assert users[0].hair.color == "Brown"
    assert users[0].address.coordinates.lat == pytest.approx(-77.16213)


@pytest.mark.asyncio
async def test_fetch_by_id():
    routes = {
        ("GET", "/api/server/posts/1"): httpx.Response(
            200, json={"id": 1, "userId": 5, "title": "t", "body": "b"}
        ),
        ("GET", "/api/server/todos/2"): httpx.Response(
            200, json={"id": 2, "todo": "walk", "completed": False, "userId": 3}
        ),
        ("GET", "/api/server/users/1"): httpx.Response(200, json=USER),
    }

    async with _client(routes) as client:
        assert (await fetch_post_by_id(client, 1)).title == "t"
        assert (await fetch_todo_by_id(client, 2)).userId == 3
        assert (await fetch_user_by_id(client, 1)).username == "emilys"


@pytest.mark.asyncio
async def test_create_operations_post_payloads():
    seen: list[httpx.Request] = []
    routes = {
        ("POST", "/api/server/posts/add"): httpx.Response(
            201, json={"id": 252, "title": "t", "body": "b", "userId": 1}
        ),
        ("POST", "/api/server/todos/add"): httpx.Response(
            201, json={"id": 255, "todo": "x", "completed": False, "userId": 1}
        ),
        ("POST", "/api/server/users/add"): httpx.Response(
            201,
            json={"id": 209, "firstName": "A", "lastName": "B", "username": "ab", "email": "a@b"},
        ),
    }

    async with _client(routes, seen) as client:
        post = await create_post(client, CreatePostData(title="t", body="b", userId=1))
        todo = await create_todo(client, CreateTodoData(todo="x"))
        user = await create_user(
            client, CreateUserData(firstName="A", lastName="B", username="ab", email="a@b")
        )

    assert (post.id, todo.id, user.id) == (252, 255, 209)
    assert json.loads(seen[1].content) == {"todo": "x", "completed": False, "userId": 1}
    assert json.loads(seen[2].content) == {
        "firstName": "A",
        "lastName": "B",
        "username": "ab",
        "email": "a@b",
    }


@pytest.mark.asyncio
async def test_delete_todo():
    routes = {
        ("DELETE", "/api/server/todos/5"): httpx.Response(
            200,
            json={"id": 5, "todo": "x", "completed": False, "userId": 1, "isDeleted": True},
        )
    }

    async with _client(routes) as client:
        todo = await delete_todo(client, 5)

    assert todo.id == 5
    assert todo.model_extra["isDeleted"] is True


@pytest.mark.asyncio
async def test_non_2xx_raises():
    routes = {("GET", "/api/server/posts/999"): httpx.Response(404, json={"message": "nope"})}

    async with _client(routes) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await fetch_post_by_id(client, 999)
