"""Data-fetching operations for posts, todos and users.

Every call goes through the proxy mount point. List endpoints may answer
either with a bare array or with an object that wraps the array under the
pluralized resource name (``{"posts": [...], "total": ...}``); both are
accepted. Non-2xx answers raise ``httpx.HTTPStatusError``.
"""

from typing import Any

import httpx

from client.models import (
    CreatePostData,
    CreateTodoData,
    CreateUserData,
    Post,
    Todo,
    User,
)


def _unwrap_list(data: Any, key: str) -> list[Any]:
    if isinstance(data, dict):
        return data.get(key) or []
    return data


async def _get(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.get(url)
    response.raise_for_status()
    return response.json()


async def _post(client: httpx.AsyncClient, url: str, payload: dict[str, Any]) -> Any:
    response = await client.post(url, json=payload)
    response.raise_for_status()
    return response.json()


async def _delete(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.delete(url)
    response.raise_for_status()
    return response.json()


async def fetch_all_posts(client: httpx.AsyncClient) -> list[Post]:
    data = await _get(client, "/posts")
    return [Post.model_validate(item) for item in _unwrap_list(data, "posts")]


async def fetch_post_by_id(client: httpx.AsyncClient, post_id: int) -> Post:
    return Post.model_validate(await _get(client, f"/posts/{post_id}"))


async def create_post(client: httpx.AsyncClient, post_data: CreatePostData) -> Post:
    return Post.model_validate(await _post(client, "/posts/add", post_data.model_dump()))


async def fetch_all_todos(client: httpx.AsyncClient) -> list[Todo]:
    data = await _get(client, "/todos")
    return [Todo.model_validate(item) for item in _unwrap_list(data, "todos")]


async def fetch_todo_by_id(client: httpx.AsyncClient, todo_id: int) -> Todo:
    return Todo.model_validate(await _get(client, f"/todos/{todo_id}"))


async def create_todo(client: httpx.AsyncClient, todo_data: CreateTodoData) -> Todo:
    return Todo.model_validate(await _post(client, "/todos/add", todo_data.model_dump()))


async def delete_todo(client: httpx.AsyncClient, todo_id: int) -> Todo:
    return Todo.model_validate(await _delete(client, f"/todos/{todo_id}"))


async def fetch_all_users(client: httpx.AsyncClient) -> list[User]:
    data = await _get(client, "/users")
    return [User.model_validate(item) for item in _unwrap_list(data, "users")]


async def fetch_user_by_id(client: httpx.AsyncClient, user_id: int) -> User:
    return User.model_validate(await _get(client, f"/users/{user_id}"))


async def create_user(client: httpx.AsyncClient, user_data: CreateUserData) -> User:
    payload = user_data.model_dump(exclude_none=True)
    return User.model_validate(await _post(client, "/users/add", payload))
