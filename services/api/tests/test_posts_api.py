"""Tests for /v1/posts endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.main import app
from blog_api.services.post_store import STORAGE_KEY, PostStore, get_post_store
from blog_api.stores.base import MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage):
    """Seeded in-memory store wired into the app."""
    store = PostStore(storage)
    store.initialize()
    app.dependency_overrides[get_post_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture
async def client(store: PostStore):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_list_posts(client: AsyncClient, store: PostStore):
    response = await client.get("/v1/posts")
    assert response.status_code == 200
    data = response.json()

    total = len(store.list_all())
    assert len(data["posts"]) == 9
    assert data["pagination"] == {
        "currentPage": 1,
        "totalPages": -(-total // 9),
        "postsPerPage": 9,
        "totalPosts": total,
    }
    assert set(data["posts"][0]) == {"id", "title", "content", "imgUrl", "createdAt"}


@pytest.mark.asyncio
async def test_list_posts_second_page(client: AsyncClient, store: PostStore):
    response = await client.get("/v1/posts", params={"page": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["pagination"]["currentPage"] == 2
    assert len(data["posts"]) == len(store.list_all()) - 9


@pytest.mark.asyncio
async def test_list_posts_search(client: AsyncClient):
    response = await client.get("/v1/posts", params={"search": "Hospital"})
    assert response.status_code == 200
    data = response.json()
    assert data["posts"]
    for post in data["posts"]:
        assert "hospital" in post["title"].lower()


@pytest.mark.asyncio
async def test_list_posts_no_match(client: AsyncClient):
    response = await client.get("/v1/posts", params={"page": 1, "search": "zzz-no-match"})
    assert response.status_code == 200
    assert response.json() == {
        "posts": [],
        "pagination": {"currentPage": 1, "totalPages": 0, "postsPerPage": 9, "totalPosts": 0},
    }


@pytest.mark.asyncio
async def test_list_posts_rejects_page_zero(client: AsyncClient):
    response = await client.get("/v1/posts", params={"page": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_post_cards(client: AsyncClient):
    response = await client.get("/v1/posts/cards", params={"excerptLength": 20})
    assert response.status_code == 200
    data = response.json()

    card = data["posts"][0]
    assert "content" not in card
    assert card["formattedDate"]
    assert len(card["excerpt"]) <= 23
    assert "<" not in card["excerpt"]
    assert data["pagination"]["postsPerPage"] == 9


@pytest.mark.asyncio
async def test_get_post(client: AsyncClient):
    response = await client.get("/v1/posts/1")
    assert response.status_code == 200
    assert response.json()["id"] == 1


@pytest.mark.asyncio
async def test_get_post_not_found(client: AsyncClient):
    response = await client.get("/v1/posts/99999")
    assert response.status_code == 404
    error = response.json()["detail"]["error"]
    assert error["code"] == "POST_NOT_FOUND"
    assert error["detail"] == {"post_id": 99999}


@pytest.mark.asyncio
async def test_create_post(client: AsyncClient, store: PostStore):
    next_id = max(p.id for p in store.list_all()) + 1
    payload = {
        "title": "New Test Post",
        "content": "<p>This is test content</p>",
        "imgUrl": "https://example.com/image.jpg",
    }

    response = await client.post("/v1/posts", json=payload)
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == next_id
    assert data["title"] == payload["title"]
    assert data["imgUrl"] == payload["imgUrl"]
    assert data["createdAt"]

    fetched = await client.get(f"/v1/posts/{next_id}")
    assert fetched.json() == data


@pytest.mark.asyncio
async def test_create_post_without_image(client: AsyncClient):
    response = await client.post("/v1/posts", json={"title": "t", "content": "c", "imgUrl": ""})
    assert response.status_code == 201
    assert response.json()["imgUrl"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"title": "   ", "content": "c"},
        {"title": "t", "content": ""},
        {"title": "t", "content": "c", "imgUrl": "not a url"},
        {"content": "c"},
    ],
)
async def test_create_post_validation(client: AsyncClient, store: PostStore, payload: dict):
    before = len(store.list_all())
    response = await client.post("/v1/posts", json=payload)
    assert response.status_code == 422
    assert len(store.list_all()) == before


@pytest.mark.asyncio
async def test_update_post(client: AsyncClient):
    original = (await client.get("/v1/posts/1")).json()

    response = await client.put(
        "/v1/posts/1",
        json={
            "title": "Updated Title",
            "content": "Updated content",
            "imgUrl": "https://example.com/new-image.jpg",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["createdAt"] == original["createdAt"]
    assert data["title"] == "Updated Title"
    assert data["imgUrl"] == "https://example.com/new-image.jpg"


@pytest.mark.asyncio
async def test_update_post_not_found(client: AsyncClient):
    response = await client.put("/v1/posts/99999", json={"title": "t", "content": "c"})
    assert response.status_code == 404
    assert response.json()["detail"]["error"]["code"] == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_post(client: AsyncClient):
    response = await client.delete("/v1/posts/1")
    assert response.status_code == 204

    assert (await client.get("/v1/posts/1")).status_code == 404
    assert (await client.delete("/v1/posts/1")).status_code == 404


@pytest.mark.asyncio
async def test_corrupt_storage_returns_structured_error(client: AsyncClient, storage: MemoryStorage):
    storage.set(STORAGE_KEY, "{not json")

    response = await client.get("/v1/posts")
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "STORAGE_CORRUPT"
