"""HTTP-level tests for the server-rendered article pages."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.infrastructure.repositories import InMemoryArticleRepository
from app.main import create_app


@pytest.fixture
def repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest_asyncio.fixture
async def client(repository: InMemoryArticleRepository) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=create_app(repository))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_home_page_when_empty(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Latest Articles" in response.text
    assert "No articles available." in response.text


@pytest.mark.asyncio
async def test_add_form_loads_editor(client: AsyncClient):
    response = await client.get("/add")

    assert response.status_code == 200
    assert "Add a New Article" in response.text
    assert 'action="/add"' in response.text
    assert "/ckeditor/ckeditor.js" in response.text
    assert "CKEDITOR.replace('content')" in response.text


@pytest.mark.asyncio
async def test_create_redirects_and_lists_article(client: AsyncClient, repository):
    response = await client.post("/add", data={"title": "Kickoff", "content": "<p><b>Week 1</b></p>"})

    assert response.status_code == 302
    assert response.headers["location"] == "/"

    [article] = await repository.get_all()
    assert (article.id, article.title, article.content) == (1, "Kickoff", "<p><b>Week 1</b></p>")

    page = await client.get("/")
    assert "Kickoff" in page.text
    assert "<p><b>Week 1</b></p>" in page.text
    assert 'href="/edit/1"' in page.text
    assert 'action="/delete/1"' in page.text


@pytest.mark.asyncio
async def test_title_is_escaped_on_list_page(client: AsyncClient):
    await client.post("/add", data={"title": "<script>alert(1)</script>", "content": "body"})

    page = await client.get("/")
    assert "<script>alert(1)</script>" not in page.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page.text


@pytest.mark.asyncio
async def test_create_without_fields_stores_empty_article(client: AsyncClient, repository):
    response = await client.post("/add", data={})

    assert response.status_code == 302
    [article] = await repository.get_all()
    assert article.title == ""
    assert article.content == ""


@pytest.mark.asyncio
async def test_edit_form_is_prefilled(client: AsyncClient):
    await client.post("/add", data={"title": "Draft", "content": "<p>Hi</p>"})

    response = await client.get("/edit/1")

    assert response.status_code == 200
    assert "Edit Article" in response.text
    assert 'action="/edit/1"' in response.text
    assert 'value="Draft"' in response.text
    assert "&lt;p&gt;Hi&lt;/p&gt;</textarea>" in response.text
    assert "CKEDITOR.replace('content')" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", ["999", "abc"])
async def test_edit_form_for_unknown_id_is_404(client: AsyncClient, article_id: str):
    response = await client.get(f"/edit/{article_id}")

    assert response.status_code == 404
    assert "not found" in response.text.lower()


@pytest.mark.asyncio
async def test_edit_submit_updates_in_place(client: AsyncClient, repository):
    await client.post("/add", data={"title": "Hello", "content": "World"})
    await client.post("/add", data={"title": "Other", "content": "Story"})

    response = await client.post("/edit/1", data={"title": "Hi", "content": "Earth"})

    assert response.status_code == 302
    assert response.headers["location"] == "/"
    articles = await repository.get_all()
    assert [(a.id, a.title, a.content) for a in articles] == [
        (1, "Hi", "Earth"),
        (2, "Other", "Story"),
    ]


@pytest.mark.asyncio
async def test_edit_submit_for_unknown_id_is_404(client: AsyncClient, repository):
    response = await client.post("/edit/5", data={"title": "X", "content": "Y"})

    assert response.status_code == 404
    assert "Article not found" in response.text
    assert await repository.get_all() == []


@pytest.mark.asyncio
async def test_delete_is_idempotent(client: AsyncClient, repository):
    await client.post("/add", data={"title": "Gone", "content": "soon"})

    first = await client.post("/delete/1")
    second = await client.post("/delete/1")
    malformed = await client.post("/delete/abc")

    for response in (first, second, malformed):
        assert response.status_code == 302
        assert response.headers["location"] == "/"
    assert await repository.get_all() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", ["1_0", "abc", "%D9%A1", "-1", "+10"])
async def test_malformed_ids_match_no_article(client: AsyncClient, repository, article_id: str):
    for n in range(1, 11):
        await client.post("/add", data={"title": f"T{n}", "content": f"C{n}"})
    before = [(a.id, a.title, a.content) for a in await repository.get_all()]

    shown = await client.get(f"/edit/{article_id}")
    submitted = await client.post(f"/edit/{article_id}", data={"title": "X", "content": "Y"})
    deleted = await client.post(f"/delete/{article_id}")

    assert shown.status_code == 404
    assert "Article not found" in shown.text
    assert submitted.status_code == 404
    assert "Article not found" in submitted.text
    assert deleted.status_code == 302
    assert deleted.headers["location"] == "/"
    assert [(a.id, a.title, a.content) for a in await repository.get_all()] == before


def test_each_app_owns_its_own_store():
    first = create_app()
    second = create_app()
    assert isinstance(first.state.article_repository, InMemoryArticleRepository)
    assert first.state.article_repository is not second.state.article_repository
