import pytest

from devhub.manager import create_portfolio_manager, create_snippet_manager
from devhub.store.filter import SnippetFilter


@pytest.mark.asyncio
async def test_portfolio_create_then_delete_round_trip(backend, api_client):
    backend.add_link(title="LinkedIn", url="https://linkedin.com/in/me", order=2)
    manager = create_portfolio_manager(api_client)
    await manager.open()

    manager.form.toggle()
    manager.form.update("title", "GitHub")
    manager.form.update("url", "https://github.com/me")
    manager.form.update("order", 1)
    assert await manager.form.submit() is True

    titles = [row.title for row in manager.view().rows]
    assert titles == ["GitHub", "LinkedIn"]
    assert manager.form.visible is False

    github_id = manager.store.records[0].id

    async def accept(_prompt):
        return True

    assert await manager.renderer.request_delete(github_id, accept) is True
    assert [row.title for row in manager.view().rows] == ["LinkedIn"]
    assert backend.requests == [
        ("GET", "/api/portfolio"),
        ("POST", "/api/portfolio"),
        ("GET", "/api/portfolio"),
        ("DELETE", f"/api/portfolio/{github_id}"),
        ("GET", "/api/portfolio"),
    ]


@pytest.mark.asyncio
async def test_snippet_filter_switches_collections(backend, api_client):
    backend.add_snippet(title="Private helper", code="x", language="go")
    backend.add_snippet(title="Shared util", code="y", language="go", isPublic=True)
    manager = create_snippet_manager(api_client)

    await manager.open()
    assert [record.title for record in manager.store.records] == ["Shared util", "Private helper"]

    await manager.filter.select(SnippetFilter.PUBLIC)
    assert [record.title for record in manager.store.records] == ["Shared util"]
    assert backend.requests[-1] == ("GET", "/api/snippets/public")


@pytest.mark.asyncio
async def test_created_snippet_appears_only_after_server_reload(backend, api_client):
    manager = create_snippet_manager(api_client, initial_filter=SnippetFilter.PUBLIC)
    await manager.open()

    manager.form.update("title", "Private draft")
    manager.form.update("code", "pass")
    manager.form.update("language", "python")
    manager.form.update("tags", "wip, ,draft")
    assert await manager.form.submit() is True

    # not public, so the public collection reloaded from the server stays empty
    assert manager.store.records == ()
    assert manager.view().placeholder is not None
    stored = next(iter(backend.snippets.values()))
    assert stored["tags"] == ["wip", "draft"]


@pytest.mark.asyncio
async def test_server_failure_keeps_last_good_collection(backend, api_client):
    backend.add_link(title="Blog", url="https://blog.example.com")
    manager = create_portfolio_manager(api_client)
    await manager.open()
    before = manager.store.records

    backend.fail_paths.add(("POST", "/api/portfolio"))
    manager.form.update("title", "Broken")
    manager.form.update("url", "https://broken.example.com")
    assert await manager.form.submit() is False

    assert manager.store.records == before
    assert manager.store.error == "Failed to create portfolio link: Request failed with status code 500"
    assert manager.form.draft.title == "Broken"
    assert manager.view().error == manager.store.error
