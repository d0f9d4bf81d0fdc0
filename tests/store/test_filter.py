import pytest

from devhub.resource.kinds import SNIPPETS
from devhub.store.filter import FilterController, SnippetFilter
from devhub.store.store import ResourceStore


class _RecordingClient:
    def __init__(self):
        self.paths = []

    async def list(self, path):
        self.paths.append(path)
        return []


def _controller():
    client = _RecordingClient()
    store = ResourceStore(SNIPPETS, client)
    return FilterController(store), client


def test_initial_filter_is_all():
    controller, _ = _controller()

    assert controller.current is SnippetFilter.ALL
    assert controller.target == "/snippets"


@pytest.mark.asyncio
async def test_public_filter_only_requests_public_collection():
    controller, client = _controller()

    await controller.select(SnippetFilter.PUBLIC)

    assert client.paths == ["/snippets/public"]
    assert controller.store.state.target == "/snippets/public"


@pytest.mark.asyncio
async def test_switching_back_to_all_requests_full_collection():
    controller, client = _controller()

    await controller.select("public")
    await controller.select("all")

    assert client.paths == ["/snippets/public", "/snippets"]
    assert controller.current is SnippetFilter.ALL


@pytest.mark.asyncio
async def test_reselecting_active_filter_reloads():
    controller, client = _controller()

    await controller.select(SnippetFilter.ALL)
    await controller.select(SnippetFilter.ALL)

    assert client.paths == ["/snippets", "/snippets"]


@pytest.mark.asyncio
async def test_mutation_reload_uses_active_filter_target():
    controller, client = _controller()
    await controller.select(SnippetFilter.PUBLIC)

    await controller.store.load()

    assert client.paths == ["/snippets/public", "/snippets/public"]


@pytest.mark.asyncio
async def test_unknown_filter_value_is_rejected():
    controller, client = _controller()

    with pytest.raises(ValueError):
        await controller.select("private")

    assert client.paths == []
    assert controller.current is SnippetFilter.ALL
