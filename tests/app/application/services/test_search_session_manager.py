import pytest

from yourel.application.errors.exceptions import NotFoundError
from yourel.application.services.search_service import SearchService
from yourel.application.services.search_session_manager import SearchSessionManager
from yourel.domain.models.search import AISummaryResponse, WebSearchResponse

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class _EmptySearchApi:
    async def web_search(self, query, platform="all", page=1, max_results=100, bundle_site_filters=None):
        return WebSearchResponse(results=[], total=0)

    async def get_ai_summary(self, query, platform, results):
        return AISummaryResponse(summary="")


async def test_sessions_are_isolated_and_deletable() -> None:
    manager = SearchSessionManager(lambda: SearchService(_EmptySearchApi()))

    first_id, first = manager.create()
    second_id, second = manager.create()

    assert first_id != second_id
    assert first is not second
    assert manager.get(first_id) is first
    assert len(manager) == 2

    await manager.delete(first_id)
    with pytest.raises(NotFoundError):
        manager.get(first_id)
    with pytest.raises(NotFoundError):
        await manager.delete(first_id)

    await manager.shutdown()
    assert len(manager) == 0
