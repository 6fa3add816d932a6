import asyncio
from pathlib import Path

import pytest

from yourel.application.errors.exceptions import BadRequestError
from yourel.application.services.preference_service import PreferenceService
from yourel.domain.models.preference import UserPreference
from yourel.infrastructure.repositories.file_preference_repository import (
    FilePreferenceRepository,
)

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class _InMemoryPreferenceRepository:
    def __init__(self) -> None:
        self._items: dict[str, UserPreference] = {}

    async def list(self) -> list[UserPreference]:
        return list(self._items.values())

    async def get_by_user_id(self, user_id: str) -> UserPreference | None:
        return self._items.get(user_id)

    async def upsert(self, preference: UserPreference) -> UserPreference:
        self._items[preference.user_id] = preference
        return preference

    async def update(self, user_id, updater) -> UserPreference:
        current = self._items.get(user_id) or UserPreference(user_id=user_id)
        return await self.upsert(updater(current))


async def test_unknown_user_gets_empty_preference() -> None:
    service = PreferenceService(_InMemoryPreferenceRepository())

    preference = await service.get_preference("new-user")

    assert preference.user_id == "new-user"
    assert preference.favorites == []


async def test_aggregate_counts_reflect_likes_and_dislikes() -> None:
    service = PreferenceService(_InMemoryPreferenceRepository())

    await service.like_site("u1", "https://b.vercel.app")
    await service.like_site("u2", "https://b.vercel.app")
    await service.dislike_site("u1", "https://a.vercel.app")
    await service.add_favorite("u1", "https://b.vercel.app")

    likes, dislikes = await service.aggregate_counts()

    assert likes["https://b.vercel.app"] == 2
    assert dislikes["https://a.vercel.app"] == 1
    assert (await service.get_preference("u1")).favorites == ["https://b.vercel.app"]


async def test_blank_url_is_rejected() -> None:
    service = PreferenceService(_InMemoryPreferenceRepository())

    with pytest.raises(BadRequestError):
        await service.like_site("u1", "  ")


async def test_concurrent_updates_for_same_user_are_all_kept(tmp_path: Path) -> None:
    service = PreferenceService(FilePreferenceRepository(tmp_path / "preferences.json"))
    urls = [f"https://site{i}.vercel.app" for i in range(5)]

    await asyncio.gather(
        *(service.like_site("u1", url) for url in urls),
        service.add_favorite("u1", urls[0]),
    )

    preference = await service.get_preference("u1")
    assert sorted(preference.liked_sites) == sorted(urls)
    assert preference.favorites == [urls[0]]
    likes, _ = await service.aggregate_counts()
    assert all(likes[url] == 1 for url in urls)
