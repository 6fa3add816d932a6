import logging
from typing import Mapping, Tuple

from yourel.application.errors.exceptions import BadRequestError
from yourel.domain.models.preference import UserPreference
from yourel.domain.repositories.preference_repository import PreferenceRepository
from yourel.domain.services.reranker import aggregate_preference_counts

logger = logging.getLogger(__name__)


class PreferenceService:
    """用户偏好服务：收藏、点赞、点踩以及偏好计数汇总"""

    def __init__(self, preference_repository: PreferenceRepository) -> None:
        self.preference_repository = preference_repository

    async def get_preference(self, user_id: str) -> UserPreference:
        """获取用户偏好，不存在时返回空记录"""
        preference = await self.preference_repository.get_by_user_id(user_id)
        return preference or UserPreference(user_id=user_id)

    async def like_site(self, user_id: str, url: str) -> UserPreference:
        url = _clean_url(url)
        return await self.preference_repository.update(user_id, lambda p: p.like(url))

    async def dislike_site(self, user_id: str, url: str) -> UserPreference:
        url = _clean_url(url)
        return await self.preference_repository.update(user_id, lambda p: p.dislike(url))

    async def add_favorite(self, user_id: str, url: str) -> UserPreference:
        url = _clean_url(url)
        return await self.preference_repository.update(
            user_id, lambda p: p.add_favorite(url)
        )

    async def remove_favorite(self, user_id: str, url: str) -> UserPreference:
        url = _clean_url(url)
        return await self.preference_repository.update(
            user_id, lambda p: p.remove_favorite(url)
        )

    async def aggregate_counts(self) -> Tuple[Mapping[str, int], Mapping[str, int]]:
        """汇总所有本地偏好记录的点赞/点踩计数，供偏好模式重排使用"""
        records = await self.preference_repository.list()
        return aggregate_preference_counts(records)


def _clean_url(url: str) -> str:
    cleaned = url.strip()
    if not cleaned:
        raise BadRequestError("站点URL不能为空")
    return cleaned
