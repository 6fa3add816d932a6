import logging
from typing import List, Optional

from yourel.application.errors.exceptions import NotFoundError, ValidationError
from yourel.domain.models.bundle import Bundle, BundleWebsite
from yourel.domain.repositories.bundle_repository import BundleRepository

logger = logging.getLogger(__name__)


class BundleService:
    """站点集合服务"""

    def __init__(self, bundle_repository: BundleRepository) -> None:
        self.bundle_repository = bundle_repository

    async def list_bundles(self) -> List[Bundle]:
        return await self.bundle_repository.list()

    async def get_bundle(self, bundle_id: str) -> Bundle:
        bundle = await self.bundle_repository.get_by_id(bundle_id)
        if bundle is None:
            raise NotFoundError("站点集合不存在")
        return bundle

    async def create_bundle(
        self,
        name: str,
        websites: List[BundleWebsite],
        description: Optional[str] = None,
    ) -> Bundle:
        """创建站点集合，集合名称与站点列表均不能为空"""
        name = name.strip()
        if not name:
            raise ValidationError("集合名称不能为空")

        # 按站点去重，保留首次出现的顺序
        unique: dict[str, BundleWebsite] = {}
        for website in websites:
            if website.site and website.site not in unique:
                unique[website.site] = website
        if not unique:
            raise ValidationError("集合至少需要包含一个站点")

        bundle = Bundle(name=name, description=description, websites=list(unique.values()))
        logger.info("创建站点集合: %s (%d个站点)", bundle.name, len(bundle.websites))
        return await self.bundle_repository.upsert(bundle)

    async def delete_bundle(self, bundle_id: str) -> None:
        if not await self.bundle_repository.delete(bundle_id):
            raise NotFoundError("站点集合不存在")

    async def resolve_site_filters(self, bundle_id: Optional[str]) -> Optional[str]:
        """将集合id解析为搜索使用的site过滤表达式"""
        if not bundle_id:
            return None
        bundle = await self.get_bundle(bundle_id)
        return bundle.site_filters()
