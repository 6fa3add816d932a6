from __future__ import annotations

"""站点集合仓储接口"""

from abc import ABC, abstractmethod
from typing import Optional

from yourel.domain.models.bundle import Bundle


class BundleRepository(ABC):
    """站点集合数据仓储抽象接口"""

    @abstractmethod
    async def list(self) -> list[Bundle]:
        """获取全部站点集合"""
        pass

    @abstractmethod
    async def get_by_id(self, bundle_id: str) -> Optional[Bundle]:
        """根据 ID 获取站点集合"""
        pass

    @abstractmethod
    async def upsert(self, bundle: Bundle) -> Bundle:
        """创建或更新站点集合"""
        pass

    @abstractmethod
    async def delete(self, bundle_id: str) -> bool:
        """删除站点集合"""
        pass
