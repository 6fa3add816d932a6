from __future__ import annotations

"""用户偏好仓储接口"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from yourel.domain.models.preference import UserPreference

# 接收当前偏好记录(不存在时为空记录)并返回更新后的记录
PreferenceUpdater = Callable[[UserPreference], UserPreference]


class PreferenceRepository(ABC):
    """用户偏好数据仓储抽象接口"""

    @abstractmethod
    async def list(self) -> list[UserPreference]:
        """获取全部用户的偏好记录"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[UserPreference]:
        """根据用户 ID 获取偏好记录"""
        pass

    @abstractmethod
    async def upsert(self, preference: UserPreference) -> UserPreference:
        """创建或更新用户偏好记录"""
        pass

    @abstractmethod
    async def update(self, user_id: str, updater: PreferenceUpdater) -> UserPreference:
        """在同一个写锁内读取、修改并保存用户偏好记录"""
        pass
