import asyncio
import logging
import uuid
from typing import Callable

from yourel.application.errors.exceptions import NotFoundError
from yourel.application.services.search_service import SearchService

logger = logging.getLogger(__name__)


class SearchSessionManager:
    """进程内的搜索会话管理器，每个会话独占一个SearchService(单槽缓存)"""

    def __init__(self, session_factory: Callable[[], SearchService]) -> None:
        self._session_factory = session_factory
        self._sessions: dict[str, SearchService] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, SearchService]:
        """创建新的搜索会话并返回(会话id, 搜索服务)"""
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = self._session_factory()
        logger.info("创建搜索会话: %s", session_id)
        return session_id, self._sessions[session_id]

    def get(self, session_id: str) -> SearchService:
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError("搜索会话不存在")
        return session

    async def delete(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise NotFoundError("搜索会话不存在")
        await session.close()
        logger.info("删除搜索会话: %s", session_id)

    async def shutdown(self) -> None:
        """关闭所有会话，取消仍在进行的AI摘要任务"""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        await asyncio.gather(*(session.close() for session in sessions))
