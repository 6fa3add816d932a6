import asyncio
import logging
import math
from typing import Awaitable, Callable, List, Mapping, Optional, Tuple

from yourel.domain.external.search import SearchApi
from yourel.domain.models.platform import Platform
from yourel.domain.models.search import (
    MAX_RESULTS,
    PAGE_SIZE,
    FullResultCache,
    SearchKey,
    SearchMode,
    SearchResult,
    SearchState,
    WebSearchResponse,
)
from yourel.domain.services.reranker import rerank

logger = logging.getLogger(__name__)

# 返回(点赞计数, 点踩计数)的异步数据源，偏好模式下使用
PreferenceCountsLoader = Callable[
    [], Awaitable[Tuple[Mapping[str, int], Mapping[str, int]]]
]


async def _no_preferences() -> Tuple[Mapping[str, int], Mapping[str, int]]:
    return {}, {}


class SearchService:
    """单个搜索会话的结果缓存与分页服务

    每个SearchKey(查询词+平台+模式+集合过滤)最多只发起一次web_search请求，
    翻页只在本地缓存的完整结果集上切片。每次调用都会分配一个递增的ticket，
    异步请求返回时只有最新一次调用才能提交状态，过期响应直接丢弃。
    """

    def __init__(
        self,
        search_api: SearchApi,
        preference_counts: Optional[PreferenceCountsLoader] = None,
        page_size: int = PAGE_SIZE,
        max_results: int = MAX_RESULTS,
        search_timeout: Optional[float] = 15,
        summary_timeout: Optional[float] = 30,
    ) -> None:
        """构造函数，完成搜索会话状态与依赖的初始化"""
        self._search_api = search_api
        self._preference_counts = preference_counts or _no_preferences
        self._page_size = page_size
        self._max_results = max_results
        self._search_timeout = search_timeout
        self._summary_timeout = summary_timeout

        self._state = SearchState()
        self._cache: Optional[FullResultCache] = None
        self._inflight: Optional[Tuple[SearchKey, "asyncio.Task[WebSearchResponse]"]] = None
        self._summary_task: Optional["asyncio.Task[None]"] = None
        self._ticket = 0

        self._last_query = ""
        self._last_platform = Platform.ALL
        self._last_bundle_filters: Optional[str] = None

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self._state.total_results / self._page_size))

    @property
    def cached_key(self) -> Optional[SearchKey]:
        return self._cache.key if self._cache else None

    async def search(
        self,
        query: str,
        platform: Platform | str = Platform.ALL,
        page: int = 1,
        favorite_mode: bool = False,
        bundle_filters: Optional[str] = None,
    ) -> SearchState:
        """执行搜索并发布指定页的结果"""
        # 1.空查询不做任何处理
        if not query or not query.strip():
            return self._state

        # 2.计算缓存键(页码不参与)并登记本次调用
        platform = Platform(platform)
        page = max(1, page)
        key = SearchKey(
            query=query,
            platform=platform,
            mode=SearchMode.FAVORITES if favorite_mode else SearchMode.GENERAL,
            bundle_filter=bundle_filters or None,
        )
        self._ticket += 1
        ticket = self._ticket
        self._last_query = query
        self._last_platform = platform
        self._last_bundle_filters = key.bundle_filter

        # 3.偏好模式下先加载点赞/点踩计数
        like_counts: Mapping[str, int] = {}
        dislike_counts: Mapping[str, int] = {}
        if favorite_mode:
            like_counts, dislike_counts = await self._preference_counts()

        # 4.缓存命中直接复用，未命中时发起一次请求
        if self._cache is not None and self._cache.key == key:
            full_results = self._cache.results
        else:
            self._state = self._state.model_copy(update={"is_loading": True, "error": None})
            response = await self._fetch(key)

            if ticket != self._ticket:
                logger.info("丢弃过期的搜索响应: query=%s platform=%s", key.query, key.platform.value)
                return self._state

            if not response.success:
                logger.warning("搜索失败: %s", response.error)
                self._cache = None
                self._cancel_summary()
                self._state = SearchState(
                    has_searched=True,
                    error=response.error or "Search failed",
                )
                return self._state

            self._cache = FullResultCache(key=key, results=response.results[: self._max_results])
            full_results = self._cache.results
        if ticket != self._ticket:
            return self._state

        # 5.偏好模式重排，生成新列表而不修改缓存
        if favorite_mode:
            full_results = rerank(full_results, like_counts, dislike_counts)

        # 6.切片并发布当前页，随后触发AI摘要
        start = (page - 1) * self._page_size
        page_results = full_results[start : start + self._page_size]
        self._state = SearchState(
            results=page_results,
            is_loading=False,
            error=None,
            has_searched=True,
            total_results=len(full_results),
            current_page=page,
            ai_summary=None,
            is_ai_loading=bool(page_results),
        )
        self._start_summary(ticket, key, page_results)
        return self._state

    async def change_page(self, page: int, favorite_mode: bool = False) -> SearchState:
        """翻页，依赖缓存命中避免重复请求"""
        return await self.search(
            self._last_query,
            self._last_platform,
            page,
            favorite_mode,
            self._last_bundle_filters,
        )

    async def change_filter(
        self, platform: Platform | str, favorite_mode: bool = False
    ) -> SearchState:
        """切换平台过滤，页码重置为1"""
        return await self.search(
            self._last_query,
            platform,
            1,
            favorite_mode,
            self._last_bundle_filters,
        )

    async def wait_for_summary(self) -> None:
        """等待当前页的AI摘要任务结束"""
        task = self._summary_task
        if task is not None and not task.done():
            await asyncio.gather(task, return_exceptions=True)

    async def close(self) -> None:
        """关闭会话，取消未完成的AI摘要任务"""
        task = self._cancel_summary()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _fetch(self, key: SearchKey) -> WebSearchResponse:
        """获取完整结果集，同一个键的并发调用共享同一个请求"""
        if self._inflight is not None and self._inflight[0] == key:
            task = self._inflight[1]
        else:
            task = asyncio.create_task(self._request(key))
            self._inflight = (key, task)

        try:
            return await asyncio.shield(task)
        finally:
            if task.done() and self._inflight is not None and self._inflight[1] is task:
                self._inflight = None

    async def _request(self, key: SearchKey) -> WebSearchResponse:
        logger.info(
            "发起搜索请求: query=%s platform=%s mode=%s",
            key.query,
            key.platform.value,
            key.mode.value,
        )
        try:
            async with asyncio.timeout(self._search_timeout):
                return await self._search_api.web_search(
                    key.query,
                    key.platform.value,
                    1,
                    self._max_results,
                    key.bundle_filter,
                )
        except TimeoutError:
            logger.warning("搜索请求超时: %ss", self._search_timeout)
            return WebSearchResponse.fail(
                f"Search timed out after {self._search_timeout:g} seconds"
            )
        except Exception as e:
            # 客户端抛出的异常同样转换为失败响应，由调用方统一复位状态
            logger.exception(f"搜索请求出错: {str(e)}")
            return WebSearchResponse.fail(str(e) or "Search failed")

    def _start_summary(
        self, ticket: int, key: SearchKey, page_results: List[SearchResult]
    ) -> None:
        self._cancel_summary()
        # 空页不请求摘要，状态中的ai_summary/is_ai_loading已经复位
        if not page_results:
            return
        self._summary_task = asyncio.create_task(
            self._fetch_summary(ticket, key, page_results)
        )

    def _cancel_summary(self) -> Optional["asyncio.Task[None]"]:
        task = self._summary_task
        self._summary_task = None
        if task is not None and not task.done():
            task.cancel()
        return task

    async def _fetch_summary(
        self, ticket: int, key: SearchKey, page_results: List[SearchResult]
    ) -> None:
        """获取AI摘要，任何失败都只记录日志，不影响搜索结果展示"""
        summary: Optional[str] = None
        try:
            async with asyncio.timeout(self._summary_timeout):
                response = await self._search_api.get_ai_summary(
                    key.query, key.platform.value, page_results
                )
            if response.success and response.summary:
                summary = response.summary
            else:
                logger.warning("AI摘要生成失败: %s", response.error)
        except TimeoutError:
            logger.warning("AI摘要请求超时: %ss", self._summary_timeout)
        except Exception as e:
            logger.warning(f"AI摘要请求出错: {str(e)}")

        if ticket != self._ticket:
            return
        self._state = self._state.model_copy(
            update={"ai_summary": summary, "is_ai_loading": False}
        )
