from typing import List, Optional, Protocol

from yourel.domain.models.search import (
    AISummaryResponse,
    SearchResult,
    WebSearchResponse,
)


class SearchApi(Protocol):
    """搜索函数API接口协议，请求失败以success=False返回而不抛出异常"""

    async def web_search(
        self,
        query: str,
        platform: str = "all",
        page: int = 1,
        max_results: int = 100,
        bundle_site_filters: Optional[str] = None,
    ) -> WebSearchResponse:
        """调用web-search函数，一次性获取不超过max_results条结果"""
        ...

    async def get_ai_summary(
        self, query: str, platform: str, results: List[SearchResult]
    ) -> AISummaryResponse:
        """调用ai-search函数，为当前页结果生成摘要"""
        ...

    async def get_suggestions(self, query: str) -> List[str]:
        """调用search-suggestions函数获取联想词，失败时返回本地生成的联想词"""
        ...
