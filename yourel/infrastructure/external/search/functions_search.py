import logging
from typing import Any, Dict, List, Optional

import httpx

from yourel.domain.external.search import SearchApi
from yourel.domain.models.search import (
    AISummaryResponse,
    SearchResult,
    WebSearchResponse,
)
from yourel.domain.services.suggestions import (
    MAX_SUGGESTIONS,
    MIN_QUERY_LENGTH,
    fallback_suggestions,
)

logger = logging.getLogger(__name__)


class FunctionsSearchApi(SearchApi):
    """基于serverless函数(web-search/ai-search)的搜索API客户端"""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """构造函数，完成函数基础地址、鉴权请求头与超时时间初始化"""
        self.base_url = base_url.rstrip("/")
        self.headers = {"Content-Type": "application/json"}
        if api_key:
            self.headers["Authorization"] = f"Bearer {api_key}"
            self.headers["apikey"] = api_key
        self.timeout = timeout
        self._transport = transport

    async def _invoke(self, function_name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """调用指定函数并返回JSON对象，非JSON响应或请求失败时抛出异常"""
        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(f"{self.base_url}/{function_name}", json=body)

        try:
            data = response.json()
        except ValueError:
            raise RuntimeError(
                f"Search service unavailable ({response.status_code})"
            ) from None

        if not isinstance(data, dict):
            raise RuntimeError(f"Unexpected response from {function_name}")

        # 函数在出错时同样返回{success: false, error}，优先透传其错误信息
        if response.is_error and data.get("success") is not False:
            data = {
                "success": False,
                "error": data.get("error") or f"HTTP {response.status_code}",
            }
        return data

    async def web_search(
        self,
        query: str,
        platform: str = "all",
        page: int = 1,
        max_results: int = 100,
        bundle_site_filters: Optional[str] = None,
    ) -> WebSearchResponse:
        """调用web-search函数，分页在客户端完成，因此不向后端传递page"""
        # 1.构建请求体
        body: Dict[str, Any] = {
            "query": query,
            "platform": platform,
            "limit": max_results,
        }
        if bundle_site_filters:
            body["bundleSiteFilters"] = bundle_site_filters

        try:
            # 2.调用函数获取数据
            data = await self._invoke("web-search", body)
        except (httpx.HTTPError, RuntimeError) as e:
            logger.error(f"web-search调用出错: {str(e)}")
            return WebSearchResponse.fail(str(e) or "Web search failed", page=page)

        # 3.后端返回失败时原样透传错误信息
        if not data.get("success"):
            return WebSearchResponse.fail(
                str(data.get("error") or "Web search failed"), page=page
            )

        # 4.解析结果条目，结构不符合约定时同样按失败返回
        try:
            results = self._parse_results(data.get("results") or [])
        except Exception as e:
            logger.error(f"web-search结果解析出错: {str(e)}")
            return WebSearchResponse.fail("Invalid response from search service", page=page)

        total = data.get("total")
        return WebSearchResponse(
            success=True,
            results=results[:max_results],
            total=total if isinstance(total, int) else len(results),
            page=page,
        )

    @staticmethod
    def _parse_results(items: Any) -> List[SearchResult]:
        """丢弃缺少url的条目并按link去重"""
        if not isinstance(items, list):
            raise TypeError(f"results must be a list, got {type(items).__name__}")

        results: List[SearchResult] = []
        seen_links = set()
        for item in items:
            if not isinstance(item, dict):
                continue
            result = SearchResult.from_function_item(item)
            if result is None or result.link in seen_links:
                continue
            seen_links.add(result.link)
            results.append(result)
        return results

    async def get_ai_summary(
        self, query: str, platform: str, results: List[SearchResult]
    ) -> AISummaryResponse:
        """调用ai-search函数为当前页结果生成摘要"""
        body = {
            "query": query,
            "platform": platform,
            "results": [result.to_function_item() for result in results],
        }

        try:
            data = await self._invoke("ai-search", body)
        except (httpx.HTTPError, RuntimeError) as e:
            logger.warning(f"ai-search调用出错: {str(e)}")
            return AISummaryResponse(success=False, error=str(e) or "AI failed")

        if not data.get("success"):
            return AISummaryResponse(
                success=False, error=str(data.get("error") or "AI failed")
            )
        return AISummaryResponse(success=True, summary=str(data.get("summary") or ""))

    async def get_suggestions(self, query: str) -> List[str]:
        """调用search-suggestions函数获取联想词，任何失败都回退到本地联想词"""
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        try:
            data = await self._invoke("search-suggestions", {"query": query})
            suggestions = data.get("suggestions")
            if data.get("success") and isinstance(suggestions, list):
                return [str(item) for item in suggestions if item][:MAX_SUGGESTIONS]
            logger.warning(f"search-suggestions返回失败: {data.get('error')}")
        except (httpx.HTTPError, RuntimeError) as e:
            logger.warning(f"search-suggestions调用出错: {str(e)}")

        return fallback_suggestions(query)
