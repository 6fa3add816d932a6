from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from yourel.domain.models.platform import Platform, detect_platform

# 默认分页大小与单个缓存键拉取的最大结果数
PAGE_SIZE = 20
MAX_RESULTS = 100


class SearchMode(str, Enum):
    """搜索模式：普通相关性排序/按社区喜好重排"""

    GENERAL = "general"
    FAVORITES = "favorites"


class SearchResult(BaseModel):
    """搜索结果条目，构造后不可变，以link作为唯一标识"""

    model_config = ConfigDict(frozen=True)

    title: str  # 搜索条目标题
    link: str  # 搜索条目URL地址
    snippet: str = ""  # 搜索条目简介
    platform: Optional[str] = None  # 托管平台
    favicon: Optional[str] = None  # 站点图标地址

    @classmethod
    def from_function_item(cls, item: Dict[str, Any]) -> Optional["SearchResult"]:
        """将web-search函数返回的条目转换成搜索结果，缺少url时返回None"""
        url = item.get("url")
        if not url:
            return None
        url = str(url)
        return cls(
            title=str(item.get("title") or urlparse(url).hostname or url),
            link=url,
            snippet=str(item.get("description") or ""),
            platform=item.get("platform") or detect_platform(url),
            favicon=item.get("favicon_url") or None,
        )

    def to_function_item(self) -> Dict[str, Any]:
        """转换成ai-search函数接受的条目结构"""
        return {
            "title": self.title,
            "url": self.link,
            "description": self.snippet,
            "platform": self.platform,
        }


class SearchKey(BaseModel):
    """完整结果缓存的复合键，页码不参与计算"""

    model_config = ConfigDict(frozen=True)

    query: str
    platform: Platform = Platform.ALL
    mode: SearchMode = SearchMode.GENERAL
    bundle_filter: Optional[str] = None


class FullResultCache(BaseModel):
    """单槽完整结果缓存，整体替换，从不局部修改"""

    model_config = ConfigDict(frozen=True)

    key: SearchKey
    results: List[SearchResult] = Field(default_factory=list)


class SearchState(BaseModel):
    """展示层读取的搜索视图模型"""

    results: List[SearchResult] = Field(default_factory=list)  # 仅当前页
    is_loading: bool = False
    error: Optional[str] = None
    has_searched: bool = False
    total_results: int = 0
    current_page: int = 1
    ai_summary: Optional[str] = None
    is_ai_loading: bool = False


class WebSearchResponse(BaseModel):
    """web-search函数响应"""

    success: bool = True
    results: List[SearchResult] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    error: Optional[str] = None

    @classmethod
    def fail(cls, error: str, page: int = 1) -> "WebSearchResponse":
        return cls(success=False, results=[], total=0, page=page, error=error)


class AISummaryResponse(BaseModel):
    """ai-search函数响应"""

    success: bool = True
    summary: str = ""
    error: Optional[str] = None
