from typing import List, Optional

from pydantic import BaseModel, Field

from yourel.application.services.search_service import SearchService
from yourel.domain.models.platform import Platform
from yourel.domain.models.search import SearchResult
from yourel.domain.models.summary import SummarySection
from yourel.domain.services.summary_parser import parse_summary


class PlatformItem(BaseModel):
    """平台过滤选项"""

    id: Platform
    label: str
    site_filter: Optional[str] = None  # ALL 没有对应的site过滤


class SearchRequest(BaseModel):
    """搜索请求结构"""

    query: str = ""  # 空查询不会触发搜索
    platform: Platform = Platform.ALL
    page: int = Field(default=1, ge=1)
    favorite_mode: bool = False  # 是否按社区喜好重排
    bundle_id: Optional[str] = None  # 限定搜索范围的站点集合id


class ChangePageRequest(BaseModel):
    """翻页请求结构"""

    page: int = Field(..., ge=1)
    favorite_mode: bool = False


class ChangeFilterRequest(BaseModel):
    """切换平台过滤请求结构"""

    platform: Platform
    favorite_mode: bool = False


class SearchStateResponse(BaseModel):
    """搜索视图模型响应结构"""

    session_id: str
    results: List[SearchResult] = Field(default_factory=list)  # 当前页结果
    is_loading: bool = False
    error: Optional[str] = None
    has_searched: bool = False
    total_results: int = 0
    current_page: int = 1
    total_pages: int = 1
    page_size: int = 20
    ai_summary: Optional[str] = None
    is_ai_loading: bool = False
    summary_sections: List[SummarySection] = Field(default_factory=list)

    @classmethod
    def from_service(cls, session_id: str, service: SearchService) -> "SearchStateResponse":
        state = service.state
        return cls(
            session_id=session_id,
            **state.model_dump(),
            total_pages=service.total_pages,
            page_size=service.page_size,
            summary_sections=parse_summary(state.ai_summary),
        )
