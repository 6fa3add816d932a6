import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from yourel.application.services.bundle_service import BundleService
from yourel.application.services.search_session_manager import SearchSessionManager
from yourel.domain.external.search import SearchApi
from yourel.domain.models.platform import Platform
from yourel.interfaces.schemas import Response
from yourel.interfaces.schemas.search import (
    ChangeFilterRequest,
    ChangePageRequest,
    PlatformItem,
    SearchRequest,
    SearchStateResponse,
)
from yourel.interfaces.service_dependencies import (
    get_bundle_service,
    get_search_api,
    get_search_session_manager,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/search", tags=["搜索模块"])


@router.get(
    "/platforms",
    response_model=Response[List[PlatformItem]],
    summary="获取平台过滤列表",
    description="返回所有可用于搜索过滤的托管平台及其site过滤表达式",
)
async def list_platforms() -> Response:
    platforms = [
        PlatformItem(id=platform, label=platform.label, site_filter=platform.site_filter)
        for platform in Platform
    ]
    return Response.success(platforms)


@router.get(
    "/suggestions",
    response_model=Response[List[str]],
    summary="获取搜索联想词",
    description="查询词少于2个字符时返回空列表，联想服务不可用时返回本地生成的联想词",
)
async def get_suggestions(
    q: str = Query(default="", max_length=200),
    search_api: SearchApi = Depends(get_search_api),
) -> Response:
    suggestions = await search_api.get_suggestions(q)
    return Response.success(suggestions)


@router.post(
    "/sessions",
    response_model=Response[SearchStateResponse],
    summary="创建搜索会话",
    description="每个会话持有独立的完整结果缓存与分页状态",
)
async def create_session(
    manager: SearchSessionManager = Depends(get_search_session_manager),
) -> Response:
    session_id, service = manager.create()
    return Response.success(SearchStateResponse.from_service(session_id, service))


@router.get(
    "/sessions/{session_id}",
    response_model=Response[SearchStateResponse],
    summary="获取搜索会话状态",
    description="返回当前页结果、分页信息以及AI摘要(摘要在后台生成，可轮询获取)",
)
async def get_session(
    session_id: str,
    manager: SearchSessionManager = Depends(get_search_session_manager),
) -> Response:
    service = manager.get(session_id)
    return Response.success(SearchStateResponse.from_service(session_id, service))


@router.post(
    "/sessions/{session_id}/search",
    response_model=Response[SearchStateResponse],
    summary="执行搜索",
    description="相同的查询词/平台/模式/集合只会请求一次搜索函数，之后的翻页均命中本地缓存",
)
async def search(
    session_id: str,
    request: SearchRequest,
    manager: SearchSessionManager = Depends(get_search_session_manager),
    bundle_service: BundleService = Depends(get_bundle_service),
) -> Response:
    service = manager.get(session_id)
    bundle_filters = await bundle_service.resolve_site_filters(request.bundle_id)
    await service.search(
        request.query,
        request.platform,
        request.page,
        request.favorite_mode,
        bundle_filters,
    )
    return Response.success(SearchStateResponse.from_service(session_id, service))


@router.post(
    "/sessions/{session_id}/page",
    response_model=Response[SearchStateResponse],
    summary="搜索结果翻页",
)
async def change_page(
    session_id: str,
    request: ChangePageRequest,
    manager: SearchSessionManager = Depends(get_search_session_manager),
) -> Response:
    service = manager.get(session_id)
    await service.change_page(request.page, request.favorite_mode)
    return Response.success(SearchStateResponse.from_service(session_id, service))


@router.post(
    "/sessions/{session_id}/filter",
    response_model=Response[SearchStateResponse],
    summary="切换平台过滤",
    description="切换平台会改变缓存键，页码重置为1",
)
async def change_filter(
    session_id: str,
    request: ChangeFilterRequest,
    manager: SearchSessionManager = Depends(get_search_session_manager),
) -> Response:
    service = manager.get(session_id)
    await service.change_filter(request.platform, request.favorite_mode)
    return Response.success(SearchStateResponse.from_service(session_id, service))


@router.delete(
    "/sessions/{session_id}",
    response_model=Response,
    summary="删除搜索会话",
)
async def delete_session(
    session_id: str,
    manager: SearchSessionManager = Depends(get_search_session_manager),
) -> Response:
    await manager.delete(session_id)
    return Response.success(msg="删除搜索会话成功")
