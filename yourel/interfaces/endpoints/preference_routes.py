from fastapi import APIRouter, Depends

from yourel.application.services.preference_service import PreferenceService
from yourel.domain.models.preference import UserPreference
from yourel.interfaces.schemas import Response
from yourel.interfaces.schemas.preference import SiteRequest
from yourel.interfaces.service_dependencies import get_preference_service

router = APIRouter(prefix="/preferences", tags=["偏好模块"])


@router.get(
    "/{user_id}",
    response_model=Response[UserPreference],
    summary="获取用户偏好",
)
async def get_preference(
    user_id: str,
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    return Response.success(await preference_service.get_preference(user_id))


@router.post(
    "/{user_id}/like",
    response_model=Response[UserPreference],
    summary="点赞站点",
    description="点赞会同时取消对该站点的点踩",
)
async def like_site(
    user_id: str,
    request: SiteRequest,
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    return Response.success(await preference_service.like_site(user_id, request.url))


@router.post(
    "/{user_id}/dislike",
    response_model=Response[UserPreference],
    summary="点踩站点",
    description="点踩会同时取消对该站点的点赞",
)
async def dislike_site(
    user_id: str,
    request: SiteRequest,
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    return Response.success(await preference_service.dislike_site(user_id, request.url))


@router.post(
    "/{user_id}/favorites",
    response_model=Response[UserPreference],
    summary="收藏站点",
)
async def add_favorite(
    user_id: str,
    request: SiteRequest,
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    return Response.success(await preference_service.add_favorite(user_id, request.url))


@router.delete(
    "/{user_id}/favorites",
    response_model=Response[UserPreference],
    summary="取消收藏站点",
)
async def remove_favorite(
    user_id: str,
    url: str,
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    return Response.success(await preference_service.remove_favorite(user_id, url))
