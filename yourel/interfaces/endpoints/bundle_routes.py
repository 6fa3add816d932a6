from fastapi import APIRouter, Depends

from yourel.application.services.bundle_service import BundleService
from yourel.interfaces.schemas import Response
from yourel.interfaces.schemas.bundle import (
    BundleResponse,
    CreateBundleRequest,
    ListBundleResponse,
)
from yourel.interfaces.service_dependencies import get_bundle_service

router = APIRouter(prefix="/bundles", tags=["集合模块"])


@router.get(
    "",
    response_model=Response[ListBundleResponse],
    summary="获取站点集合列表",
)
async def list_bundles(
    bundle_service: BundleService = Depends(get_bundle_service),
) -> Response:
    bundles = await bundle_service.list_bundles()
    return Response.success(ListBundleResponse(bundles=bundles))


@router.post(
    "",
    response_model=Response[BundleResponse],
    summary="创建站点集合",
)
async def create_bundle(
    request: CreateBundleRequest,
    bundle_service: BundleService = Depends(get_bundle_service),
) -> Response:
    bundle = await bundle_service.create_bundle(
        name=request.name,
        websites=request.websites,
        description=request.description,
    )
    return Response.success(BundleResponse.from_bundle(bundle), msg="创建站点集合成功")


@router.get(
    "/{bundle_id}",
    response_model=Response[BundleResponse],
    summary="获取站点集合详情",
)
async def get_bundle(
    bundle_id: str,
    bundle_service: BundleService = Depends(get_bundle_service),
) -> Response:
    bundle = await bundle_service.get_bundle(bundle_id)
    return Response.success(BundleResponse.from_bundle(bundle))


@router.delete(
    "/{bundle_id}",
    response_model=Response,
    summary="删除站点集合",
)
async def delete_bundle(
    bundle_id: str,
    bundle_service: BundleService = Depends(get_bundle_service),
) -> Response:
    await bundle_service.delete_bundle(bundle_id)
    return Response.success(msg="删除站点集合成功")
