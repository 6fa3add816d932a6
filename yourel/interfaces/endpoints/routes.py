from fastapi import APIRouter

from . import bundle_routes, preference_routes, search_routes


def create_api_routes() -> APIRouter:
    """创建API路由，涵盖整个项目的所有路由管理"""

    api_router = APIRouter()

    # 搜索会话路由
    api_router.include_router(search_routes.router)

    # 用户偏好与站点集合路由
    api_router.include_router(preference_routes.router)
    api_router.include_router(bundle_routes.router)

    return api_router


router = create_api_routes()
