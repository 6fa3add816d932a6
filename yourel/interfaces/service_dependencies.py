import logging
from functools import lru_cache

from yourel.application.services.bundle_service import BundleService
from yourel.application.services.preference_service import PreferenceService
from yourel.application.services.search_service import SearchService
from yourel.application.services.search_session_manager import SearchSessionManager
from yourel.core.config import get_settings
from yourel.infrastructure.external.search.functions_search import FunctionsSearchApi
from yourel.infrastructure.repositories.file_bundle_repository import (
    FileBundleRepository,
)
from yourel.infrastructure.repositories.file_preference_repository import (
    FilePreferenceRepository,
)

logger = logging.getLogger(__name__)


@lru_cache()
def get_preference_service() -> PreferenceService:
    """获取用户偏好服务"""
    settings = get_settings()
    logger.info("加载获取PreferenceService")
    return PreferenceService(
        preference_repository=FilePreferenceRepository(settings.preferences_filepath)
    )


@lru_cache()
def get_bundle_service() -> BundleService:
    """获取站点集合服务"""
    settings = get_settings()
    logger.info("加载获取BundleService")
    return BundleService(bundle_repository=FileBundleRepository(settings.bundles_filepath))


@lru_cache()
def get_search_api() -> FunctionsSearchApi:
    """获取搜索函数API客户端"""
    settings = get_settings()
    return FunctionsSearchApi(
        base_url=settings.functions_base_url,
        api_key=settings.functions_api_key,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_search_session_manager() -> SearchSessionManager:
    """获取搜索会话管理器，会话状态保存在进程内，因此全局只有一个实例"""
    settings = get_settings()
    search_api = get_search_api()
    preference_service = get_preference_service()

    def session_factory() -> SearchService:
        return SearchService(
            search_api=search_api,
            preference_counts=preference_service.aggregate_counts,
            page_size=settings.search_page_size,
            max_results=settings.search_max_results,
            search_timeout=settings.search_timeout_seconds,
            summary_timeout=settings.ai_summary_timeout_seconds,
        )

    logger.info("加载获取SearchSessionManager")
    return SearchSessionManager(session_factory=session_factory)
