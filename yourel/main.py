import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from yourel.core.config import get_settings
from yourel.infrastructure.logging import setup_logging
from yourel.interfaces.endpoints.routes import router as api_router
from yourel.interfaces.errors.exception_handlers import register_exception_handlers
from yourel.interfaces.service_dependencies import get_search_session_manager

# 加载配置信息
settings = get_settings()

# 初始化日志记录
setup_logging()
logger = logging.getLogger()

logger.info("应用程序启动中...")

# 定义FastApi路由tags标签
openapi_tags = [
    {
        "name": "搜索模块",
        "description": "包含 **搜索会话/翻页/平台过滤** 等API接口，结果在会话内按缓存键缓存并在本地分页。",
    },
    {
        "name": "偏好模块",
        "description": "用户收藏、点赞与点踩，偏好模式下用于结果重排。",
    },
    {
        "name": "集合模块",
        "description": "用户自定义的站点集合，用于限定搜索范围。",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """创建FastAPI应用生命周期上下文管理器"""
    logger.info("Yourel应用正在初始化, 搜索函数地址: %s", settings.functions_base_url)

    try:
        yield
    finally:
        try:
            # 关闭所有搜索会话，取消未完成的AI摘要任务
            logger.info("Yourel应用正在关闭")
            await asyncio.wait_for(get_search_session_manager().shutdown(), timeout=10.0)
            logger.info("搜索会话全部关闭")
        except asyncio.TimeoutError:
            logger.warning("搜索会话关闭超时, 强制关闭")
        logger.info("Yourel应用关闭成功")


app = FastAPI(
    title="Yourel",
    description="Yourel是一个面向开发者托管平台(Vercel/Netlify/GitHub Pages等)的站点搜索服务，支持收藏、站点集合与AI摘要",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    version="1.0.0",
)

# 配置CORS中间件，解决跨域问题
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 允许所有来源
    allow_credentials=True,
    allow_methods=["*"],  # 允许所有方法
    allow_headers=["*"],  # 允许所有头部
)

# 注册全局异常处理器
register_exception_handlers(app)

app.include_router(api_router, prefix="/api")

logger.info("FastAPI应用程序实例已创建。")
