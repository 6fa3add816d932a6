from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用程序的配置设置，继承自Pydantic的BaseSettings。从.env或者环境变量中加载配置。"""

    # 项目基础配置
    env: str = "development"  # 应用环境，默认为'development'
    log_level: str = "INFO"  # 日志级别，默认为'INFO'

    # Serverless函数(web-search/ai-search)配置
    functions_base_url: str = "http://localhost:54321/functions/v1"
    functions_api_key: Optional[str] = None  # 匿名key，同时作为Bearer与apikey请求头
    http_timeout_seconds: float = 60

    # 搜索分页与缓存配置
    search_page_size: int = 20  # 每页展示的结果条数
    search_max_results: int = 100  # 每个缓存键一次性拉取的最大结果数
    search_timeout_seconds: float = 15  # 主搜索请求超时时间
    ai_summary_timeout_seconds: float = 30  # AI摘要请求超时时间

    # 本地数据文件配置
    preferences_filepath: str = "data/preferences.json"
    bundles_filepath: str = "data/bundles.json"

    # 使用pydantic v2的写法来完成环境变量信息的告知
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """获取应用程序的配置设置实例，使用lru_cache进行缓存以提高性能。

    Returns:
        Settings: 应用程序的配置设置实例。
    """
    return Settings()
