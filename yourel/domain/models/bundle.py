"""站点集合(Bundle)领域模型"""

from datetime import datetime
from typing import List, Optional
from urllib.parse import urlparse
from uuid import uuid4

from pydantic import BaseModel, Field


class BundleWebsite(BaseModel):
    """集合中的单个站点"""

    url: str  # 站点域名或URL
    title: Optional[str] = None

    @property
    def site(self) -> str:
        """提取用于site:过滤的主机部分，兼容只填写域名的情况"""
        value = self.url.strip()
        if "://" in value:
            parsed = urlparse(value)
            return f"{parsed.netloc}{parsed.path.rstrip('/')}"
        return value.rstrip("/")


class Bundle(BaseModel):
    """用户自定义的站点集合，用于限定搜索范围"""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    description: Optional[str] = None
    websites: List[BundleWebsite] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def site_filters(self) -> Optional[str]:
        """将集合转换成 site:a OR site:b 形式的过滤表达式，空集合返回None"""
        sites = [website.site for website in self.websites if website.site]
        if not sites:
            return None
        return " OR ".join(f"site:{site}" for site in sites)
