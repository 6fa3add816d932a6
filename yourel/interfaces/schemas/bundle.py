from typing import List, Optional

from pydantic import BaseModel, Field

from yourel.domain.models.bundle import Bundle, BundleWebsite


class CreateBundleRequest(BaseModel):
    """创建站点集合请求结构"""

    name: str
    description: Optional[str] = None
    websites: List[BundleWebsite] = Field(default_factory=list)


class BundleResponse(BaseModel):
    """站点集合响应结构，附带解析后的site过滤表达式"""

    bundle: Bundle
    site_filters: Optional[str] = None

    @classmethod
    def from_bundle(cls, bundle: Bundle) -> "BundleResponse":
        return cls(bundle=bundle, site_filters=bundle.site_filters())


class ListBundleResponse(BaseModel):
    """站点集合列表响应结构"""

    bundles: List[Bundle] = Field(default_factory=list)
