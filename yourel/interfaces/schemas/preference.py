from pydantic import BaseModel, Field


class SiteRequest(BaseModel):
    """站点操作请求结构(点赞/点踩/收藏)"""

    url: str = Field(..., min_length=1)  # 站点URL
