from typing import List, Optional

from pydantic import BaseModel, Field


class SummarySection(BaseModel):
    """AI摘要中的一个展示段落"""

    title: Optional[str] = None  # 段落标题，无法识别结构时为None
    lines: List[str] = Field(default_factory=list)  # 段落内容(已去除列表符号)
