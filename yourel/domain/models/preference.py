"""用户站点偏好领域模型"""

from typing import List

from pydantic import BaseModel, Field


class UserPreference(BaseModel):
    """用户偏好记录

    记录每个用户收藏、点赞、点踩的站点URL，同一URL不会同时出现在点赞与点踩中
    """

    user_id: str
    favorites: List[str] = Field(default_factory=list)
    liked_sites: List[str] = Field(default_factory=list)
    disliked_sites: List[str] = Field(default_factory=list)

    def like(self, url: str) -> "UserPreference":
        return self.model_copy(
            update={
                "liked_sites": _append_unique(self.liked_sites, url),
                "disliked_sites": [site for site in self.disliked_sites if site != url],
            }
        )

    def dislike(self, url: str) -> "UserPreference":
        return self.model_copy(
            update={
                "disliked_sites": _append_unique(self.disliked_sites, url),
                "liked_sites": [site for site in self.liked_sites if site != url],
            }
        )

    def add_favorite(self, url: str) -> "UserPreference":
        return self.model_copy(
            update={"favorites": _append_unique(self.favorites, url)}
        )

    def remove_favorite(self, url: str) -> "UserPreference":
        return self.model_copy(
            update={"favorites": [site for site in self.favorites if site != url]}
        )


def _append_unique(items: List[str], url: str) -> List[str]:
    """追加URL到末尾，已存在时先移除旧位置"""
    return [item for item in items if item != url] + [url]
