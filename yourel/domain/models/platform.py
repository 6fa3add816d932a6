"""托管平台领域模型"""

import re
from enum import Enum
from typing import Dict, Optional
from urllib.parse import urlparse


class Platform(str, Enum):
    """可用于搜索过滤的托管平台枚举"""

    ALL = "all"
    VERCEL = "vercel"
    GITHUB = "github"
    NETLIFY = "netlify"
    RAILWAY = "railway"
    ONRENDER = "onrender"
    BUBBLE = "bubble"
    FRAMER = "framer"
    REPLIT = "replit"
    BOLT = "bolt"
    FLY = "fly"
    LOVABLE = "lovable"

    @property
    def label(self) -> str:
        return PLATFORM_LABELS[self]

    @property
    def domain(self) -> Optional[str]:
        """平台站点的托管域名，ALL没有对应域名"""
        return PLATFORM_DOMAINS.get(self)

    @property
    def site_filter(self) -> Optional[str]:
        return f"site:{self.domain}" if self.domain else None


PLATFORM_LABELS: Dict[Platform, str] = {
    Platform.ALL: "All",
    Platform.VERCEL: "Vercel",
    Platform.GITHUB: "GitHub",
    Platform.NETLIFY: "Netlify",
    Platform.RAILWAY: "Railway",
    Platform.ONRENDER: "OnRender",
    Platform.BUBBLE: "Bubble",
    Platform.FRAMER: "Framer",
    Platform.REPLIT: "Replit",
    Platform.BOLT: "Bolt",
    Platform.FLY: "Fly.io",
    Platform.LOVABLE: "Lovable",
}

PLATFORM_DOMAINS: Dict[Platform, str] = {
    Platform.VERCEL: "vercel.app",
    Platform.GITHUB: "github.io",
    Platform.NETLIFY: "netlify.app",
    Platform.RAILWAY: "railway.app",
    Platform.ONRENDER: "onrender.com",
    Platform.BUBBLE: "bubbleapps.io",
    Platform.FRAMER: "framer.website",
    Platform.REPLIT: "replit.app",
    Platform.BOLT: "bolt.host",
    Platform.FLY: "fly.dev",
    Platform.LOVABLE: "lovable.app",
}

# 无法识别平台时使用的兜底取值
UNKNOWN_PLATFORM = "web"

_HOST_PATTERNS = {
    platform: re.compile(rf"(^|\.){re.escape(domain)}$", re.I)
    for platform, domain in PLATFORM_DOMAINS.items()
}


def detect_platform(url: str) -> str:
    """根据URL的主机名识别托管平台，未命中时返回UNKNOWN_PLATFORM"""
    host = urlparse(url).hostname or ""
    for platform, pattern in _HOST_PATTERNS.items():
        if pattern.search(host):
            return platform.value
    return UNKNOWN_PLATFORM
