"""搜索联想词"""

from typing import List

MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 8

_TECH_TERMS = (
    "portfolio",
    "dashboard",
    "landing page",
    "blog",
    "e-commerce",
    "saas",
    "template",
    "starter kit",
    "website",
    "web app",
    "react",
    "nextjs",
    "tailwind",
    "typescript",
    "api",
    "ui kit",
    "design system",
    "component library",
    "admin panel",
)

_PLATFORM_TERMS = (
    "vercel app",
    "github project",
    "netlify site",
    "railway deployment",
    "replit project",
    "framer website",
    "lovable app",
)


def fallback_suggestions(query: str) -> List[str]:
    """联想服务不可用时，根据常见的站点类型与平台词生成联想词"""
    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    q = query.lower()
    candidates: List[str] = []
    for term in _TECH_TERMS:
        if term.startswith(q) or term[:3] in q:
            candidates.append(term)
        if len(candidates) < MAX_SUGGESTIONS:
            candidates.append(f"{query} {term}")

    candidates.extend(term for term in _PLATFORM_TERMS if q in term)

    # dict保持插入顺序，用于去重
    unique = [item for item in dict.fromkeys(candidates) if item != query]
    return unique[:MAX_SUGGESTIONS]
