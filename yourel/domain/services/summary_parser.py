"""AI摘要文本解析

LLM输出是自由文本，这里只做尽力而为的结构化：识别标题行拆分段落，
识别不到任何标题时原样返回整段文本，由展示层直接渲染。
"""

import re
from typing import List, Optional, Tuple

from yourel.domain.models.summary import SummarySection

# **Overview** / **Sources:** a.com, b.com
_BOLD_HEADING = re.compile(r"^\*\*(?P<title>[^*]+?)\*\*\s*(?P<rest>.*)$")
# ## Overview
_HASH_HEADING = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*#*$")
_BULLET = re.compile(r"^(?:[-*•]|\d+[.)])\s+")


def _match_heading(line: str) -> Optional[Tuple[str, str]]:
    """判断一行是否为标题，返回(标题, 同行剩余内容)"""
    match = _HASH_HEADING.match(line)
    if match:
        return match.group("title").strip().rstrip(":").strip(), ""

    match = _BOLD_HEADING.match(line)
    if match:
        title = match.group("title").strip()
        rest = match.group("rest").strip()
        # 粗体后面还有正文时，只有以冒号结尾的粗体才算标题
        if rest and not title.endswith(":") and not rest.startswith(":"):
            return None
        return title.rstrip(":").strip(), rest.lstrip(":").strip()

    return None


def parse_summary(text: Optional[str]) -> List[SummarySection]:
    """将AI摘要拆分为若干段落，无法识别结构时返回只含原文的单个段落"""
    if not text or not text.strip():
        return []

    preamble: List[str] = []
    parsed: List[Tuple[str, List[str]]] = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        heading = _match_heading(line)
        if heading is not None:
            title, rest = heading
            parsed.append((title, [rest] if rest else []))
            continue

        content = _BULLET.sub("", line)
        if parsed:
            parsed[-1][1].append(content)
        else:
            preamble.append(content)

    if not parsed:
        return [SummarySection(title=None, lines=[text.strip()])]

    sections = [SummarySection(title=title, lines=lines) for title, lines in parsed]
    if preamble:
        sections.insert(0, SummarySection(title=None, lines=preamble))
    return sections
