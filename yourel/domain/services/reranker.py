from collections import Counter
from typing import Iterable, List, Mapping, Tuple

from yourel.domain.models.preference import UserPreference
from yourel.domain.models.search import SearchResult


def aggregate_preference_counts(
    records: Iterable[UserPreference],
) -> Tuple[Counter, Counter]:
    """汇总所有用户偏好记录，返回(点赞计数, 点踩计数)，均以URL为键"""
    likes: Counter = Counter()
    dislikes: Counter = Counter()
    for record in records:
        likes.update(set(record.liked_sites))
        dislikes.update(set(record.disliked_sites))
    return likes, dislikes


def rerank(
    results: List[SearchResult],
    like_counts: Mapping[str, int],
    dislike_counts: Mapping[str, int],
) -> List[SearchResult]:
    """按(点赞数-点踩数)降序重排结果

    sorted是稳定排序，得分相同的条目保持后端返回的相关性顺序。
    """
    return sorted(
        results,
        key=lambda result: -(
            like_counts.get(result.link, 0) - dislike_counts.get(result.link, 0)
        ),
    )
