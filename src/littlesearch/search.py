"""Bounded two-keyword OR search over a built keyword index."""

from collections.abc import Sequence
import logging

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence

logger = logging.getLogger(__name__)

TOP_K = 5


def merge_ranked(
    first: Sequence[Occurrence], second: Sequence[Occurrence], k: int = TOP_K
) -> list[str]:
    """Merge two descending occurrence lists into at most k distinct doc ids.

    The higher frequency head goes next; on a tie the first list wins.
    A document already taken is skipped.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    result: list[str] = []
    seen: set[str] = set()
    i = j = 0
    while len(result) < k and (i < len(first) or j < len(second)):
        if j >= len(second) or (
            i < len(first) and first[i].frequency >= second[j].frequency
        ):
            occ = first[i]
            i += 1
        else:
            occ = second[j]
            j += 1
        if occ.doc_id not in seen:
            seen.add(occ.doc_id)
            result.append(occ.doc_id)
    return result


def top_k_search(
    index: KeywordIndex, keyword1: str, keyword2: str, k: int = TOP_K
) -> list[str] | None:
    """Documents containing keyword1 or keyword2, most frequent first.

    Keywords are lowercased but otherwise taken as given. Returns None when
    neither keyword matches any document.
    """
    result = merge_ranked(
        index.occurrences(keyword1.lower()), index.occurrences(keyword2.lower()), k
    )
    logger.debug("%s OR %s: %s", keyword1, keyword2, ", ".join(result))
    return result or None
