"""Fold per-document keyword counts into the keyword index."""

from littlesearch.data_models.doc_keywords import DocKeywords
from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence into place so the list is descending by frequency.

    occurrences[:-1] must already be in descending order. The slot is found by
    binary search over that prefix; the list is updated in place.

    Returns the midpoint indexes probed by the search, in order, or None for a
    single-element list. A search that lands on an equal frequency stops there
    and the occurrence goes in at that midpoint, ahead of the equal one.
    Otherwise it goes where the bounds crossed, so a search that ends probing
    index 0 puts it at 1 if below the head and at 0 if above.
    """
    if not occurrences:
        raise ValueError("Cannot insert into an empty occurrence list")
    if len(occurrences) == 1:
        return None

    pending = occurrences[-1]
    lower, upper = 0, len(occurrences) - 2
    midpoints: list[int] = []
    target = None
    while lower <= upper:
        middle = (lower + upper) // 2
        midpoints.append(middle)
        frequency = occurrences[middle].frequency
        if pending.frequency > frequency:
            upper = middle - 1
        elif pending.frequency < frequency:
            lower = middle + 1
        else:
            target = middle
            break
    if target is None:
        target = lower

    occurrences.insert(target, pending)
    occurrences.pop()
    return midpoints


def merge_keywords(index: KeywordIndex, doc_keywords: DocKeywords) -> None:
    """Add one document's occurrences to the index, keeping every list sorted."""
    entries = index.writable_entries()
    for keyword, occurrence in doc_keywords.occurrences().items():
        occurrences = entries.get(keyword)
        if occurrences is None:
            entries[keyword] = [occurrence]
            continue
        occurrences.append(occurrence)
        insert_last_occurrence(occurrences)
