from collections.abc import Iterator

from littlesearch.data_models.occurrence import Occurrence


class DocKeywords:
    """Keyword counts for a single document, built up while it is scanned."""

    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        self._counts: dict[str, int] = {}

    def add(self, keyword: str) -> None:
        self._counts[keyword] = self._counts.get(keyword, 0) + 1

    def __getitem__(self, keyword: str) -> Occurrence:
        return Occurrence(doc_id=self.doc_id, frequency=self._counts[keyword])

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def occurrences(self) -> dict[str, Occurrence]:
        return {kw: self[kw] for kw in self._counts}
