"""In-memory keyword index: keyword → occurrences in descending frequency."""

from collections.abc import Iterator

import polars as pl

from littlesearch.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


class IndexFrozenError(RuntimeError):
    pass


class KeywordIndex:
    def __init__(self) -> None:
        self._entries: dict[str, list[Occurrence]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """End the build phase. Readers may share the index from here on."""
        self._frozen = True

    def writable_entries(self) -> dict[str, list[Occurrence]]:
        """The underlying keyword → list mapping, for the merger only."""
        if self._frozen:
            raise IndexFrozenError("Index is frozen; build a new one to add documents")
        return self._entries

    def occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        return tuple(self._entries.get(keyword, ()))

    def keywords(self) -> list[str]:
        return sorted(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def check_invariants(self) -> None:
        """Raise ValueError if any list is out of order or repeats a document."""
        for keyword, occs in self._entries.items():
            for prev, cur in zip(occs, occs[1:]):
                if prev.frequency < cur.frequency:
                    raise ValueError(
                        f"Occurrences for {keyword!r} not in descending order: "
                        f"{prev} before {cur}"
                    )
            doc_ids = [o.doc_id for o in occs]
            if len(set(doc_ids)) != len(doc_ids):
                raise ValueError(f"Duplicate document in occurrences for {keyword!r}")

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.doc_id, occ.frequency, rank)
            for keyword, occs in self._entries.items()
            for rank, occ in enumerate(occs)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
