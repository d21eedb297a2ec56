from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, PrivateAttr


class NoiseWords(BaseModel):
    """Words excluded from indexing. Stored as given, matched case-insensitively."""

    model_config = ConfigDict(frozen=True)

    words: frozenset[str] = frozenset()

    _folded: frozenset[str] = PrivateAttr(default=frozenset())

    def model_post_init(self, __context: object) -> None:
        self._folded = frozenset(w.casefold() for w in self.words)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "NoiseWords":
        return cls(words=frozenset(tokens))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.casefold() in self._folded

    def __len__(self) -> int:
        return len(self.words)
