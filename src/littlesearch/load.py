"""Scan documents into per-document keyword counts.

Also holds the file access used to build an index: whitespace-delimited token
streams for noise-word lists, document lists and the documents themselves.
"""

from collections.abc import Iterable, Iterator
import logging
from pathlib import Path
from typing import TextIO

from littlesearch.data_models.doc_keywords import DocKeywords
from littlesearch.data_models.noise_words import NoiseWords
from littlesearch.keywords import get_keyword

logger = logging.getLogger(__name__)


def read_tokens(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text file, line by line.

    Undecodable bytes come through as U+FFFD, which no keyword can contain.

    The file is opened eagerly so a missing file raises FileNotFoundError at
    the call, not on first iteration.
    """
    f = path.open(encoding=encoding, errors="replace")
    return _iter_tokens(f)


def _iter_tokens(f: TextIO) -> Iterator[str]:
    with f:
        for line in f:
            yield from line.split()


def load_noise_words(path: Path) -> NoiseWords:
    noise_words = NoiseWords.from_tokens(read_tokens(path))
    logger.info("Loaded %d noise words from %s", len(noise_words), path)
    return noise_words


def load_doc_list(path: Path) -> list[str]:
    return list(read_tokens(path))


def resolve_doc(doc_id: str, base_dir: Path | None = None) -> Path:
    """Find a listed document, next to the document list first, then as given."""
    candidates = []
    if base_dir is not None:
        candidates.append(base_dir / doc_id)
    candidates.append(Path(doc_id))
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"Document not found: {doc_id!r}")


def load_keywords(
    doc_id: str, tokens: Iterable[str], noise_words: NoiseWords
) -> DocKeywords:
    """Count the keywords in one document's raw tokens."""
    doc_keywords = DocKeywords(doc_id)
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is not None:
            doc_keywords.add(keyword)
    return doc_keywords


def load_doc_file(
    doc_id: str, noise_words: NoiseWords, base_dir: Path | None = None
) -> DocKeywords:
    """Load keywords from the file a document id names.

    Raises FileNotFoundError if the document cannot be located.
    """
    path = resolve_doc(doc_id, base_dir)
    return load_keywords(doc_id, read_tokens(path), noise_words)
