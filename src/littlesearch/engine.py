"""Build a keyword index from files on disk and search it."""

import logging
from pathlib import Path

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.noise_words import NoiseWords
from littlesearch.load import load_doc_file, load_doc_list, load_noise_words
from littlesearch.merge import merge_keywords
from littlesearch.search import TOP_K, top_k_search

logger = logging.getLogger(__name__)


class SearchEngine:
    """Noise words plus the keyword index built from one set of documents.

    Build once with make_index, then query with top5search. Each engine owns
    its own state, so several can live side by side.
    """

    def __init__(self) -> None:
        self.noise_words = NoiseWords()
        self.index = KeywordIndex()
        self.complete = False

    def make_index(self, docs_file: Path | str, noise_words_file: Path | str) -> None:
        """Index every document named in docs_file.

        If a source file cannot be opened the build stops, the error is logged
        and `complete` stays False: the index is empty when either list file is
        unreadable, and holds the documents read so far when a document is.
        A document listed more than once is indexed the first time only.
        """
        if self.index.frozen:
            raise RuntimeError("make_index can only be called once per engine")
        docs_file = Path(docs_file)
        try:
            self.noise_words = load_noise_words(Path(noise_words_file))
            doc_ids = load_doc_list(docs_file)
            indexed: set[str] = set()
            for doc_id in doc_ids:
                if doc_id in indexed:
                    logger.warning("Skipping repeated document %s", doc_id)
                    continue
                indexed.add(doc_id)
                doc_keywords = load_doc_file(
                    doc_id, self.noise_words, base_dir=docs_file.parent
                )
                merge_keywords(self.index, doc_keywords)
                logger.info("Indexed %s (%d keywords)", doc_id, len(doc_keywords))
        except OSError as exc:
            logger.error("Index build stopped: %s", exc)
            return
        finally:
            self.index.freeze()
        self.complete = True
        logger.info(
            "Indexed %d documents, %d unique keywords", len(indexed), len(self.index)
        )

    def top5search(self, keyword1: str, keyword2: str) -> list[str] | None:
        return top_k_search(self.index, keyword1, keyword2, k=TOP_K)


def build_index(docs_file: Path | str, noise_words_file: Path | str) -> KeywordIndex:
    """Build and return a frozen index; empty if either list file is missing."""
    engine = SearchEngine()
    engine.make_index(docs_file, noise_words_file)
    return engine.index
