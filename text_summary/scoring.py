from __future__ import annotations
from typing import List
import logging
import math
from .datatypes import Document, Ranking, TermVector
from .features import compute_idf, cosine, document_vector, sentence_vectors

logger = logging.getLogger(__name__)


def _ordered(value: float) -> float:
    # total order over similarities: NaN counts as no similarity
    return 0.0 if math.isnan(value) else value


def select_core(similarities: List[float]) -> int:
    """Index of the highest similarity; the lowest index wins ties."""
    return max(range(len(similarities)), key=lambda i: _ordered(similarities[i]))


def rank_by_similarity(similarities: List[float]) -> List[int]:
    """Indices by descending similarity, ties in document order."""
    return sorted(range(len(similarities)), key=lambda i: (-_ordered(similarities[i]), i))


def rank_sentences(doc: Document) -> Ranking:
    """
    Rank the sentences of a non-empty document.

    The "core" sentence is the one whose tf-idf vector is closest (cosine)
    to the vector of the whole document; every sentence is then ranked by
    its similarity to the core sentence.
    """
    if not doc.sentences:
        raise ValueError("can not rank an empty document")

    idf = compute_idf(doc)
    vectors = sentence_vectors(doc, idf)
    overall = document_vector(doc, idf)

    doc_sims = [cosine(v, overall) for v in vectors]
    core = select_core(doc_sims)
    best_match: TermVector = vectors[core]
    core_sims = [cosine(v, best_match) for v in vectors]

    logger.debug("ranked %d sentences over %d terms, core sentence %d", len(vectors), len(idf), core)
    return Ranking(
        document=doc,
        idf=idf,
        document_vector=overall,
        core=core,
        document_similarity=doc_sims,
        core_similarity=core_sims,
        order=rank_by_similarity(core_sims),
    )
