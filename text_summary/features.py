from __future__ import annotations
from typing import Iterable, List
from collections import Counter
import math
from .datatypes import Document, IdfTable, TermVector

def compute_idf(doc: Document) -> IdfTable:
    """
    IDF(t) = log2(N / DF(t))
      - N: number of sentences, each sentence counts as one 'document'
      - DF: number of sentences containing t at least once
    A term present in every sentence gets weight 0.
    """
    n = len(doc.sentences)
    df = Counter()
    for s in doc.sentences:
        df.update(set(s.terms))
    return {term: math.log2(n / count) for term, count in df.items()}


def compute_tfidf_vector(terms: Iterable[str], idf: IdfTable) -> TermVector:
    """TF-IDF(t) = count(t) * IDF(t), scaled to unit length.

    Terms missing from `idf` weigh 0. If every weight is 0 the result is the
    empty vector rather than a division by zero.
    """
    weights = {t: tf * idf.get(t, 0.0) for t, tf in Counter(terms).items()}
    norm = math.sqrt(sum(w * w for w in weights.values()))
    if norm == 0.0:
        return {}
    return {t: w / norm for t, w in weights.items() if w}


def sentence_vectors(doc: Document, idf: IdfTable) -> List[TermVector]:
    """Per-sentence tf-idf vectors; also stored on each Sentence."""
    for s in doc.sentences:
        s.tf_idf_vector = compute_tfidf_vector(s.terms, idf)
    return [s.tf_idf_vector for s in doc.sentences]


def document_vector(doc: Document, idf: IdfTable) -> TermVector:
    """tf-idf vector of all sentences taken as a single group."""
    return compute_tfidf_vector((t for s in doc.sentences for t in s.terms), idf)


def cosine(v1: TermVector, v2: TermVector) -> float:
    """Cosine similarity of two unit vectors, i.e. their dot product."""
    if len(v2) < len(v1):
        v1, v2 = v2, v1
    return sum(w * v2[t] for t, w in v1.items() if t in v2)
