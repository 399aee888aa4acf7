from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import logging
import math
import numbers

from .datatypes import Ranking
from .errors import InputTooLarge, InvalidRatio, InvalidSentenceCount
from .languages import Language
from .preprocessing import TermNormalizer, preprocess_text
from .scoring import rank_sentences

logger = logging.getLogger(__name__)

MAX_DOCUMENT_BYTES = 2**32 - 1


def utf8_length(text: str) -> int:
    """Byte length of `text` in UTF-8, refusing documents over the limit."""
    if len(text) > MAX_DOCUMENT_BYTES:
        raise InputTooLarge(len(text), MAX_DOCUMENT_BYTES)
    size = len(text.encode("utf-8", "surrogatepass"))
    if size > MAX_DOCUMENT_BYTES:
        raise InputTooLarge(size, MAX_DOCUMENT_BYTES)
    return size


def check_ratio(ratio: float) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, numbers.Real):
        raise InvalidRatio(ratio)
    # NaN fails both comparisons
    if not 0.0 <= ratio <= 1.0:
        raise InvalidRatio(ratio)
    return float(ratio)


def check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidSentenceCount(n)
    return int(n)


def select_by_count(ranking: Ranking, n: int) -> List[int]:
    return ranking.order[:n]


def select_by_ratio(ranking: Ranking, ratio: float, text_bytes: int) -> List[int]:
    """
    Take ranked sentences until their length passes `ratio` of the text.

    Each sentence costs its UTF-8 length without trailing whitespace, plus
    one for a separator. The sentence that crosses the target is kept, and
    at least one sentence is always returned. A target covering the whole
    text keeps every sentence, even where sentences share no separator.
    """
    target = math.floor(ratio * text_bytes + 0.5)
    if target >= text_bytes:
        return list(ranking.order)
    total = 0
    selected = []
    for i in ranking.order:
        selected.append(i)
        total += len(ranking.sentences[i].text.rstrip().encode("utf-8", "surrogatepass")) + 1
        if total > target:
            break
    return selected


def assemble(ranking: Ranking, indices: List[int]) -> List[str]:
    """Sentence texts for `indices`, restored to document order."""
    return [ranking.sentences[i].text for i in sorted(indices)]


@dataclass(frozen=True)
class Summarizer:
    """
    Document summarizer.

    Extracts the sentences that best summarize a document: a "core" sentence
    is chosen by tf-idf cosine similarity to the document at large, and the
    sentences closest to that core sentence make up the summary.

    Instances hold no mutable state and can be shared between threads.

    Example::

        summarizer = Summarizer.new(Language.ENGLISH)
        for sentence in summarizer.summarize_sentences("See Spot. See Spot run. Run Spot, run!", 2):
            print(sentence)
    """
    language: Optional[Language] = None
    normalizer: TermNormalizer = field(default_factory=TermNormalizer.language_agnostic)

    @classmethod
    def new(cls, language: Language) -> "Summarizer":
        if not isinstance(language, Language):
            language = Language.from_name(language)
        return cls(language=language, normalizer=TermNormalizer.for_language(language))

    @classmethod
    def language_agnostic(cls) -> "Summarizer":
        """A summarizer without stemming or stopwords."""
        return cls()

    def rank(self, text: str) -> Optional[Ranking]:
        """Run the ranking pipeline; None when `text` has no sentences."""
        utf8_length(text)
        return self._rank(text)

    def _rank(self, text: str) -> Optional[Ranking]:
        doc = preprocess_text(text, self.normalizer)
        if not doc.sentences:
            return None
        return rank_sentences(doc)

    def summarize_ratio(self, text: str, ratio: float) -> List[str]:
        """
        Provide a summary for the text, reduced by a given ratio.

        The ratio applies to the UTF-8 length of the text. The summary never
        comes out empty for a non-empty text: it is rounded up to 1 sentence.

        Raises InvalidRatio if `ratio` is not in 0.0..=1.0 and InputTooLarge
        if the text is longer than 4 GiB.
        """
        ratio = check_ratio(ratio)
        text_bytes = utf8_length(text)
        ranking = self._rank(text)
        if ranking is None:
            return []
        selected = select_by_ratio(ranking, ratio, text_bytes)
        logger.debug("ratio %.3f kept %d of %d sentences", ratio, len(selected), len(ranking.order))
        return assemble(ranking, selected)

    def summarize_sentences(self, text: str, n: int) -> List[str]:
        """
        Provide an `n` sentence summary for the text.

        If the text is not longer than `n` sentences, all of it is returned.
        """
        n = check_count(n)
        ranking = self.rank(text)
        if ranking is None:
            return []
        return assemble(ranking, select_by_count(ranking, n))


def summarize(text: str,
              language: Optional[Language] = Language.ENGLISH,
              ratio: Optional[float] = None,
              sentences: Optional[int] = None) -> List[str]:
    """One-shot helper: summarize by `sentences` if given, else by `ratio` (default 0.2)."""
    summarizer = Summarizer.new(language) if language is not None else Summarizer.language_agnostic()
    if sentences is not None:
        return summarizer.summarize_sentences(text, sentences)
    return summarizer.summarize_ratio(text, 0.2 if ratio is None else ratio)
