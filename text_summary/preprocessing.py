from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional
import logging

import snowballstemmer

from .datatypes import Document, Sentence
from .languages import LANGUAGE_PROFILES, Language, check_stemmer, load_stopwords
from .segmentation import iter_words, split_sentences

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TermNormalizer:
    """Maps raw words to comparison terms for one language.

    `stemmer` names a Snowball algorithm, or is None for no stemming.
    Stopwords are stored case-folded.
    """
    stemmer: Optional[str] = None
    stopwords: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def for_language(cls, language: Language) -> "TermNormalizer":
        profile = LANGUAGE_PROFILES[language]
        return cls(
            stemmer=check_stemmer(profile.stemmer),
            stopwords=load_stopwords(profile.stopwords),
        )

    @classmethod
    def language_agnostic(cls) -> "TermNormalizer":
        return cls()

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self.stopwords

    def normalize(self, word: str) -> str:
        """Normalize a single word.

        Builds a new stemmer per call; use `stem_function` for many words.
        """
        return self.stem_function()(word)

    def stem_function(self) -> Callable[[str], str]:
        """A fresh, memoizing ``word -> term`` function.

        Snowball stemmer objects keep per-word state, so every summarization
        call builds its own instead of sharing one across threads.
        """
        if self.stemmer is None:
            return str.lower
        stemmer = snowballstemmer.stemmer(self.stemmer)
        cache: Dict[str, str] = {}

        def normalize(word: str) -> str:
            term = cache.get(word)
            if term is None:
                term = cache[word] = stemmer.stemWord(word).lower()
            return term

        return normalize


def tokenize(text: str, is_stopword: Callable[[str], bool], normalize: Callable[[str], str]) -> List[str]:
    """Normalized, non-stopword terms of `text` in reading order."""
    return [normalize(w) for w in iter_words(text) if not is_stopword(w)]


def preprocess_text(text: str, normalizer: Optional[TermNormalizer] = None) -> Document:
    normalizer = normalizer or TermNormalizer()
    normalize = normalizer.stem_function()
    sentences = []
    for i, (start, end) in enumerate(split_sentences(text)):
        s = text[start:end]
        sentences.append(Sentence(
            idx=i, start=start, end=end, text=s,
            terms=tokenize(s, normalizer.is_stopword, normalize),
        ))
    logger.debug("segmented %d characters into %d sentences", len(text), len(sentences))
    return Document(raw_text=text, sentences=sentences)
