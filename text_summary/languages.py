"""
Per-language stemming and stopword profiles.

Each language maps to an optional Snowball stemmer (``snowballstemmer``) and
an optional stopword list (``stopwordsiso``). The two are
independent: some languages have stopwords but no stemmer, and Tamil has a
stemmer but no stopwords.
"""
from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Dict, FrozenSet, NamedTuple, Optional
import logging

import snowballstemmer
import stopwordsiso

from .errors import UnknownLanguage

logger = logging.getLogger(__name__)


class Language(Enum):
    """A document's language, valued by its ISO 639-1 code."""
    AFRIKAANS = "af"
    ARABIC = "ar"
    ARMENIAN = "hy"
    BASQUE = "eu"
    BENGALI = "bn"
    BRETON = "br"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE = "zh"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HAUSA = "ha"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    IRISH = "ga"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    KURDISH = "ku"
    LATIN = "la"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAY = "ms"
    MARATHI = "mr"
    NORWEGIAN = "no"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SOMALI = "so"
    SOTHO = "st"
    SPANISH = "es"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAGALOG = "tl"
    TAMIL = "ta"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    VIETNAMESE = "vi"
    YORUBA = "yo"
    ZULU = "zu"

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Look up a language by enum name ("english") or ISO code ("en")."""
        key = name.strip()
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        try:
            return cls(key.lower())
        except ValueError:
            raise UnknownLanguage(name) from None


class LanguageProfile(NamedTuple):
    stemmer: Optional[str]    # snowballstemmer algorithm name
    stopwords: Optional[str]  # stopwords-iso language code


_SNOWBALL = {
    Language.ARABIC, Language.DANISH, Language.DUTCH, Language.ENGLISH,
    Language.FINNISH, Language.FRENCH, Language.GERMAN, Language.GREEK,
    Language.HUNGARIAN, Language.ITALIAN, Language.NORWEGIAN,
    Language.PORTUGUESE, Language.ROMANIAN, Language.RUSSIAN,
    Language.SPANISH, Language.SWEDISH, Language.TAMIL, Language.TURKISH,
}

LANGUAGE_PROFILES: Dict[Language, LanguageProfile] = {
    lang: LanguageProfile(
        stemmer=lang.name.lower() if lang in _SNOWBALL else None,
        stopwords=None if lang is Language.TAMIL else lang.value,
    )
    for lang in Language
}


@lru_cache(maxsize=None)
def load_stopwords(code: Optional[str]) -> FrozenSet[str]:
    """Case-folded stopwords-iso list for `code` (empty for None)."""
    if code is None:
        return frozenset()
    if not stopwordsiso.has_lang(code):
        logger.warning("no stopword list for language %r, stopwords disabled", code)
        return frozenset()
    return frozenset(w.lower() for w in stopwordsiso.stopwords(code))


def check_stemmer(name: Optional[str]) -> Optional[str]:
    if name is not None and name not in snowballstemmer.algorithms():
        raise UnknownLanguage(name)
    return name
