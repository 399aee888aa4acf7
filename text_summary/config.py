from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os

from .errors import SummaryError
from .languages import Language
from .summarize import Summarizer, check_count, check_ratio

MODES = ("ratio", "sentences")
AGNOSTIC = "agnostic"


@dataclass(frozen=True)
class SummaryConfig:
    """Defaults for callers of the summarizer (the demo app among them).

    `language` None means language agnostic.
    """
    language: Optional[Language] = Language.ENGLISH
    mode: str = "ratio"
    ratio: float = 0.2
    sentences: int = 3

    def __post_init__(self):
        if self.mode not in MODES:
            raise SummaryError(f"mode must be one of {', '.join(MODES)}, got {self.mode!r}")
        check_ratio(self.ratio)
        check_count(self.sentences)

    def summarizer(self) -> Summarizer:
        if self.language is None:
            return Summarizer.language_agnostic()
        return Summarizer.new(self.language)


def _parse_language(value: str) -> Optional[Language]:
    if value.strip().lower() == AGNOSTIC:
        return None
    return Language.from_name(value)


def _parse_number(name: str, value: str, kind):
    try:
        return kind(value.strip())
    except ValueError:
        raise SummaryError(f"{name} must be a {kind.__name__}, got {value!r}") from None


def load_config(env: Optional[Mapping[str, str]] = None) -> SummaryConfig:
    """Read SUMMARY_LANGUAGE, SUMMARY_MODE, SUMMARY_RATIO and SUMMARY_SENTENCES.

    Unset or blank variables keep the SummaryConfig defaults.
    """
    env = os.environ if env is None else env
    kwargs = {}
    language = (env.get("SUMMARY_LANGUAGE") or "").strip()
    if language:
        kwargs["language"] = _parse_language(language)
    mode = (env.get("SUMMARY_MODE") or "").strip().lower()
    if mode:
        kwargs["mode"] = mode
    ratio = (env.get("SUMMARY_RATIO") or "").strip()
    if ratio:
        kwargs["ratio"] = _parse_number("SUMMARY_RATIO", ratio, float)
    sentences = (env.get("SUMMARY_SENTENCES") or "").strip()
    if sentences:
        kwargs["sentences"] = _parse_number("SUMMARY_SENTENCES", sentences, int)
    return SummaryConfig(**kwargs)
