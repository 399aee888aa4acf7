from __future__ import annotations


class SummaryError(ValueError):
    """Base class for errors raised by the summarizer API."""


class InputTooLarge(SummaryError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"can not summarize texts longer than {limit} bytes (got {size})")
        self.size = size
        self.limit = limit


class InvalidRatio(SummaryError):
    def __init__(self, ratio):
        super().__init__(f"ratio must be within 0.0..=1.0, got {ratio!r}")
        self.ratio = ratio


class InvalidSentenceCount(SummaryError):
    def __init__(self, n):
        super().__init__(f"sentence count must be a positive integer, got {n!r}")
        self.n = n


class UnknownLanguage(SummaryError):
    def __init__(self, name: str):
        super().__init__(f"unknown language: {name!r}")
        self.name = name
