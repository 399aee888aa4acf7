from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict

TermVector = Dict[str, float]  # term -> weight, unit length when non-empty
IdfTable = Dict[str, float]

@dataclass
class Sentence:
    idx: int
    start: int  # offsets into Document.raw_text
    end: int
    text: str
    terms: List[str] = field(default_factory=list)
    tf_idf_vector: TermVector = field(default_factory=dict)

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]

@dataclass
class Ranking:
    document: Document
    idf: IdfTable
    document_vector: TermVector
    core: int                      # index of the core sentence
    document_similarity: List[float]  # cosine(sentence, whole document)
    core_similarity: List[float]      # cosine(sentence, core sentence)
    order: List[int]               # indices, most similar to the core first

    @property
    def sentences(self) -> List[Sentence]:
        return self.document.sentences
