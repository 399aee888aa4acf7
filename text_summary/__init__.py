from .datatypes import Sentence, Document, Ranking, TermVector, IdfTable
from .errors import SummaryError, InputTooLarge, InvalidRatio, InvalidSentenceCount, UnknownLanguage
from .languages import Language, LANGUAGE_PROFILES
from .segmentation import split_sentences, iter_words
from .preprocessing import TermNormalizer, preprocess_text, tokenize
from .features import compute_idf, compute_tfidf_vector, cosine
from .scoring import rank_sentences
from .summarize import Summarizer, summarize, select_by_count, select_by_ratio, assemble, MAX_DOCUMENT_BYTES
from .config import SummaryConfig, load_config
