import re
from dataclasses import dataclass, asdict

import numpy as np

CONTRACTIONS = (
    "can't", "won't", "don't", "isn't", "aren't", "you're", "they're",
    "we're", "i'm", "he's", "she's", "it's", "that's", "let's",
)

FILLER_WORDS = (
    "actually", "basically", "honestly", "like", "literally",
    "sort of", "kind of", "you know", "i mean", "well",
)

_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_CONTRACTION_RE = re.compile(
    r"\b(" + "|".join(re.escape(c) for c in CONTRACTIONS) + r")\b",
    re.IGNORECASE | re.ASCII,
)
_FILLER_RES = [
    re.compile(r"\b" + re.escape(word) + r"\b", re.ASCII) for word in FILLER_WORDS
]
# Rough passive proxy: misses irregular participles, catches -ed adjectives.
_PASSIVE_RE = re.compile(r"\b(was|were|been|be|being)\s+\w+ed\b", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class TextMetrics:
    lexical_diversity: float
    sentence_length_variation: float
    contraction_rate: float
    filler_rate: float
    passive_rate: float
    starter_diversity: float
    word_count: int
    sentence_count: int

    def to_dict(self) -> dict:
        """camelCase view used in API responses."""
        raw = asdict(self)
        return {_camel(key): value for key, value in raw.items()}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _ratio(count: float, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def sentence_starter(sentence: str) -> str:
    parts = sentence.split()
    return parts[0].lower() if parts else ""


def extract_metrics(text: str) -> TextMetrics:
    normalized = text.lower()
    words = _WORD_RE.findall(normalized)
    sentences = split_sentences(text)
    n_sentences = len(sentences)

    lengths = [len(s.split()) for s in sentences]
    variation = float(np.std(lengths)) if lengths else 0.0

    contractions = len(_CONTRACTION_RE.findall(text))
    fillers = sum(len(regex.findall(normalized)) for regex in _FILLER_RES)
    passives = len(_PASSIVE_RE.findall(text))

    starters = [w for w in (sentence_starter(s) for s in sentences) if w]

    return TextMetrics(
        lexical_diversity=_ratio(len(set(words)), len(words)),
        sentence_length_variation=variation,
        contraction_rate=_ratio(contractions, n_sentences),
        filler_rate=_ratio(fillers, n_sentences),
        passive_rate=_ratio(passives, n_sentences),
        starter_diversity=_ratio(len(set(starters)), len(starters)),
        word_count=len(words),
        sentence_count=n_sentences,
    )
