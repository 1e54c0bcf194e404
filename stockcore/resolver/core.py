from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, Mapping, Optional, Sequence, TypeVar
import logging

from stockcore.config.env import ResolverConfig
from stockcore.errors import InvalidArgument

logger = logging.getLogger(__name__)

P = TypeVar("P")


@dataclass(frozen=True)
class Record(Generic[P]):
    """A named entity plus an opaque payload forwarded unchanged on match."""
    name: str
    payload: Optional[P] = None

    @staticmethod
    def from_row(row: Mapping[str, Any], name_key: str = "Name") -> "Record[Mapping[str, Any]]":
        # Schemaless rows: name may be missing or non-text
        name = row.get(name_key)
        return Record(name=str(name) if name is not None else "", payload=row)


@dataclass(frozen=True)
class MatchResult(Generic[P]):
    query: str
    record: Optional[Record[P]] = None
    stage: Optional[str] = None  # exact|substring|similarity|ticker
    score: Optional[float] = None

    @property
    def matched(self) -> bool:
        return self.record is not None

    def as_dict(self) -> Dict[str, Any]:
        if self.record is None:
            return {}
        payload = self.record.payload
        if isinstance(payload, Mapping):
            return dict(payload)
        return {"name": self.record.name}


def levenshtein(a: str, b: str) -> int:
    # Unit-cost edit distance on the lower-cased names; two DP rows, O(len(a)*len(b))
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            ins = curr[j - 1] + 1
            dele = prev[j] + 1
            sub = prev[j - 1] + (ca != cb)
            curr.append(min(ins, dele, sub))
        prev = curr
    return prev[-1]


def _word_overlap(a: str, b: str) -> float:
    words_a = a.split()
    words_b = b.split()
    if not words_a or not words_b:
        return 0.0
    matched = sum(1 for w in words_a if any(w in o or o in w for o in words_b))
    return matched / max(len(words_a), len(words_b))


def similarity(a: str, b: str, config: Optional[ResolverConfig] = None) -> float:
    """Score two already lower-cased strings in [0, 1].

    - identical => 1.0
    - either empty => 0.0
    - one contains the other => containment score (0.8)
    - else 1 - lev/max_len, plus a word-overlap bonus (weight 0.3), capped at 1.0
    """
    cfg = config or ResolverConfig()
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    if a in b or b in a:
        return cfg.containment_score
    edit = 1.0 - levenshtein(a, b) / max(len(a), len(b))
    bonus = _word_overlap(a, b) * cfg.word_bonus_weight
    return min(1.0, edit + bonus)


def resolve(
    query: str,
    corpus: Sequence[Record[P]],
    config: Optional[ResolverConfig] = None,
) -> MatchResult[P]:
    """Resolve a free-text name to the single best record in `corpus`.

    Stages, first hit wins:
    1) exact name, case-insensitive (first in corpus order)
    2) query as a case-insensitive substring of the name (first in corpus order)
    3) highest `similarity`, earliest record on ties; accepted only if > min_similarity
    The corpus is never mutated and no state is kept between calls.
    """
    if query is None or not str(query).strip():
        raise InvalidArgument("query must be a non-empty string")
    q = str(query).strip()
    ql = q.lower()

    if not corpus:
        return MatchResult(query=q)

    for rec in corpus:
        if rec.name.lower() == ql:
            logger.debug("resolved %r by exact name: %r", q, rec.name)
            return MatchResult(query=q, record=rec, stage="exact")

    for rec in corpus:
        if ql in rec.name.lower():
            logger.debug("resolved %r by substring: %r", q, rec.name)
            return MatchResult(query=q, record=rec, stage="substring")

    cfg = config or ResolverConfig()
    best: Optional[Record[P]] = None
    best_score = -1.0
    for rec in corpus:
        score = similarity(ql, rec.name.lower(), cfg)
        # strict '>' keeps the earliest record on ties
        if score > best_score:
            best, best_score = rec, score

    if best is not None and best_score > cfg.min_similarity:
        logger.debug("resolved %r by similarity %.3f: %r", q, best_score, best.name)
        return MatchResult(query=q, record=best, stage="similarity", score=best_score)

    logger.debug("no match for %r (best score %.3f)", q, best_score)
    return MatchResult(query=q)


TICKER_FIELDS = ("ticker", "Ticker", "TICKER", "symbol", "Symbol", "SYMBOL", "Stock Ticker", "Stock Symbol")


def find_by_ticker(ticker: str, corpus: Sequence[Record[P]]) -> MatchResult[P]:
    """First record whose payload holds `ticker` (case-insensitive, exact) under any TICKER_FIELDS key."""
    if ticker is None or not str(ticker).strip():
        raise InvalidArgument("ticker must be a non-empty string")
    t = str(ticker).strip()
    tl = t.lower()
    for rec in corpus:
        payload = rec.payload
        if not isinstance(payload, Mapping):
            continue
        for key in TICKER_FIELDS:
            value = payload.get(key)
            if value is not None and str(value).lower() == tl:
                logger.debug("found %r under %r: %r", t, key, rec.name)
                return MatchResult(query=t, record=rec, stage="ticker")
    return MatchResult(query=t)
