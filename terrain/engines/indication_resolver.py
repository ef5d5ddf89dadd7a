"""
Terrain — Indication Resolver

Resolves a free-text indication string to a canonical IndicationRecord.

Matching order:
    1. Exact match on the canonical name (after normalization)
    2. Exact match on any synonym
    3. Fuzzy match, scored in [0, 1] by score_match(); the best candidate
       wins if it clears MIN_MATCH_CONFIDENCE and the query contains every
       word of the candidate key

Normalization lower-cases, drops apostrophes and collapses every run of
non-alphanumeric characters to one space, so "Alzheimer's Disease",
"alzheimers  disease" and "ALZHEIMERS-DISEASE" are the same key.

Fuzzy tiers (best first) and their score bands:
    exact       1.0
    prefix      0.80 - 0.90   one string starts the other on a word boundary,
                              or the query is a partially typed leading word
    substring   0.65 - 0.75   one string appears inside the other on word boundaries
    token       0.00 - 0.60   Jaccard overlap of word tokens

Discriminating tokens separate diseases that otherwise share words:
numbers ("type 1" vs "type 2") and negated words ("non small" vs "small").
A query that carries a number the record does not know, or names a word the
record negates, is capped at CONFLICT_SCORE_CAP.

Partial queries ("lung", "alzh") rank in search_indications() but never
resolve: a fuzzy resolution needs the whole candidate key in the query.

Ties are broken by tier, then by dataset order, so resolution is total and
referentially transparent.
"""

import logging
import re
from types import MappingProxyType
from typing import List, Optional, Tuple

from ..exceptions import IndicationNotFoundError, ReferenceDataError

logger = logging.getLogger("terrain.engine.resolver")

MIN_MATCH_CONFIDENCE = 0.5
CONFLICT_SCORE_CAP = 0.25

TIER_RANK = {"exact": 0, "prefix": 1, "substring": 2, "token": 3}

NEGATIONS = frozenset({"non", "not", "no", "without"})

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    text = text.lower().replace("'", "").replace("’", "")
    return _NON_ALNUM.sub(" ", text).strip()


def _tokens(text: str) -> frozenset:
    """Word tokens of a normalized string; "non small" becomes "!small"."""
    tokens = set()
    negated = False
    for word in text.split():
        if word in NEGATIONS:
            negated = True
            continue
        tokens.add(f"!{word}" if negated else word)
        negated = False
    return frozenset(tokens)


def _has_digit(token: str) -> bool:
    return any(ch.isdigit() for ch in token)


def conflicts(query_tokens: frozenset, record_tokens: frozenset) -> bool:
    """True if the query carries a token that rules the record out."""
    record_has_numbers = any(_has_digit(t) for t in record_tokens)
    for token in query_tokens:
        if token in record_tokens:
            continue
        if token.startswith("!"):
            if token[1:] in record_tokens:
                return True
        elif f"!{token}" in record_tokens:
            return True
        elif record_has_numbers and _has_digit(token):
            return True
    return False


def score_match(query: str, candidate: str) -> Tuple[float, str]:
    """
    Score how well a normalized query matches a normalized candidate.

    Returns:
        (score, tier) with score in [0, 1] and tier one of TIER_RANK.
    """
    if not query or not candidate:
        return 0.0, "token"
    if query == candidate:
        return 1.0, "exact"

    shorter, longer = sorted((query, candidate), key=len)
    coverage = len(shorter) / len(longer)

    if longer.startswith(shorter + " "):
        return 0.80 + 0.10 * coverage, "prefix"
    # partially typed word, e.g. "alzh"
    if len(query) >= 3 and candidate.startswith(query):
        return 0.80 + 0.05 * coverage, "prefix"
    if f" {shorter} " in f" {longer} ":
        return 0.65 + 0.10 * coverage, "substring"

    q_tokens, c_tokens = _tokens(query), _tokens(candidate)
    if not q_tokens or not c_tokens:
        return 0.0, "token"
    jaccard = len(q_tokens & c_tokens) / len(q_tokens | c_tokens)
    return 0.60 * jaccard, "token"


class IndicationIndex:
    """
    Immutable lookup maps over the indication records.

    Built once when the reference data loads; resolution never mutates it.
    """

    def __init__(self, records):
        self.records = tuple(records)
        by_name = {}
        by_synonym = {}
        candidates = []
        record_tokens = []
        for position, record in enumerate(self.records):
            key = normalize(record.name)
            if key in by_name:
                raise ReferenceDataError(f"Duplicate indication name: {record.name}")
            by_name[key] = record
            vocabulary = set(_tokens(key))
            candidates.append((key, _tokens(key), "name", position, record))
            for synonym in sorted(record.synonyms):
                syn_key = normalize(synonym)
                if not syn_key:
                    continue
                if syn_key in by_synonym and by_synonym[syn_key] is not record:
                    logger.warning(
                        f"Synonym '{synonym}' of {record.name} already maps to "
                        f"{by_synonym[syn_key].name}; keeping the first"
                    )
                    continue
                by_synonym.setdefault(syn_key, record)
                vocabulary |= _tokens(syn_key)
                candidates.append((syn_key, _tokens(syn_key), synonym, position, record))
            record_tokens.append(frozenset(vocabulary))
        self.by_name = MappingProxyType(by_name)
        self.by_synonym = MappingProxyType(by_synonym)
        self.candidates = tuple(candidates)
        self.record_tokens = tuple(record_tokens)

    def rank(self, query: str, whole_keys_only: bool = False) -> List[dict]:
        """
        Best fuzzy score per record, ordered best first.

        With whole_keys_only, a candidate key counts only when every one of
        its words appears in the query.
        """
        key = normalize(query)
        q_tokens = _tokens(key)
        best = {}
        for cand_key, cand_tokens, label, position, record in self.candidates:
            if whole_keys_only and not cand_tokens <= q_tokens:
                continue
            score, tier = score_match(key, cand_key)
            if score <= 0:
                continue
            if conflicts(q_tokens, self.record_tokens[position]):
                score = min(score, CONFLICT_SCORE_CAP)
            sort_key = (-score, TIER_RANK[tier], position)
            current = best.get(position)
            if current is None or sort_key < current["sort_key"]:
                best[position] = {
                    "record": record,
                    "score": score,
                    "tier": tier,
                    "matched_on": record.name if label == "name" else label,
                    "sort_key": sort_key,
                }
        return sorted(best.values(), key=lambda m: m["sort_key"])


def resolve_indication(name: str, index: Optional[IndicationIndex] = None):
    """
    Resolve a free-text indication to its reference record.

    Raises:
        IndicationNotFoundError: if no whole-key match clears MIN_MATCH_CONFIDENCE.
    """
    if index is None:
        from ..reference_data import get_reference_data
        index = get_reference_data().index

    key = normalize(name)
    if key in index.by_name:
        logger.debug(f"Resolved '{name}' by canonical name")
        return index.by_name[key]
    if key in index.by_synonym:
        record = index.by_synonym[key]
        logger.debug(f"Resolved '{name}' by synonym -> {record.name}")
        return record

    ranked = index.rank(name, whole_keys_only=True)
    if ranked and ranked[0]["score"] >= MIN_MATCH_CONFIDENCE:
        match = ranked[0]
        logger.debug(
            f"Resolved '{name}' by {match['tier']} match on '{match['matched_on']}' "
            f"-> {match['record'].name} (score {match['score']:.2f})"
        )
        return match["record"]

    raise IndicationNotFoundError(name)


def search_indications(query: str, limit: int = 10, index: Optional[IndicationIndex] = None) -> List[dict]:
    """
    Ranked autocomplete matches for a partial indication string.

    Unlike resolve_indication(), partial words are accepted and no confidence
    threshold is applied beyond a positive score.
    """
    if index is None:
        from ..reference_data import get_reference_data
        index = get_reference_data().index
    if not normalize(query):
        return []
    return [
        {
            "name": m["record"].name,
            "therapy_area": m["record"].therapy_area,
            "matched_on": m["matched_on"],
            "score": round(m["score"], 3),
        }
        for m in index.rank(query)[:limit]
    ]
