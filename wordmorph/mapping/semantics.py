"""wordmorph Semantic Layer.

Keyword lookup that turns words into semantic categories, their base
parameter fragments and their preferred scales.

A SemanticDictionary is built once from a mapping of categories and
holds the reverse word -> categories index. A SemanticClassifier owns
one dictionary and answers every text query against it.

BUILD ID: semantics_v1.0
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .lexicon import (
    DEFAULT_SCALE,
    SEMANTIC_CATEGORIES,
    SEMANTIC_FIELDS,
    SemanticCategory,
)

_NON_LETTERS = re.compile(r'[^a-z]')

NEUTRAL_CATEGORY = 'neutral'


def tokenize(text: str) -> List[str]:
    """Lowercase and split on whitespace."""
    return text.lower().split()


def clean_token(token: str) -> str:
    """Strip everything but a-z from an already-lowercased token."""
    return _NON_LETTERS.sub('', token)


def neutral_fragment() -> Dict[str, float]:
    return {name: 0.5 for name in SEMANTIC_FIELDS}


# ============================================================================
# RESULT RECORDS
# ============================================================================

@dataclass
class CategoryMatch:
    count: int = 0
    words: List[str] = field(default_factory=list)


@dataclass
class SemanticAnalysis:
    """Per-category match counts for one piece of text."""
    matches: Dict[str, CategoryMatch]
    unmatched_words: List[str]
    total_words: int
    matched_words: int

    @property
    def total_matches(self) -> int:
        return sum(m.count for m in self.matches.values())


@dataclass
class SemanticMatch:
    """A category choice (or blend) with its scales and fragment.

    ``category`` is None for a multi-category blend and ``'neutral'``
    when nothing matched.
    """
    category: Optional[str]
    scales: List[str]
    parameters: Dict[str, float]
    confidence: float = 0.0
    matched_words: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    word: Optional[str] = None


# ============================================================================
# DICTIONARY
# ============================================================================

class SemanticDictionary:
    """Immutable category table plus its reverse keyword index.

    Parameters
    ----------
    categories : mapping of name -> SemanticCategory, optional
        Category table. Iteration order decides ties. Defaults to the
        built-in SEMANTIC_CATEGORIES.
    """

    def __init__(self, categories: Optional[Mapping[str, SemanticCategory]] = None) -> None:
        self._categories: Dict[str, SemanticCategory] = dict(
            SEMANTIC_CATEGORIES if categories is None else categories)
        self._index: Dict[str, Tuple[str, ...]] = {}
        index: Dict[str, List[str]] = {}
        for name, category in self._categories.items():
            for keyword in category.keywords:
                members = index.setdefault(keyword, [])
                if name not in members:
                    members.append(name)
        self._index = {word: tuple(names) for word, names in index.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._categories

    def __getitem__(self, name: str) -> SemanticCategory:
        return self._categories[name]

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def names(self) -> List[str]:
        return list(self._categories)

    def items(self):
        return self._categories.items()

    def categories_for(self, word: str) -> Tuple[str, ...]:
        """Category names containing ``word``, in table order (empty if none)."""
        return self._index.get(word, ())

    def keywords(self) -> List[str]:
        return list(self._index)


# ============================================================================
# CLASSIFIER
# ============================================================================

class SemanticClassifier:
    """Keyword classifier over a SemanticDictionary.

    Parameters
    ----------
    dictionary : SemanticDictionary, optional
        Lookup table (the built-in one when omitted).
    default_scale : str
        Scale reported when nothing matches.
    """

    def __init__(self, dictionary: Optional[SemanticDictionary] = None,
                 default_scale: str = DEFAULT_SCALE) -> None:
        self.dictionary = dictionary if dictionary is not None else SemanticDictionary()
        self.default_scale = default_scale

    def _neutral(self) -> SemanticMatch:
        return SemanticMatch(
            category=NEUTRAL_CATEGORY,
            scales=[self.default_scale],
            parameters=neutral_fragment(),
            confidence=0.0,
        )

    def analyze_semantics(self, text: str) -> SemanticAnalysis:
        """Count category matches for every token of ``text``."""
        tokens = tokenize(text)
        matches = {name: CategoryMatch() for name in self.dictionary.names}
        unmatched: List[str] = []

        for token in tokens:
            word = clean_token(token)
            names = self.dictionary.categories_for(word)
            if not names:
                unmatched.append(word)
                continue
            for name in names:
                matches[name].count += 1
                matches[name].words.append(word)

        return SemanticAnalysis(
            matches=matches,
            unmatched_words=unmatched,
            total_words=len(tokens),
            matched_words=len(tokens) - len(unmatched),
        )

    def get_dominant_category(self, text: str) -> SemanticMatch:
        """Category with the most matches; first in table order wins ties."""
        analysis = self.analyze_semantics(text)

        dominant = None
        best = 0
        for name, match in analysis.matches.items():
            if match.count > best:
                best = match.count
                dominant = name

        if dominant is None or analysis.total_words == 0:
            return self._neutral()

        category = self.dictionary[dominant]
        return SemanticMatch(
            category=dominant,
            scales=list(category.scales),
            parameters=dict(category.parameters),
            confidence=min(1.0, best / analysis.total_words),
            matched_words=list(analysis.matches[dominant].words),
        )

    def get_blended_parameters(self, text: str) -> SemanticMatch:
        """Match-weighted blend of every matched category.

        Fragments are weighted by count / total matches. Scale weights
        accumulate the same way and the three heaviest are returned,
        earlier-seen scales first on equal weight.
        """
        analysis = self.analyze_semantics(text)
        total = analysis.total_matches
        if total == 0:
            return self._neutral()

        blended = {name: 0.0 for name in SEMANTIC_FIELDS}
        scale_weights: Dict[str, float] = {}
        matched: List[str] = []

        for name, match in analysis.matches.items():
            if match.count == 0:
                continue
            weight = match.count / total
            category = self.dictionary[name]
            matched.append(name)
            for fld in SEMANTIC_FIELDS:
                blended[fld] += category.parameters.get(fld, 0.5) * weight
            for scale in category.scales:
                scale_weights[scale] = scale_weights.get(scale, 0.0) + weight

        # sorted() is stable, so insertion order breaks ties
        ranked = sorted(scale_weights.items(), key=lambda kv: kv[1], reverse=True)
        return SemanticMatch(
            category=None,
            scales=[scale for scale, _ in ranked[:3]],
            parameters=blended,
            confidence=min(1.0, analysis.matched_words / analysis.total_words),
            categories=matched,
        )

    def lookup_word(self, word: str) -> Optional[SemanticMatch]:
        """Exact lookup of a single word, or None when it is unknown."""
        clean = clean_token(word.lower())
        names = self.dictionary.categories_for(clean)
        if not names:
            return None
        primary = self.dictionary[names[0]]
        return SemanticMatch(
            category=names[0],
            scales=list(primary.scales),
            parameters=dict(primary.parameters),
            confidence=1.0,
            matched_words=[clean],
            categories=list(names),
            word=clean,
        )

    # ---- Dictionary queries -------------------------------------------------

    def all_keywords(self) -> List[str]:
        return self.dictionary.keywords()

    def dictionary_stats(self) -> Dict[str, object]:
        return {
            'total_categories': len(self.dictionary),
            'total_keywords': len(self.dictionary.keywords()),
            'category_sizes': {name: len(c.keywords) for name, c in self.dictionary.items()},
        }
