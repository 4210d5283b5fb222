"""wordmorph Sentiment Layer.

Valence / arousal scoring from a tiered word lexicon, and the fixed
affine mapping from a sentiment sample to synthesis parameters.

MODIFIER RULES:
---------------
1. Amplifier pushes the next sentiment word 1.5x further from 0.5
2. Diminisher pulls it to half its distance from 0.5
3. Negator reflects the next word's valence (v -> 1 - v)
4. Pending modifiers reach only the next sentiment-bearing token; any
   other non-modifier token clears them
5. A word carrying both valence and arousal uses an amplifier or
   diminisher for its valence only

BUILD ID: sentiment_v1.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .lexicon import (
    AMPLIFIER_FACTOR,
    AMPLIFIERS,
    AROUSAL_TIERS,
    AROUSAL_WORDS,
    DIMINISHER_FACTOR,
    DIMINISHERS,
    NEGATORS,
    VALENCE_TIERS,
    VALENCE_WORDS,
)
from .semantics import clean_token, tokenize


# ============================================================================
# RECORDS
# ============================================================================

@dataclass
class SentimentSample:
    """Result of scoring a piece of text.

    Attributes:
        valence: Mean valence of matched tokens (0.5 when none).
        arousal: Mean arousal of matched tokens (0.5 when none).
        coverage: Matched values / (2 x tokens), 0 for empty text.
        valence_words: (word, adjusted value) pairs.
        arousal_words: (word, adjusted value) pairs.
    """
    valence: float = 0.5
    arousal: float = 0.5
    coverage: float = 0.0
    valence_words: List[Tuple[str, float]] = field(default_factory=list)
    arousal_words: List[Tuple[str, float]] = field(default_factory=list)
    total_words: int = 0

    @property
    def sentiment_words(self) -> int:
        return len(self.valence_words) + len(self.arousal_words)


@dataclass(frozen=True)
class EmotionalState:
    quadrant: str
    emotion: str
    intensity: float
    valence: float
    arousal: float


EMOTIONS: Dict[str, Dict[str, str]] = {
    'excited': {'low': 'pleased', 'medium': 'happy', 'high': 'ecstatic'},
    'calm': {'low': 'content', 'medium': 'peaceful', 'high': 'serene'},
    'tense': {'low': 'uneasy', 'medium': 'anxious', 'high': 'terrified'},
    'sad': {'low': 'melancholic', 'medium': 'sorrowful', 'high': 'devastated'},
}


# ============================================================================
# LEXICON
# ============================================================================

class SentimentLexicon:
    """Word -> valence / arousal tables plus modifier word sets.

    Tiers are applied in declaration order, so a word listed in two
    tiers takes the later tier's value.
    """

    def __init__(
        self,
        valence_words: Optional[Mapping[str, Mapping[str, Iterable[str]]]] = None,
        arousal_words: Optional[Mapping[str, Mapping[str, Iterable[str]]]] = None,
        amplifiers: Iterable[str] = AMPLIFIERS,
        diminishers: Iterable[str] = DIMINISHERS,
        negators: Iterable[str] = NEGATORS,
    ) -> None:
        self.valence = self._build(VALENCE_WORDS if valence_words is None else valence_words,
                                   VALENCE_TIERS)
        self.arousal = self._build(AROUSAL_WORDS if arousal_words is None else arousal_words,
                                   AROUSAL_TIERS)
        self.amplifiers = frozenset(amplifiers)
        self.diminishers = frozenset(diminishers)
        self.negators = frozenset(negators)

    @staticmethod
    def _build(groups, tiers) -> Dict[str, float]:
        table: Dict[str, float] = {}
        for polarity, by_tier in groups.items():
            for tier, words in by_tier.items():
                value = tiers[polarity][tier]
                for word in words:
                    table[word] = value
        return table

    def modifier_kind(self, word: str) -> Optional[str]:
        """'amplifier', 'diminisher', 'negator' or None, checked in that order."""
        if word in self.amplifiers:
            return 'amplifier'
        if word in self.diminishers:
            return 'diminisher'
        if word in self.negators:
            return 'negator'
        return None


def _stretch(value: float, factor: float) -> float:
    """Scale the distance of ``value`` from 0.5 by ``factor`` and clamp."""
    distance = abs(value - 0.5)
    direction = 1.0 if value > 0.5 else -1.0
    return max(0.0, min(1.0, 0.5 + distance * factor * direction))


# ============================================================================
# SCORER
# ============================================================================

class SentimentScorer:
    """Lexicon-based valence / arousal scorer."""

    def __init__(self, lexicon: Optional[SentimentLexicon] = None) -> None:
        self.lexicon = lexicon if lexicon is not None else SentimentLexicon()

    def analyze_sentiment(self, text: str) -> SentimentSample:
        tokens = tokenize(text)
        lex = self.lexicon

        factor = 1.0
        negated = False
        valence_words: List[Tuple[str, float]] = []
        arousal_words: List[Tuple[str, float]] = []

        for token in tokens:
            word = clean_token(token)

            kind = lex.modifier_kind(word)
            if kind == 'amplifier':
                factor = AMPLIFIER_FACTOR
                continue
            if kind == 'diminisher':
                factor = DIMINISHER_FACTOR
                continue
            if kind == 'negator':
                negated = True
                continue

            has_valence = word in lex.valence
            has_arousal = word in lex.arousal
            if has_valence:
                value = lex.valence[word]
                if negated:
                    value = 1.0 - value
                valence_words.append((word, _stretch(value, factor)))
                # A word with both values spends the modifier on valence
                factor = 1.0
            if has_arousal:
                arousal_words.append((word, _stretch(lex.arousal[word], factor)))

            # Consumed by a sentiment word, or cleared by anything else
            factor = 1.0
            negated = False

        valence = sum(v for _, v in valence_words) / len(valence_words) if valence_words else 0.5
        arousal = sum(a for _, a in arousal_words) / len(arousal_words) if arousal_words else 0.5
        if tokens:
            coverage = min(1.0, (len(valence_words) + len(arousal_words)) / (len(tokens) * 2))
        else:
            coverage = 0.0

        return SentimentSample(
            valence=valence,
            arousal=arousal,
            coverage=coverage,
            valence_words=valence_words,
            arousal_words=arousal_words,
            total_words=len(tokens),
        )

    def analyze_word(self, word: str) -> Dict[str, object]:
        """Raw lexicon values for one word, without modifiers."""
        clean = clean_token(word.lower())
        return {
            'word': clean,
            'valence': self.lexicon.valence.get(clean, 0.5),
            'arousal': self.lexicon.arousal.get(clean, 0.5),
            'has_valence': clean in self.lexicon.valence,
            'has_arousal': clean in self.lexicon.arousal,
        }

    def sentiment_trajectory(self, text: str, window: int = 5) -> List[Dict[str, object]]:
        """Score consecutive windows of ``window`` tokens."""
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        tokens = tokenize(text)
        points = []
        for start in range(0, len(tokens), window):
            sample = self.analyze_sentiment(' '.join(tokens[start:start + window]))
            points.append({
                'position': start / len(tokens),
                'valence': sample.valence,
                'arousal': sample.arousal,
                'quadrant': emotional_quadrant(sample.valence, sample.arousal),
            })
        return points


# ============================================================================
# MAPPING
# ============================================================================

def map_to_synth_params(sample: SentimentSample) -> Dict[str, float]:
    """Fixed affine mapping from valence / arousal to synthesis parameters."""
    v = sample.valence
    a = sample.arousal
    return {
        'brilliance': 0.3 + v * 0.5,
        'motion': 0.2 + v * 0.3 + a * 0.3,
        'space': 0.2 + (1 - v) * 0.4 + (1 - a) * 0.2,
        'reverb_mix': 0.2 + (1 - v) * 0.3,
        'tempo': 0.5 + (a - 0.5) * 0.6,
        'attack_sharpness': 0.3 + a * 0.5,
        'release_time': 0.1 + (1 - a) * 0.8,
        'drift_speed': 0.1 + (1 - a) * 0.3,
        'harmonic_density': 0.3 + v * 0.2 + a * 0.2,
        'filter_cutoff': 0.3 + v * 0.4 + a * 0.2,
    }


def emotional_quadrant(valence: float, arousal: float) -> str:
    if valence >= 0.5:
        return 'excited' if arousal >= 0.5 else 'calm'
    return 'tense' if arousal >= 0.5 else 'sad'


def emotional_state(valence: float, arousal: float) -> EmotionalState:
    """Quadrant plus a named emotion graded by distance from neutral."""
    quadrant = emotional_quadrant(valence, arousal)
    intensity = max(abs(valence - 0.5), abs(arousal - 0.5)) * 2
    level = 'medium'
    if intensity < 0.3:
        level = 'low'
    if intensity > 0.7:
        level = 'high'
    return EmotionalState(
        quadrant=quadrant,
        emotion=EMOTIONS[quadrant][level],
        intensity=intensity,
        valence=valence,
        arousal=arousal,
    )


def interpolate_sentiment(start: SentimentSample, end: SentimentSample,
                          t: float) -> SentimentSample:
    """Linear blend of valence and arousal (t=0 -> start, t=1 -> end)."""
    return SentimentSample(
        valence=start.valence + (end.valence - start.valence) * t,
        arousal=start.arousal + (end.arousal - start.arousal) * t,
    )
