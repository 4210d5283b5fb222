"""wordmorph Context Accumulator.

Analysis memory for a session, in three tiers:

- Immediate:  the last word record (or None)
- Short-term: FIFO of the last ``short_term_size`` records
- Long-term:  five running parameters that drift back to 0.5 over
              wall-clock time, a decaying category histogram, and
              capped sentiment / scale histories

DECAY:
------
Before each new word is blended in, the long-term tier is relaxed
toward neutral by ``long_term_decay ** elapsed_seconds``. Elapsed time
comes from an injected clock, so behaviour does not depend on how often
the host calls in.

BUILD ID: context_v1.0
"""

from __future__ import annotations

import logging
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Mapping, Optional, Sequence

import numpy as np

from ..core.config import ContextConfig

logger = logging.getLogger(__name__)


# Parameters tracked by the short- and long-term tiers
CONTEXT_FIELDS = ('motion', 'space', 'complexity', 'warmth', 'brilliance')

SENTIMENT_HISTORY_SIZE = 100
SCALE_HISTORY_SIZE = 50
TREND_WINDOW = 10
VARIETY_CATEGORIES = 5


def decay_to_neutral(value: float, factor: float) -> float:
    return 0.5 + (value - 0.5) * factor


# ============================================================================
# RECORDS
# ============================================================================

@dataclass
class WordRecord:
    """What the context remembers about one processed word.

    Attributes:
        word: The word (or phrase) as processed.
        parameters: Parameter values produced for it.
        category: Semantic category name, if any.
        valence / arousal: Sentiment of the word, if scored.
        scales: Scales selected for it, preferred first.
    """
    word: str
    parameters: Mapping[str, float] = field(default_factory=dict)
    category: Optional[str] = None
    valence: Optional[float] = None
    arousal: Optional[float] = None
    scales: Sequence[str] = ()
    magic: bool = False


@dataclass
class SentimentPoint:
    valence: float
    arousal: float
    time: float


@dataclass
class SentimentTrend:
    valence_direction: float = 0.0
    arousal_direction: float = 0.0
    stability: float = 1.0


@dataclass
class ContextSnapshot:
    """Read-only copy of the accumulator state."""
    immediate: Optional[WordRecord]
    short_term: List[WordRecord]
    long_term: Dict[str, float]
    category_weights: Dict[str, float]
    total_words: int
    session_duration: float


# ============================================================================
# ACCUMULATOR
# ============================================================================

class ContextAccumulator:
    """Three-tier context memory with elapsed-time decay.

    Parameters
    ----------
    config : ContextConfig, optional
        Capacity and decay settings.
    clock : callable, optional
        Zero-argument callable returning seconds (``time.monotonic``
        by default).
    """

    def __init__(self, config: Optional[ContextConfig] = None,
                 clock: Optional[Callable[[], float]] = None) -> None:
        self.config = config or ContextConfig()
        self._clock = clock or time.monotonic
        self._init_state()

    def _init_state(self) -> None:
        now = self._clock()
        self.immediate: Optional[WordRecord] = None
        self.short_term: Deque[WordRecord] = deque(maxlen=self.config.short_term_size)
        self.long_term: Dict[str, float] = {name: 0.5 for name in CONTEXT_FIELDS}
        self.category_weights: Dict[str, float] = {}
        self.sentiment_history: Deque[SentimentPoint] = deque(maxlen=SENTIMENT_HISTORY_SIZE)
        self.scale_history: Deque[str] = deque(maxlen=SCALE_HISTORY_SIZE)
        self.total_words = 0
        self.last_update_time = now
        self.session_start_time = now

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    # ---- Updates ------------------------------------------------------------

    def add_word(self, record: WordRecord) -> None:
        """Decay by elapsed time, then fold ``record`` into every tier."""
        now = self._clock()
        self.apply_time_decay(max(0.0, now - self.last_update_time))

        self.immediate = record
        self.short_term.append(record)
        self._update_long_term(record, now)

        self.last_update_time = now

    def apply_time_decay(self, elapsed: float) -> None:
        """Relax the long-term tier toward neutral for ``elapsed`` seconds."""
        factor = self.config.long_term_decay ** elapsed
        for name in CONTEXT_FIELDS:
            self.long_term[name] = decay_to_neutral(self.long_term[name], factor)
        for category in self.category_weights:
            self.category_weights[category] *= factor

    def _update_long_term(self, record: WordRecord, now: float) -> None:
        self.total_words += 1

        keep = self.config.parameter_decay
        blend = 1.0 - keep
        for name in CONTEXT_FIELDS:
            if name in record.parameters:
                self.long_term[name] = self.long_term[name] * keep + record.parameters[name] * blend

        if record.category:
            self.category_weights[record.category] = \
                self.category_weights.get(record.category, 0.0) + 1.0

        if record.valence is not None and record.arousal is not None:
            self.sentiment_history.append(SentimentPoint(record.valence, record.arousal, now))

        if record.scales:
            self.scale_history.append(record.scales[0])

    def reset(self) -> None:
        """Clear every tier and restart the session clock."""
        self._init_state()
        logger.info("Context reset")

    # ---- Queries ------------------------------------------------------------

    def get_short_term_averages(self) -> Dict[str, float]:
        """Mean of the context fields over short-term memory."""
        if not self.short_term:
            return {name: 0.5 for name in CONTEXT_FIELDS}
        rows = np.array([[r.parameters.get(name, 0.5) for name in CONTEXT_FIELDS]
                         for r in self.short_term], dtype=np.float64)
        means = rows.mean(axis=0)
        return {name: float(means[i]) for i, name in enumerate(CONTEXT_FIELDS)}

    def get_sentiment_trend(self) -> SentimentTrend:
        """Direction of valence / arousal over the last ten samples.

        Direction is the mean of the second half minus the mean of the
        first half; stability is 1 - 2 x population stdev of valence,
        floored at 0.
        """
        if len(self.sentiment_history) < 2:
            return SentimentTrend()
        recent = list(self.sentiment_history)[-TREND_WINDOW:]
        valence = np.array([p.valence for p in recent], dtype=np.float64)
        arousal = np.array([p.arousal for p in recent], dtype=np.float64)
        half = len(recent) // 2
        return SentimentTrend(
            valence_direction=float(valence[half:].mean() - valence[:half].mean()),
            arousal_direction=float(arousal[half:].mean() - arousal[:half].mean()),
            stability=max(0.0, 1.0 - float(np.std(valence)) * 2),
        )

    def get_dominant_category(self) -> Optional[str]:
        best = 0.0
        dominant = None
        for category, weight in self.category_weights.items():
            if weight > best:
                best = weight
                dominant = category
        return dominant

    def get_dominant_scale(self) -> Optional[str]:
        if not self.scale_history:
            return None
        best = 0
        dominant = None
        # Counter keeps first-seen order, so earlier scales win ties
        for scale, count in Counter(self.scale_history).items():
            if count > best:
                best = count
                dominant = scale
        return dominant

    def get_harmonic_density(self) -> float:
        complexity = self.get_short_term_averages()['complexity']
        variety = min(1.0, len(self.category_weights) / VARIETY_CATEGORIES)
        activity = min(1.0, len(self.short_term) / self.config.short_term_size)
        return complexity * 0.4 + variety * 0.3 + activity * 0.3

    def get_context(self) -> ContextSnapshot:
        return ContextSnapshot(
            immediate=self.immediate,
            short_term=list(self.short_term),
            long_term=dict(self.long_term),
            category_weights=dict(self.category_weights),
            total_words=self.total_words,
            session_duration=self._clock() - self.session_start_time,
        )

    def get_session_stats(self) -> Dict[str, Any]:
        duration = self._clock() - self.session_start_time
        return {
            'total_words': self.total_words,
            'duration': duration,
            'words_per_minute': self.total_words / (duration / 60.0) if duration > 0 else 0.0,
            'dominant_category': self.get_dominant_category(),
            'dominant_scale': self.get_dominant_scale(),
            'harmonic_density': self.get_harmonic_density(),
            'sentiment_trend': self.get_sentiment_trend(),
        }

    # ---- Copies -------------------------------------------------------------

    def clone(self) -> 'ContextAccumulator':
        """Independent copy sharing only the clock, for what-if processing."""
        other = ContextAccumulator(self.config, self._clock)
        other.immediate = self.immediate
        other.short_term = deque(self.short_term, maxlen=self.config.short_term_size)
        other.long_term = dict(self.long_term)
        other.category_weights = dict(self.category_weights)
        other.sentiment_history = deque(self.sentiment_history, maxlen=SENTIMENT_HISTORY_SIZE)
        other.scale_history = deque(self.scale_history, maxlen=SCALE_HISTORY_SIZE)
        other.total_words = self.total_words
        other.last_update_time = self.last_update_time
        other.session_start_time = self.session_start_time
        return other


def blend_parameters(immediate: Mapping[str, float], short_term: Mapping[str, float],
                     long_term: Mapping[str, float], weights: Sequence[float],
                     keys: Sequence[str] = CONTEXT_FIELDS) -> Dict[str, float]:
    """Weighted mix of three tiers over ``keys``; weights are renormalized."""
    w = np.asarray(weights, dtype=np.float64)
    total = w.sum()
    if total <= 0:
        return {key: immediate.get(key, 0.5) for key in keys}
    w = w / total
    return {
        key: float(immediate.get(key, 0.5) * w[0]
                   + short_term.get(key, 0.5) * w[1]
                   + long_term.get(key, 0.5) * w[2])
        for key in keys
    }
